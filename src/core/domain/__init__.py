"""Modelos, reglas y cálculo del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2) y la
  contabilidad de tiempo.
- El dominio no conoce HTTP, CLI, ni relojes reales: solo conceptos del problema.
"""
