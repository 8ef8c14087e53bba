"""Interfaces/abstracciones del Core (Ports).

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones, nunca de
  un backend HTTP, un fichero o un reloj real.
"""
