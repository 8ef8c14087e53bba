"""Fuentes de tareas (adaptadores del Right Port).

Por qué un paquete:
- Agrupa un módulo por origen (HTTP, fichero JSON, memoria).
- Cada módulo implementa `core.interfaces.task_repository.TaskRepository`.
"""

from adapters.task_sources.http import HttpTaskRepository
from adapters.task_sources.in_memory import InMemoryTaskRepository
from adapters.task_sources.json_file import JsonFileTaskRepository

__all__ = [
    "HttpTaskRepository",
    "InMemoryTaskRepository",
    "JsonFileTaskRepository",
]
