"""Errores del dominio.

Por qué una jerarquía propia:
- Los adaptadores (HTTP, fichero, fake) fallan de formas distintas; el Core
  las normaliza a `FetchError` para que la UI solo conozca un contrato.
- `ValidationError` transporta el id de la tarea para poder reportarla sin
  romper el resto de la lista.
"""

from __future__ import annotations


class TaskTimerError(Exception):
    """Base class for all tasktimer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class FetchError(TaskTimerError):
    """The task repository could not deliver the task list."""


class ValidationError(TaskTimerError):
    """A fetched task record violates its shape or a domain invariant."""

    def __init__(self, reason: str, *, task_id: str | None = None) -> None:
        self.reason = reason
        self.task_id = task_id
        label = task_id if task_id is not None else "<unknown>"
        super().__init__(f"Invalid task '{label}': {reason}")
