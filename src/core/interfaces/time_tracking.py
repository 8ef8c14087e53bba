"""Left Port: la única interfaz que la UI puede llamar.

La UI solo renderiza `TaskListItemViewModel`; nunca lee `Task`/`WorkUnit` ni
hace aritmética de duraciones.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import TaskListItemViewModel


@runtime_checkable
class TimeTrackingPort(Protocol):
    async def get_task_list(self) -> list[TaskListItemViewModel]:
        """Lista ordenada de view models; lanza `FetchError` si falla el origen."""

        ...
