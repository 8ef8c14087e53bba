"""Repositorio fake/estático en memoria (demos y tests)."""

from __future__ import annotations

import copy
from typing import Any, Iterable

from core.interfaces.task_repository import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    """Devuelve copias de registros fijos; `error` simula un backend caído."""

    def __init__(
        self,
        records: Iterable[dict[str, Any]] = (),
        *,
        error: Exception | None = None,
    ) -> None:
        self._records = list(records)
        self._error = error
        self.calls = 0

    async def fetch_tasks(self) -> list[dict[str, Any]]:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return copy.deepcopy(self._records)
