"""Repositorio de tareas sobre un fichero JSON local."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from adapters.task_sources.payload import extract_task_records
from core.domain.errors import FetchError
from core.interfaces.task_repository import TaskRepository


class JsonFileTaskRepository(TaskRepository):
    """Lee la lista de tareas de disco en cada llamada."""

    def __init__(self, path: Path) -> None:
        self._path = path

    async def fetch_tasks(self) -> list[dict[str, Any]]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FetchError(f"cannot read tasks file {self._path}: {exc}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise FetchError(f"tasks file {self._path} is not valid JSON: {exc}") from exc
        return extract_task_records(data, source=str(self._path))
