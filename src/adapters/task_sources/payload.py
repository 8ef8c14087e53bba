"""Normalización del payload de lista de tareas.

Los backends devuelven `[...]` o `{"tasks": [...]}`; ambos son aceptados.
"""

from __future__ import annotations

from typing import Any

from core.domain.errors import FetchError


def extract_task_records(payload: Any, *, source: str) -> list[dict[str, Any]]:
    if isinstance(payload, dict) and "tasks" in payload:
        payload = payload["tasks"]
    if not isinstance(payload, list):
        raise FetchError(f"{source}: expected a list of tasks, got {type(payload).__name__}")
    return payload
