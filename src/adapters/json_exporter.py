"""Exportación JSON de la lista de tareas.

Por qué JSON:
- Interoperabilidad: el formato es exactamente el contrato del Left Port
  (camelCase), así que otra UI puede consumirlo tal cual.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.domain.models import TaskListItemViewModel


def task_list_payload(items: Sequence[TaskListItemViewModel]) -> list[dict[str, object]]:
    return [item.model_dump(mode="json", by_alias=True) for item in items]


def dumps_task_list(items: Sequence[TaskListItemViewModel]) -> str:
    return json.dumps(task_list_payload(items), ensure_ascii=False, indent=2) + "\n"


def export_task_list_json(*, items: Sequence[TaskListItemViewModel], output_path: Path) -> Path:
    """Exporta los view models a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_task_list(items), encoding="utf-8")
    return output_path
