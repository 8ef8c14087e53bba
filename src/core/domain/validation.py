"""Frontera de validación entre el formato de cable y el dominio.

Ningún registro llega a `core.domain.accounting` sin pasar por aquí:
primero se valida la forma (Pydantic) y después las invariantes 1-5.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from core.domain.errors import ValidationError
from core.domain.models import Task


def _record_id(record: Any) -> str | None:
    if isinstance(record, Mapping):
        value = record.get("id")
        if isinstance(value, str) and value:
            return value
    return None


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "malformed record"


def check_invariants(task: Task) -> None:
    """Raise `ValidationError` if `task` breaks any domain invariant."""

    if task.time_allowance_in_seconds < 0:
        raise ValidationError("time allowance must be >= 0", task_id=task.id)

    units = task.work_units
    for index, unit in enumerate(units):
        if unit.finished_at is not None and unit.finished_at < unit.started_at:
            raise ValidationError(
                f"work unit {index} finishes before it starts", task_id=task.id
            )

    open_count = len(task.open_work_units)
    if open_count > 1:
        raise ValidationError(
            f"{open_count} work units are in progress (at most one allowed)",
            task_id=task.id,
        )

    for index, (current, following) in enumerate(zip(units, units[1:])):
        if current.finished_at is None:
            raise ValidationError(
                f"work unit {index} is in progress but is not the last one",
                task_id=task.id,
            )
        if following.started_at < current.started_at:
            raise ValidationError(
                f"work units {index} and {index + 1} are not in chronological order",
                task_id=task.id,
            )
        if current.finished_at > following.started_at:
            raise ValidationError(
                f"work units {index} and {index + 1} overlap", task_id=task.id
            )

    if task.is_current != (open_count == 1):
        raise ValidationError(
            "isCurrent does not match the in-progress work units", task_id=task.id
        )


def parse_task(record: Any) -> Task:
    """Convierte un registro crudo del Right Port en un `Task` confiable."""

    task_id = _record_id(record)
    if not isinstance(record, Mapping):
        raise ValidationError("record is not an object", task_id=task_id)
    try:
        task = Task.model_validate(record)
    except PydanticValidationError as exc:
        raise ValidationError(_describe(exc), task_id=task_id) from exc
    check_invariants(task)
    return task
