"""Contabilidad de tiempo de una tarea.

Por qué funciones puras:
- `now` entra como argumento: el resultado depende solo de (task, now), así
  que los tests no necesitan reloj ni red.
- No re-valida: recibe tareas que ya pasaron `core.domain.validation`.
"""

from __future__ import annotations

from datetime import datetime

from core.domain.models import AccountingResult, Task, WorkUnit


def _whole_seconds(start: datetime, end: datetime) -> int:
    seconds = int((end - start).total_seconds())
    return seconds if seconds > 0 else 0


def _unit_seconds(unit: WorkUnit, now: datetime) -> int:
    end = unit.finished_at if unit.finished_at is not None else now
    # Un intervalo abierto que empieza después de `now` aporta 0.
    return _whole_seconds(unit.started_at, end)


def elapsed_seconds(task: Task, now: datetime) -> int:
    """Total de segundos trabajados en `task` hasta `now`."""

    return sum(_unit_seconds(unit, now) for unit in task.work_units)


def has_clock_skew(task: Task, now: datetime) -> bool:
    """True si la unidad en curso empieza después de `now` (snapshot desfasado)."""

    return any(unit.is_open and unit.started_at > now for unit in task.work_units)


def compute(task: Task, now: datetime) -> AccountingResult:
    elapsed = elapsed_seconds(task, now)
    remaining = task.time_allowance_in_seconds - elapsed
    return AccountingResult(
        elapsed_seconds=elapsed,
        remaining_seconds=remaining,
        is_overtime=remaining < 0,
    )
