"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estructural y documentación autocontenida (Field) sin
  acoplar el Core a librerías de I/O.
- Los alias camelCase reflejan el contrato de cable (Right/Left Port) mientras
  que el código Python trabaja con snake_case.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Son objetos de valor inmutables (frozen): se reconstruyen en cada fetch.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


def _as_utc(value: datetime) -> datetime:
    # Timestamps sin offset se interpretan como UTC para poder compararlos.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class WorkUnit(BaseModel):
    """Intervalo contiguo de trabajo sobre una tarea.

    `finished_at=None` significa que el intervalo sigue abierto: `[started_at, now)`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    started_at: datetime = Field(
        ...,
        alias="startedAt",
        description="Inicio del intervalo.",
    )
    finished_at: datetime | None = Field(
        default=None,
        alias="finishedAt",
        description="Fin del intervalo; ausente si está en curso.",
    )

    @field_validator("started_at", "finished_at")
    @classmethod
    def normalize_tz(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value) if value is not None else None

    @property
    def is_open(self) -> bool:
        return self.finished_at is None


class Task(BaseModel):
    """Tarea con presupuesto de tiempo y sus unidades de trabajo.

    Por qué separar forma e invariantes:
    - Aquí solo se valida la *forma* (tipos, strings no vacíos). `isCurrent` y
      `timeAllowanceInSeconds` son estrictos: `"7200"` o `1` no se convierten.
    - Las invariantes entre campos (solapes, intervalos abiertos, `is_current`)
      viven en `core.domain.validation` para poder reportarlas con contexto.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(
        ...,
        min_length=1,
        description="Identificador opaco y estable entre fetches.",
    )
    title: str = Field(
        ...,
        min_length=1,
        description="Título visible de la tarea.",
    )
    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Momento de creación.",
    )
    is_current: bool = Field(
        ...,
        alias="isCurrent",
        strict=True,
        description="True si la tarea tiene una unidad de trabajo en curso.",
    )
    time_allowance_in_seconds: int = Field(
        ...,
        alias="timeAllowanceInSeconds",
        strict=True,
        description="Duración presupuestada (segundos).",
    )
    work_units: tuple[WorkUnit, ...] = Field(
        ...,
        alias="workUnits",
        description="Unidades de trabajo en orden cronológico de inicio.",
    )

    @field_validator("created_at")
    @classmethod
    def normalize_tz(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @property
    def open_work_units(self) -> list[WorkUnit]:
        return [unit for unit in self.work_units if unit.is_open]


class AccountingResult(BaseModel):
    """Resultado numérico de la contabilidad de tiempo para una tarea."""

    model_config = ConfigDict(frozen=True)

    elapsed_seconds: int = Field(..., ge=0)
    remaining_seconds: int
    is_overtime: bool


class TaskListItemViewModel(BaseModel):
    """Estructura lista para render, independiente del framework de UI.

    Se serializa con alias camelCase (`model_dump(by_alias=True)`) para cumplir
    el contrato del Left Port.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    elapsed_display: str = Field(..., alias="elapsedDisplay")
    remaining_display: str = Field(..., alias="remainingDisplay")
    is_overtime: bool = Field(..., alias="isOvertime")
