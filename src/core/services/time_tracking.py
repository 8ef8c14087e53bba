"""Time tracking orchestration (Left Port implementation).

The UI talks only to `TimeTrackingService`. The service fetches raw records
from the Right Port, pushes them through the validation boundary, runs the
accounting with a single `now` per call and maps the results to view models.
Side-effects (logging, analytics, hooks) stay out of the pure domain code.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

import structlog

from core.config import AppSettings, InvalidTaskPolicy
from core.domain.accounting import compute, has_clock_skew
from core.domain.errors import FetchError, ValidationError
from core.domain.models import Task, TaskListItemViewModel
from core.domain.validation import parse_task
from core.interfaces.analytics import Analytics
from core.interfaces.clock import Clock
from core.interfaces.task_repository import TaskRepository
from core.services.view_model_mapper import to_view_model

logger = structlog.get_logger(__name__)


@dataclass
class ServiceHooks:
    """Optional callbacks for UI layers (rejected tasks)."""

    on_validation_error: Callable[[ValidationError], None] | None = None


@dataclass
class TaskListReport:
    """Output of a single `get_task_report()` call."""

    items: list[TaskListItemViewModel]
    now: datetime
    rejected: list[ValidationError] = field(default_factory=list)


class TimeTrackingService:
    """Facade hiding repository, clock, accounting and mapping from the UI."""

    def __init__(
        self,
        *,
        repository: TaskRepository,
        clock: Clock,
        settings: AppSettings | None = None,
        analytics: Analytics | None = None,
        hooks: ServiceHooks | None = None,
        policy: InvalidTaskPolicy | None = None,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._settings = settings or AppSettings()
        self._analytics = analytics
        self._hooks = hooks or ServiceHooks()
        self._policy = policy or self._settings.invalid_task_policy

    @property
    def policy(self) -> InvalidTaskPolicy:
        return self._policy

    async def get_task_list(self) -> list[TaskListItemViewModel]:
        report = await self.get_task_report()
        return report.items

    async def get_task_report(self) -> TaskListReport:
        try:
            records = await self._fetch()
        except FetchError as exc:
            logger.error("fetch_failed", error=exc.message)
            self._track("task_list_failed", {"reason": "fetch", "error": exc.message})
            raise

        tasks, rejected = self._validate(records)

        now = self._clock.now()
        items: list[TaskListItemViewModel] = []
        for task in tasks:
            if has_clock_skew(task, now):
                logger.debug("clock_skew_clamped", task_id=task.id, now=now.isoformat())
            items.append(to_view_model(task, compute(task, now)))

        logger.info("task_list_loaded", count=len(items), rejected=len(rejected))
        self._track(
            "task_list_loaded",
            {
                "count": len(items),
                "rejected": len(rejected),
                "overtime": sum(1 for item in items if item.is_overtime),
            },
        )
        return TaskListReport(items=items, now=now, rejected=rejected)

    async def _fetch(self) -> list[Any]:
        timeout = self._settings.fetch_timeout_seconds
        try:
            records = await asyncio.wait_for(self._repository.fetch_tasks(), timeout=timeout)
        except FetchError:
            raise
        except asyncio.CancelledError as exc:
            # Only the adapter's own cancellation becomes a FetchError; the
            # caller being cancelled must keep propagating.
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            raise FetchError("task repository fetch was cancelled") from exc
        except asyncio.TimeoutError as exc:
            raise FetchError(f"task repository timed out after {timeout:g}s") from exc
        except Exception as exc:
            raise FetchError(f"task repository failed: {exc}") from exc

        if not isinstance(records, list):
            raise FetchError(
                f"task repository returned {type(records).__name__}, expected a list"
            )
        return records

    def _validate(self, records: list[Any]) -> tuple[list[Task], list[ValidationError]]:
        tasks: list[Task] = []
        rejected: list[ValidationError] = []
        for record in records:
            try:
                tasks.append(parse_task(record))
            except ValidationError as exc:
                logger.warning("task_rejected", task_id=exc.task_id, reason=exc.reason)
                if self._policy is InvalidTaskPolicy.STRICT:
                    self._track(
                        "task_list_failed",
                        {"reason": "validation", "task_id": exc.task_id},
                    )
                    raise
                rejected.append(exc)
                if self._hooks.on_validation_error:
                    self._hooks.on_validation_error(exc)
        return tasks, rejected

    def _track(self, event: str, properties: dict[str, Any]) -> None:
        if self._analytics is None:
            return
        try:
            self._analytics.track(event, properties)
        except Exception as exc:
            logger.warning("analytics_failed", analytics_event=event, error=str(exc))
