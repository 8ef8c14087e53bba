# tests/conftest.py
import logging
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
import structlog

from adapters.clock import FixedClock
from adapters.task_sources import InMemoryTaskRepository
from core.config import AppSettings
from core.interfaces.analytics import Analytics

T0 = datetime(2024, 5, 1, 9, 0, 0, tzinfo=timezone.utc)


def at(seconds: float) -> datetime:
    """Instant `seconds` after T0."""
    return T0 + timedelta(seconds=seconds)


def iso(seconds: float) -> str:
    return at(seconds).isoformat().replace("+00:00", "Z")


def work_unit(start: float, end: float | None) -> dict:
    return {"startedAt": iso(start), "finishedAt": iso(end) if end is not None else None}


def task_record(
    task_id: str = "task-1",
    *,
    title: str = "Write report",
    allowance: int = 7200,
    units: list[dict] | None = None,
    is_current: bool | None = None,
) -> dict:
    units = units or []
    if is_current is None:
        is_current = any(u["finishedAt"] is None for u in units)
    return {
        "id": task_id,
        "title": title,
        "createdAt": iso(-86400),
        "isCurrent": is_current,
        "timeAllowanceInSeconds": allowance,
        "workUnits": units,
    }


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests configure logging against CliRunner streams; undo it after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings():
    """Settings isolated from any .env on the developer machine."""
    return AppSettings(_env_file=None, fetch_timeout_seconds=2.0)


@pytest.fixture
def clock():
    return FixedClock(at(4600))


@pytest.fixture
def scenario_record():
    """Allowance 7200s, one finished hour, one unit open since T0+4000s."""
    return task_record(
        "scenario",
        allowance=7200,
        units=[work_unit(0, 3600), work_unit(4000, None)],
    )


@pytest.fixture
def repository(scenario_record):
    return InMemoryTaskRepository(
        [
            scenario_record,
            task_record("idle", title="Plan sprint", allowance=1800),
        ]
    )


@pytest.fixture
def mock_analytics():
    """Returns a mock implementation of the Analytics port."""
    return MagicMock(spec=Analytics)
