"""Adaptadores del Port `Analytics`.

`LoggingAnalytics` emite cada evento como log estructurado; un SDK real de
analítica se conectaría implementando el mismo `track`.
"""

from __future__ import annotations

from typing import Any

import structlog

from core.interfaces.analytics import Analytics


class LoggingAnalytics(Analytics):
    def __init__(self) -> None:
        self._logger = structlog.get_logger("tasktimer.analytics")

    def track(self, event: str, properties: dict[str, Any]) -> None:
        self._logger.info("analytics_event", analytics_event=event, **properties)


class NullAnalytics(Analytics):
    def track(self, event: str, properties: dict[str, Any]) -> None:
        return None
