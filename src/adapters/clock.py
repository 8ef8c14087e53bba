"""Adaptadores del Port `Clock`."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


class SystemClock:
    """Reloj de pared en UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Reloj congelado en un instante; útil para tests y ejecuciones reproducibles."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, seconds: float) -> None:
        self._instant = self._instant + timedelta(seconds=seconds)
