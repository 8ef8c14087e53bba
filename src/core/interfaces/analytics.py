"""Right Port: analítica.

Best-effort: un fallo de analítica nunca cambia el resultado de una llamada
del Left Port.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Analytics(Protocol):
    def track(self, event: str, properties: dict[str, Any]) -> None:
        ...
