"""Contrato del reloj.

Por qué un Port para algo tan simple:
- El Core nunca llama a `datetime.now()`: recibe el instante actual de un
  `Clock` inyectado, lo que hace cada cálculo reproducible en tests.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Fuente del instante actual (timezone-aware)."""

    def now(self) -> datetime:
        ...
