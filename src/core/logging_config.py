"""Configuración de logging (structlog).

Por qué structlog:
- Eventos con nombre y campos (`task_rejected`, task_id=...) en vez de
  strings formateados: fáciles de filtrar y de volcar como JSON.
- Los logs van a stderr para no ensuciar la salida JSON de la CLI.
"""

from __future__ import annotations

import logging
import sys

import structlog

from core.config import AppSettings


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configura structlog y el logging estándar según `AppSettings`."""

    settings = settings or AppSettings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
