"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/fichero) y el servicio lean config de forma
  consistente.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InvalidTaskPolicy(str, Enum):
    """What `get_task_list()` does when a fetched task fails validation."""

    SKIP = "skip"
    STRICT = "strict"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "tasktimer"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "tasktimer"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "tasktimer"
    return Path.home() / ".config" / "tasktimer"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# tasktimer user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters/servicio.
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKTIMER_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    tasks_api_url: str | None = Field(
        default=None,
        description="Base URL del backend de tareas (se consulta `<url>/tasks`).",
    )
    tasks_file: Path | None = Field(
        default=None,
        description="Fichero JSON local con la lista de tareas (alternativa al backend).",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request HTTP (segundos).",
    )
    user_agent: str = Field(
        default="tasktimer/0.1",
        min_length=1,
        description="User-Agent para peticiones al backend.",
    )
    fetch_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Tiempo máximo para que el repositorio entregue la lista completa.",
    )
    invalid_task_policy: InvalidTaskPolicy = Field(
        default=InvalidTaskPolicy.SKIP,
        description="skip: excluir tareas inválidas; strict: fallar la llamada entera.",
    )
    refresh_interval_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Intervalo de refresco para `list --watch`.",
    )
    analytics_enabled: bool = Field(
        default=True,
        description="Emitir eventos de analítica (vía logs estructurados).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_format: str = Field(
        default="console",
        pattern="^(console|json)$",
        description="Formato de logs: console (dev) o json (máquinas).",
    )
