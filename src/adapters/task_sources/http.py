"""Repositorio de tareas sobre HTTP.

Fase 1:
- `GET <base_url>/tasks` devolviendo la forma de cable del Right Port.
- Sin reintentos: la política de retry pertenece al llamador.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from adapters.http_client import build_async_client
from adapters.task_sources.payload import extract_task_records
from core.config import AppSettings
from core.domain.errors import FetchError
from core.interfaces.task_repository import TaskRepository

logger = structlog.get_logger(__name__)


class HttpTaskRepository(TaskRepository):
    """Obtiene las tareas de un backend REST."""

    _path = "/tasks"

    def __init__(
        self,
        base_url: str,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._settings = settings or AppSettings()
        self._client = client

    @property
    def url(self) -> str:
        return f"{self._base_url}{self._path}"

    async def fetch_tasks(self) -> list[dict[str, Any]]:
        if self._client is not None:
            return await self._get(self._client)
        async with build_async_client(self._settings) as client:
            return await self._get(client)

    async def _get(self, client: httpx.AsyncClient) -> list[dict[str, Any]]:
        logger.debug("http_fetch_started", url=self.url)
        try:
            response = await client.get(self.url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"backend answered HTTP {exc.response.status_code} for {self.url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"request to {self.url} failed: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"backend returned invalid JSON for {self.url}") from exc
        return extract_task_records(payload, source=self.url)
