"""HTTP adapter – HttpExportProducer, the exports REST API as a RemoteProducer."""
from __future__ import annotations

from typing import Any

import httpx

from mp_exports.adapters.http.client import HttpxHttpClient
from mp_exports.application.export.job import ExportJob
from mp_exports.application.export.request import (
    DashboardRef,
    ExportContext,
    ExportFormat,
    ExportTarget,
    InsightRef,
    RemoteExportContext,
)
from mp_exports.config.settings import ExportSettings
from mp_exports.config.validation import MissingRequiredSettingError
from mp_exports.kernel.errors import RemoteError

__all__ = ["HttpExportProducer"]


class HttpExportProducer:
    """Talks to ``/api/projects/<project_id>/exports/``.

    Errors come out of :class:`HttpxHttpClient` already classified; a body
    that cannot be read as an export job is a :class:`RemoteError` too.
    """

    def __init__(self, client: HttpxHttpClient, project_id: str | int) -> None:
        self._client = client
        self._base = f"/api/projects/{project_id}/exports"

    @classmethod
    def from_settings(cls, settings: ExportSettings, **client_kwargs: Any) -> "HttpExportProducer":
        """Build a producer with its own client for ``settings.api_base_url``."""
        if not settings.project_id:
            raise MissingRequiredSettingError("EXPORTS_PROJECT_ID")
        client = HttpxHttpClient(base_url=settings.api_base_url, **client_kwargs)
        return cls(client, settings.project_id)

    @property
    def client(self) -> HttpxHttpClient:
        return self._client

    def content_url(self, job_id: int | str) -> str:
        return f"{self._base}/{job_id}/content?download=true"

    async def create_job(
        self,
        format: ExportFormat,
        target: ExportTarget | None,
        context: ExportContext | None,
        expires_after: str,
    ) -> ExportJob:
        payload: dict[str, Any] = {
            "export_format": format.value,
            "dashboard": None,
            "insight": None,
            "expires_after": expires_after,
        }
        if isinstance(target, DashboardRef):
            payload["dashboard"] = target.id
        elif isinstance(target, InsightRef):
            payload["insight"] = target.id
        if isinstance(context, RemoteExportContext):
            payload["export_context"] = context.to_payload()
        response = await self._client.post(f"{self._base}/", json=payload)
        return self._parse(response, f"{self._base}/", default_format=format)

    async def get_job(self, job_id: int | str) -> ExportJob:
        url = f"{self._base}/{job_id}/"
        response = await self._client.get(url)
        return self._parse(response, url)

    async def download_content(self, job_id: int | str) -> bytes:
        response = await self._client.get(self.content_url(job_id))
        return response.content

    @staticmethod
    def _parse(
        response: httpx.Response, url: str, default_format: ExportFormat | None = None
    ) -> ExportJob:
        try:
            body = response.json()
        except ValueError as exc:
            raise RemoteError(service=url, message="Export response is not JSON", cause=exc) from exc
        if not isinstance(body, dict):
            raise RemoteError(service=url, message=f"Unexpected export payload: {body!r}")
        try:
            return ExportJob.from_payload(body, default_format=default_format)
        except (KeyError, ValueError) as exc:
            raise RemoteError(
                service=url, message=f"Malformed export payload: {exc}", cause=exc
            ) from exc
