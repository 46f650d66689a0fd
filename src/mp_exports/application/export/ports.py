"""Application export – ports for the remote producer and the outer sinks."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from mp_exports.application.export.job import ExportJob
from mp_exports.application.export.request import ExportContext, ExportFormat, ExportTarget

__all__ = ["NotificationSink", "RemoteProducer", "TelemetrySink"]


@runtime_checkable
class RemoteProducer(Protocol):
    """Port: the service that renders export jobs.

    Implementations raise only
    :class:`~mp_exports.kernel.errors.TransientNetworkError` for
    connectivity failures and :class:`~mp_exports.kernel.errors.RemoteError`
    for everything else.
    """

    async def create_job(
        self,
        format: ExportFormat,
        target: ExportTarget | None,
        context: ExportContext | None,
        expires_after: str,
    ) -> ExportJob: ...

    async def get_job(self, job_id: int | str) -> ExportJob: ...

    async def download_content(self, job_id: int | str) -> bytes: ...


@runtime_checkable
class NotificationSink(Protocol):
    """Port: user-facing lifecycle notifications (toast, status line, ...)."""

    def on_start(self) -> None: ...
    def on_success(self) -> None: ...
    def on_error(self, detail: str | None = None) -> None: ...


@runtime_checkable
class TelemetrySink(Protocol):
    """Port: product analytics."""

    def record(self, event_name: str, properties: dict[str, Any]) -> None: ...
