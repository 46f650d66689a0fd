"""Application export – ExportService, the single entry point."""
from __future__ import annotations

from mp_exports.application.export.classifier import ExportHandling, classify
from mp_exports.application.export.config import ExportConfigResolver
from mp_exports.application.export.job import ExportJob
from mp_exports.application.export.local_handler import LocalExportHandler
from mp_exports.application.export.orchestrator import RemoteExportOrchestrator, Sleep
from mp_exports.application.export.outcome import Outcome
from mp_exports.application.export.persister import Artifact, ArtifactPersister
from mp_exports.application.export.ports import NotificationSink, RemoteProducer, TelemetrySink
from mp_exports.application.export.request import ExportRequest, LocalExportContext
from mp_exports.application.export.sinks import EventTelemetrySink, LoggingNotificationSink
from mp_exports.kernel.time import Clock

__all__ = ["ExportService"]


class ExportService:
    """Routes an :class:`ExportRequest` to the local or remote path.

    Usage::

        service = ExportService(
            producer=HttpExportProducer(client, project_id="1"),
            persister=FileSystemArtifactPersister("downloads"),
            resolver=ExportConfigResolver(settings, flags),
        )
        outcome = await service.trigger_export(
            ExportRequest(ExportFormat.CSV, InsightRef(42))
        )
        outcome.raise_for_status()
    """

    def __init__(
        self,
        producer: RemoteProducer,
        persister: ArtifactPersister,
        resolver: ExportConfigResolver,
        *,
        notifications: NotificationSink | None = None,
        telemetry: TelemetrySink | None = None,
        clock: Clock | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        notifications = notifications or LoggingNotificationSink()
        self._local = LocalExportHandler(persister, notifications)
        self._remote = RemoteExportOrchestrator(
            producer,
            persister,
            notifications,
            telemetry or EventTelemetrySink(),
            resolver=resolver,
            clock=clock,
            sleep=sleep,
        )

    async def trigger_export(self, request: ExportRequest) -> Outcome:
        context = request.context
        if classify(request) is ExportHandling.LOCAL and isinstance(context, LocalExportContext):
            return self._local.handle_local(context)
        return await self._remote.run(request)

    async def download(self, job: ExportJob) -> Artifact:
        """Save the content of an already finished job."""
        return await self._remote.download(job)
