"""Application export – LocalExportHandler."""
from __future__ import annotations

from mp_exports.application.export.outcome import Outcome
from mp_exports.application.export.persister import Artifact, ArtifactPersister
from mp_exports.application.export.ports import NotificationSink
from mp_exports.application.export.request import LocalExportContext
from mp_exports.kernel.errors import PersistenceError
from mp_exports.observability.logging import get_logger

__all__ = ["LocalExportHandler"]

logger = get_logger(__name__)


class LocalExportHandler:
    """Saves an artifact whose bytes the caller already holds."""

    def __init__(self, persister: ArtifactPersister, notifications: NotificationSink) -> None:
        self._persister = persister
        self._notifications = notifications

    @staticmethod
    def materialize(context: LocalExportContext) -> Artifact:
        data = context.raw_data
        if isinstance(data, str):
            content = data.encode("utf-8")
        elif isinstance(data, (bytes, bytearray, memoryview)):
            content = bytes(data)
        else:
            raise TypeError(f"raw_data must be bytes or str, got {type(data).__name__}")
        return Artifact(content=content, filename=context.filename, media_type=context.media_type)

    def handle_local(self, context: LocalExportContext) -> Outcome:
        try:
            artifact = self.materialize(context)
            self._persister.persist(artifact)
        except Exception as exc:  # noqa: BLE001 – any save failure ends the run as persist-error
            error = PersistenceError(context.filename, f"Export failed: {exc}", cause=exc)
            logger.error("export.local.failed", filename=context.filename, error=repr(exc))
            self._notifications.on_error(error.message)
            return Outcome.failure(error)

        logger.info("export.local.saved", filename=context.filename, media_type=context.media_type)
        self._notifications.on_success()
        return Outcome.success()
