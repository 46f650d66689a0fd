"""Application export – export-job orchestration."""
from mp_exports.application.export.request import (
    DashboardRef,
    ExportContext,
    ExportFormat,
    ExportRequest,
    ExportTarget,
    InsightRef,
    LocalExportContext,
    RemoteExportContext,
)
from mp_exports.application.export.config import (
    DATA_FORMATS,
    ExpiryWindow,
    ExportConfigResolver,
    ExportRunConfig,
    PollBudget,
)
from mp_exports.application.export.job import ExportJob, ExportRun, JobState
from mp_exports.application.export.outcome import Outcome, OutcomeStatus
from mp_exports.application.export.classifier import ExportHandling, classify
from mp_exports.application.export.persister import Artifact, ArtifactPersister, FileSystemArtifactPersister
from mp_exports.application.export.ports import NotificationSink, RemoteProducer, TelemetrySink
from mp_exports.application.export.local_handler import LocalExportHandler
from mp_exports.application.export.orchestrator import RemoteExportOrchestrator
from mp_exports.application.export.sinks import EventTelemetrySink, LoggingNotificationSink
from mp_exports.application.export.export_service import ExportService

__all__ = [
    "Artifact",
    "ArtifactPersister",
    "DATA_FORMATS",
    "DashboardRef",
    "EventTelemetrySink",
    "ExpiryWindow",
    "ExportConfigResolver",
    "ExportContext",
    "ExportFormat",
    "ExportHandling",
    "ExportJob",
    "ExportRequest",
    "ExportRun",
    "ExportRunConfig",
    "ExportService",
    "ExportTarget",
    "FileSystemArtifactPersister",
    "InsightRef",
    "JobState",
    "LocalExportContext",
    "LocalExportHandler",
    "LoggingNotificationSink",
    "NotificationSink",
    "Outcome",
    "OutcomeStatus",
    "PollBudget",
    "RemoteExportContext",
    "RemoteExportOrchestrator",
    "RemoteProducer",
    "TelemetrySink",
    "classify",
]
