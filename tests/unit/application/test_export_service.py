"""Unit tests for ExportService – classification and dispatch."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from mp_exports.application.export import (
    DashboardRef,
    ExportConfigResolver,
    ExportFormat,
    ExportJob,
    ExportRequest,
    ExportService,
    InsightRef,
    LocalExportContext,
    OutcomeStatus,
)
from mp_exports.application.feature_flags import (
    LONG_LIVED_EXPORTS,
    FeatureFlag,
    FeatureFlagProvider,
    InMemoryFeatureFlagProvider,
)
from mp_exports.config import ExportSettings
from mp_exports.kernel.errors import MissingJobIdError
from mp_exports.testing.fakes import (
    FakeClock,
    FakeSleeper,
    InMemoryArtifactPersister,
    RecordingNotificationSink,
    RecordingTelemetrySink,
    ScriptedRemoteProducer,
)


def _service(
    producer: ScriptedRemoteProducer,
    *,
    long_lived: bool = False,
    persister: InMemoryArtifactPersister | None = None,
    flags: FeatureFlagProvider | None = None,
) -> tuple[ExportService, RecordingNotificationSink, RecordingTelemetrySink, InMemoryArtifactPersister]:
    flags = flags or InMemoryFeatureFlagProvider().set(LONG_LIVED_EXPORTS, long_lived)
    notifications = RecordingNotificationSink()
    telemetry = RecordingTelemetrySink()
    persister = persister or InMemoryArtifactPersister()
    clock = FakeClock()
    service = ExportService(
        producer,
        persister,
        ExportConfigResolver(ExportSettings(), flags),
        notifications=notifications,
        telemetry=telemetry,
        clock=clock,
        sleep=FakeSleeper(clock),
    )
    return service, notifications, telemetry, persister


class _UnreachableFlags(FeatureFlagProvider):
    async def is_enabled(self, flag: FeatureFlag, context: dict[str, Any] | None = None) -> bool:
        raise ConnectionError("flag service down")


def _local(raw: bytes | str = b"a,b\n1,2\n") -> ExportRequest:
    return ExportRequest(
        ExportFormat.CSV,
        context=LocalExportContext(raw_data=raw, media_type="text/csv", filename="table.csv"),
    )


class TestLocalDispatch:
    def test_local_request_never_calls_producer(self) -> None:
        producer = ScriptedRemoteProducer.pending()
        service, notifications, telemetry, persister = _service(producer)
        outcome = asyncio.run(service.trigger_export(_local()))
        assert outcome.succeeded
        assert producer.calls == 0
        assert persister.saved[0].filename == "table.csv"
        assert notifications.kinds == ["success"]
        assert telemetry.records == []

    def test_local_save_failure(self) -> None:
        producer = ScriptedRemoteProducer.pending()
        service, notifications, _, _ = _service(
            producer, persister=InMemoryArtifactPersister(fail_with=PermissionError("denied"))
        )
        outcome = asyncio.run(service.trigger_export(_local()))
        assert outcome.status is OutcomeStatus.FAILURE
        assert outcome.reason == "persist-error"
        assert notifications.kinds == ["error"]
        assert producer.calls == 0


class TestRemoteDispatch:
    def test_remote_request_downloads_when_ready(self) -> None:
        producer = ScriptedRemoteProducer.pending(ExportFormat.PNG, [True])
        service, notifications, telemetry, persister = _service(producer)
        outcome = asyncio.run(service.trigger_export(ExportRequest(ExportFormat.PNG, DashboardRef(3))))
        assert outcome.succeeded
        assert len(persister.saved) == 1
        assert notifications.kinds == ["start", "success"]
        assert telemetry.names == ["export succeeded"]
        assert telemetry.records[0][1]["dashboard"] == 3

    def test_default_expiry_is_ten_minutes(self) -> None:
        producer = ScriptedRemoteProducer.pending(ExportFormat.PNG, [True])
        service, *_ = _service(producer)
        asyncio.run(service.trigger_export(ExportRequest(ExportFormat.PNG, InsightRef(1))))
        assert producer.create_calls[0]["expires_after"] == "2026-01-01T12:10:00+00:00"

    def test_long_lived_flag_extends_expiry_and_skips_download(self) -> None:
        producer = ScriptedRemoteProducer.pending(ExportFormat.PNG, [True])
        service, notifications, _, persister = _service(producer, long_lived=True)
        outcome = asyncio.run(service.trigger_export(ExportRequest(ExportFormat.PNG, InsightRef(1))))
        assert outcome.succeeded
        assert producer.create_calls[0]["expires_after"] == "2026-01-01T18:00:00+00:00"
        assert producer.download_calls == []
        assert persister.saved == []
        assert notifications.count("success") == 1

    def test_csv_request_gets_long_poll_budget(self) -> None:
        producer = ScriptedRemoteProducer.pending(ExportFormat.CSV)
        service, *_ = _service(producer)
        outcome = asyncio.run(service.trigger_export(ExportRequest(ExportFormat.CSV, InsightRef(1))))
        assert outcome.status is OutcomeStatus.TIMEOUT
        assert outcome.attempts == 300

    def test_download_existing_job(self) -> None:
        producer = ScriptedRemoteProducer.pending(content=b"%PDF")
        service, _, _, persister = _service(producer)
        job = ExportJob(id=5, format=ExportFormat.PDF, has_content=True, filename="board.pdf")
        asyncio.run(service.download(job))
        assert persister.saved[0].content == b"%PDF"
        assert persister.saved[0].media_type == "application/pdf"

    def test_download_job_without_id_is_rejected(self) -> None:
        producer = ScriptedRemoteProducer.pending()
        service, _, _, persister = _service(producer)
        job = ExportJob(id=None, format=ExportFormat.PDF, has_content=True)
        with pytest.raises(MissingJobIdError):
            asyncio.run(service.download(job))
        assert producer.download_calls == []
        assert persister.saved == []


class TestConfigResolutionFailure:
    def test_flag_lookup_failure_ends_run_with_one_error(self) -> None:
        producer = ScriptedRemoteProducer.pending()
        service, notifications, telemetry, _ = _service(producer, flags=_UnreachableFlags())
        outcome = asyncio.run(service.trigger_export(ExportRequest(ExportFormat.PNG, InsightRef(1))))
        assert outcome.status is OutcomeStatus.FAILURE
        assert outcome.reason == "remote-error"
        assert "flag service down" in outcome.detail
        assert notifications.kinds == ["start", "error"]
        assert telemetry.names == ["export failed"]
        assert producer.calls == 0

    def test_flag_lookup_failure_keeps_cause(self) -> None:
        producer = ScriptedRemoteProducer.pending()
        service, *_ = _service(producer, flags=_UnreachableFlags())
        outcome = asyncio.run(service.trigger_export(ExportRequest(ExportFormat.PNG, InsightRef(1))))
        assert isinstance(outcome.error.cause, ConnectionError)
