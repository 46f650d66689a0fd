"""Unit tests for ExportRequest, classification, ExportJob and Outcome."""

from __future__ import annotations

import pytest

from mp_exports.application.export import (
    DashboardRef,
    ExportFormat,
    ExportHandling,
    ExportJob,
    ExportRequest,
    InsightRef,
    JobState,
    LocalExportContext,
    Outcome,
    OutcomeStatus,
    RemoteExportContext,
    classify,
)
from mp_exports.kernel.errors import MissingJobIdError, ValidationError


# ---------------------------------------------------------------------------
# ExportRequest
# ---------------------------------------------------------------------------


class TestExportRequest:
    def test_frozen(self) -> None:
        req = ExportRequest(ExportFormat.PNG, InsightRef(1))
        with pytest.raises((AttributeError, TypeError)):
            req.format = ExportFormat.CSV  # type: ignore[misc]

    def test_format_coerced_from_media_type(self) -> None:
        req = ExportRequest("text/csv", InsightRef(1))  # type: ignore[arg-type]
        assert req.format is ExportFormat.CSV

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExportRequest("text/plain", InsightRef(1))  # type: ignore[arg-type]

    def test_remote_request_needs_target(self) -> None:
        with pytest.raises(ValidationError):
            ExportRequest(ExportFormat.PNG)

    def test_local_request_needs_no_target(self) -> None:
        ctx = LocalExportContext(raw_data=b"", media_type="text/csv", filename="a.csv")
        assert ExportRequest(ExportFormat.CSV, context=ctx).target is None

    def test_bad_target_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExportRequest(ExportFormat.PNG, 5)  # type: ignore[arg-type]

    def test_dashboard_and_insight_accessors(self) -> None:
        assert ExportRequest(ExportFormat.PNG, DashboardRef(3)).dashboard == 3
        assert ExportRequest(ExportFormat.PNG, DashboardRef(3)).insight is None
        assert ExportRequest(ExportFormat.PNG, InsightRef(4)).insight == 4

    def test_remote_context_parameters_are_read_only(self) -> None:
        params = {"path": "/api/query"}
        ctx = RemoteExportContext(params)
        params["path"] = "changed"
        assert ctx.parameters["path"] == "/api/query"
        with pytest.raises(TypeError):
            ctx.parameters["path"] = "x"  # type: ignore[index]

    def test_tracking_properties(self) -> None:
        req = ExportRequest(ExportFormat.CSV, InsightRef(9), RemoteExportContext({"limit": 10}))
        assert req.tracking_properties() == {
            "export_format": "text/csv",
            "dashboard": None,
            "insight": 9,
            "export_context": {"limit": 10},
        }


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    def test_local_context(self) -> None:
        ctx = LocalExportContext(raw_data=b"1", media_type="text/csv", filename="a.csv")
        assert classify(ExportRequest(ExportFormat.CSV, context=ctx)) is ExportHandling.LOCAL

    def test_remote_context(self) -> None:
        req = ExportRequest(ExportFormat.CSV, InsightRef(1), RemoteExportContext({"q": 1}))
        assert classify(req) is ExportHandling.REMOTE

    def test_no_context_is_remote(self) -> None:
        assert classify(ExportRequest(ExportFormat.PNG, DashboardRef(1))) is ExportHandling.REMOTE


# ---------------------------------------------------------------------------
# ExportJob / JobState
# ---------------------------------------------------------------------------


class TestExportJob:
    def test_from_payload(self) -> None:
        job = ExportJob.from_payload(
            {"id": 12, "export_format": "image/png", "has_content": True, "filename": "x.png"}
        )
        assert job == ExportJob(id=12, format=ExportFormat.PNG, has_content=True, filename="x.png")

    def test_from_payload_missing_id(self) -> None:
        job = ExportJob.from_payload({"export_format": "text/csv"})
        assert job.id is None
        assert job.has_content is False
        assert job.filename == ""

    def test_from_payload_default_format(self) -> None:
        job = ExportJob.from_payload({}, default_format=ExportFormat.PDF)
        assert job == ExportJob(id=None, format=ExportFormat.PDF)

    def test_from_payload_payload_format_wins(self) -> None:
        job = ExportJob.from_payload({"export_format": "text/csv"}, default_format=ExportFormat.PDF)
        assert job.format is ExportFormat.CSV

    def test_from_payload_requires_format_without_default(self) -> None:
        with pytest.raises(KeyError):
            ExportJob.from_payload({"id": 3})

    def test_terminal_states(self) -> None:
        assert {s for s in JobState if s.is_terminal} == {
            JobState.READY,
            JobState.TIMED_OUT,
            JobState.FAILED,
        }


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------


class TestOutcome:
    def test_success(self) -> None:
        outcome = Outcome.success(attempts=3)
        assert outcome.succeeded
        assert outcome.reason is None
        assert outcome.detail is None
        outcome.raise_for_status()

    def test_failure_reason_and_detail(self) -> None:
        outcome = Outcome.failure(MissingJobIdError())
        assert outcome.status is OutcomeStatus.FAILURE
        assert outcome.reason == "missing-id"
        assert outcome.detail == "Missing export_id from response"
        with pytest.raises(MissingJobIdError):
            outcome.raise_for_status()
