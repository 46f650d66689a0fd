"""Application export – ExportJob snapshot and the per-run state struct."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping

from mp_exports.application.export.config import ExportRunConfig
from mp_exports.application.export.request import ExportFormat, ExportRequest

__all__ = ["ExportJob", "ExportRun", "JobState"]


class JobState(str, enum.Enum):
    CREATED = "created"
    POLLING = "polling"
    READY = "ready"
    TIMED_OUT = "timed_out"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobState.READY, JobState.TIMED_OUT, JobState.FAILED)


@dataclass(frozen=True)
class ExportJob:
    """Server-side view of one export job, as last reported by the producer."""

    id: int | str | None
    format: ExportFormat
    has_content: bool = False
    filename: str = ""
    expires_after: str | None = None

    @classmethod
    def from_payload(
        cls, payload: Mapping[str, Any], *, default_format: ExportFormat | None = None
    ) -> "ExportJob":
        """Build from the producer's JSON (``export_format``, ``has_content``, ...).

        *default_format* stands in when the payload omits ``export_format``;
        without it that key is required.
        """
        raw_format = payload.get("export_format")
        if raw_format is None:
            if default_format is None:
                raise KeyError("export_format")
            raw_format = default_format
        return cls(
            id=payload.get("id") or None,
            format=ExportFormat(raw_format),
            has_content=bool(payload.get("has_content")),
            filename=payload.get("filename") or "",
            expires_after=payload.get("expires_after"),
        )


@dataclass
class ExportRun:
    """Everything one remote run owns; nothing here is shared between runs."""

    request: ExportRequest
    config: ExportRunConfig | None
    started_at: float
    job: ExportJob | None = None
    attempts: int = 0
    state: JobState = JobState.CREATED
