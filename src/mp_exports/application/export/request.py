"""Application export – ExportRequest and its context variants."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from mp_exports.kernel.errors import ValidationError

__all__ = [
    "DashboardRef",
    "ExportContext",
    "ExportFormat",
    "ExportRequest",
    "ExportTarget",
    "InsightRef",
    "LocalExportContext",
    "RemoteExportContext",
]


class ExportFormat(str, enum.Enum):
    """Artifact formats, valued by media type."""

    PNG = "image/png"
    JPEG = "image/jpeg"
    PDF = "application/pdf"
    CSV = "text/csv"
    XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    JSON = "application/json"


@dataclass(frozen=True)
class DashboardRef:
    id: int


@dataclass(frozen=True)
class InsightRef:
    id: int


ExportTarget = DashboardRef | InsightRef


@dataclass(frozen=True)
class LocalExportContext:
    """Data that is already in memory; no remote job is needed."""

    raw_data: bytes | str
    media_type: str
    filename: str


@dataclass(frozen=True)
class RemoteExportContext:
    """Arbitrary producer parameters (query, columns, path, ...)."""

    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def to_payload(self) -> dict[str, Any]:
        return dict(self.parameters)


ExportContext = LocalExportContext | RemoteExportContext


@dataclass(frozen=True)
class ExportRequest:
    """One request for an export artifact; consumed by a single run."""

    format: ExportFormat
    target: ExportTarget | None = None
    context: ExportContext | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.format, ExportFormat):
            try:
                object.__setattr__(self, "format", ExportFormat(self.format))
            except ValueError as exc:
                raise ValidationError(
                    f"Unsupported export format: {self.format!r}", cause=exc
                ) from exc
        if self.target is not None and not isinstance(self.target, (DashboardRef, InsightRef)):
            raise ValidationError(f"Unsupported export target: {self.target!r}")
        if self.context is not None and not isinstance(
            self.context, (LocalExportContext, RemoteExportContext)
        ):
            raise ValidationError(f"Unsupported export context: {self.context!r}")
        if self.target is None and not isinstance(self.context, LocalExportContext):
            raise ValidationError("A remote export needs a dashboard or insight target")

    @property
    def dashboard(self) -> int | None:
        return self.target.id if isinstance(self.target, DashboardRef) else None

    @property
    def insight(self) -> int | None:
        return self.target.id if isinstance(self.target, InsightRef) else None

    def tracking_properties(self) -> dict[str, Any]:
        """Properties attached to the completion telemetry event."""
        context: Any = None
        if isinstance(self.context, RemoteExportContext):
            context = self.context.to_payload()
        elif isinstance(self.context, LocalExportContext):
            context = {"filename": self.context.filename, "media_type": self.context.media_type}
        return {
            "export_format": self.format.value,
            "dashboard": self.dashboard,
            "insight": self.insight,
            "export_context": context,
        }
