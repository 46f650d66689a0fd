"""Application export – Local vs Remote classification."""
from __future__ import annotations

import enum

from mp_exports.application.export.request import ExportRequest, LocalExportContext

__all__ = ["ExportHandling", "classify"]


class ExportHandling(str, enum.Enum):
    LOCAL = "local"
    REMOTE = "remote"


def classify(request: ExportRequest) -> ExportHandling:
    """Local iff the request already carries the artifact's bytes."""
    if isinstance(request.context, LocalExportContext):
        return ExportHandling.LOCAL
    return ExportHandling.REMOTE
