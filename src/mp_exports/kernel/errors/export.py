"""Export errors – terminal conditions of a single export run."""

from __future__ import annotations

from typing import Any

from mp_exports.kernel.errors.base import BaseError


class ExportError(BaseError):
    """An export run reached a terminal failure."""

    default_code = "export_error"


class MissingJobIdError(ExportError):
    """The producer accepted the job but returned no usable identity."""

    default_code = "missing-id"

    def __init__(self, message: str = "Missing export_id from response", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class PollTimeoutError(ExportError):
    """The poll budget ran out before the job had content."""

    default_code = "poll-timeout"

    def __init__(
        self,
        message: str = "Content not loaded in time...",
        *,
        attempts: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.attempts = attempts


class PersistenceError(ExportError):
    """The finished artifact could not be materialized or saved."""

    default_code = "persist-error"

    def __init__(self, filename: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not save '{filename}'", **kwargs)
        self.filename = filename


__all__ = [
    "ExportError",
    "MissingJobIdError",
    "PersistenceError",
    "PollTimeoutError",
]
