"""Application export – Outcome of one export run."""
from __future__ import annotations

import enum
from dataclasses import dataclass

from mp_exports.kernel.errors import BaseError

__all__ = ["Outcome", "OutcomeStatus"]


class OutcomeStatus(str, enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class Outcome:
    """Terminal result of a run. Exactly one is produced per run.

    ``reason`` is the machine-readable error code (``missing-id``,
    ``persist-error``, ``remote-error``, ``poll-timeout``) and ``detail`` the
    diagnostic message; both are ``None`` on success.
    """

    status: OutcomeStatus
    error: BaseError | None = None
    attempts: int = 0
    job_id: int | str | None = None
    total_time_ms: float | None = None

    @classmethod
    def success(cls, **kwargs: object) -> "Outcome":
        return cls(OutcomeStatus.SUCCESS, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def failure(cls, error: BaseError, **kwargs: object) -> "Outcome":
        return cls(OutcomeStatus.FAILURE, error, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def timeout(cls, error: BaseError, **kwargs: object) -> "Outcome":
        return cls(OutcomeStatus.TIMEOUT, error, **kwargs)  # type: ignore[arg-type]

    @property
    def succeeded(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @property
    def reason(self) -> str | None:
        return self.error.code if self.error is not None else None

    @property
    def detail(self) -> str | None:
        return self.error.message if self.error is not None else None

    def raise_for_status(self) -> None:
        """Raise the carried error unless the run succeeded."""
        if self.error is not None:
            raise self.error
