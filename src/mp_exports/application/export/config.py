"""Application export – per-run configuration resolved from settings and flags."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from mp_exports.application.export.request import ExportFormat, ExportRequest
from mp_exports.application.feature_flags import LONG_LIVED_EXPORTS, FeatureFlagProvider
from mp_exports.config.settings import ExportSettings
from mp_exports.kernel.errors import BaseError, RemoteError
from mp_exports.resilience.retry import ConstantBackoff

__all__ = [
    "DATA_FORMATS",
    "ExpiryWindow",
    "ExportConfigResolver",
    "ExportRunConfig",
    "PollBudget",
]

# Formats whose jobs scan whole datasets and get the long poll budget.
DATA_FORMATS: frozenset[ExportFormat] = frozenset({ExportFormat.CSV})


@dataclass(frozen=True)
class PollBudget:
    """How many status checks a run may make, and how far apart."""

    max_attempts: int
    interval_ms: int = 1000

    @classmethod
    def for_format(cls, fmt: ExportFormat, settings: ExportSettings) -> "PollBudget":
        max_attempts = (
            settings.max_data_poll_attempts if fmt in DATA_FORMATS else settings.max_poll_attempts
        )
        return cls(max_attempts=max_attempts, interval_ms=settings.poll_interval_ms)

    def backoff(self) -> ConstantBackoff:
        return ConstantBackoff(delay=self.interval_ms / 1000)


@dataclass(frozen=True)
class ExpiryWindow:
    """Server-side time-to-live sent with job creation."""

    duration: timedelta

    def expires_at(self, now: datetime) -> datetime:
        return now + self.duration


@dataclass(frozen=True)
class ExportRunConfig:
    budget: PollBudget
    expiry: ExpiryWindow
    persist_locally: bool = True


class ExportConfigResolver:
    """Resolves an :class:`ExportRunConfig` for one request.

    The long-lived exports flag is read once per call through the injected
    provider. When it is on, jobs get the long expiry window and the finished
    artifact is left for the long-lived surface instead of being downloaded.
    A failing provider is reported as a :class:`RemoteError`.
    """

    def __init__(self, settings: ExportSettings, flags: FeatureFlagProvider) -> None:
        self._settings = settings
        self._flags = flags

    async def resolve(self, request: ExportRequest) -> ExportRunConfig:
        try:
            long_lived = await self._flags.is_enabled(
                LONG_LIVED_EXPORTS, {"export_format": request.format.value}
            )
        except BaseError:
            raise
        except Exception as exc:
            raise RemoteError(
                service="feature-flags",
                message=f"Feature flag lookup failed: {exc}",
                cause=exc,
            ) from exc
        if long_lived:
            expiry = ExpiryWindow(timedelta(hours=self._settings.long_lived_expiry_hours))
        else:
            expiry = ExpiryWindow(timedelta(minutes=self._settings.expiry_minutes))
        return ExportRunConfig(
            budget=PollBudget.for_format(request.format, self._settings),
            expiry=expiry,
            persist_locally=not long_lived,
        )
