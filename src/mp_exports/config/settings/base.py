"""Config settings – Settings base class and ExportSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_exports.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ExportSettings(Settings):
    """Tunables of the export orchestrator.

    Read from ``EXPORTS_*`` environment variables by
    :class:`~mp_exports.config.settings.loaders.EnvSettingsLoader`; every
    field has a default so an empty environment is valid.
    """

    _prefix = "EXPORTS"

    poll_interval_ms: int = 1000
    max_poll_attempts: int = 10
    max_data_poll_attempts: int = 300
    expiry_minutes: int = 10
    long_lived_expiry_hours: int = 6
    api_base_url: str = ""
    project_id: str = ""
    download_dir: str = "."

    def _validate(self) -> None:
        for name in (
            "poll_interval_ms",
            "max_poll_attempts",
            "max_data_poll_attempts",
            "expiry_minutes",
            "long_lived_expiry_hours",
        ):
            value = getattr(self, name)
            if value < 1:
                raise InvalidSettingValueError(name, value, "must be >= 1")


__all__ = ["ExportSettings", "Settings"]
