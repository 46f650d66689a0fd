"""Application feature flags – FeatureFlag value object."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class FeatureFlag:
    """Describes a feature flag with metadata."""
    key: str
    description: str = ""
    default_value: bool = False


LONG_LIVED_EXPORTS = FeatureFlag(
    key="exports-sidepanel",
    description=(
        "Finished exports are collected by a long-lived exports surface: jobs "
        "live for hours and are not downloaded by the requesting client."
    ),
)


__all__ = ["FeatureFlag", "LONG_LIVED_EXPORTS"]
