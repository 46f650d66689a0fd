"""Application feature flags – FeatureFlagProvider port."""
from __future__ import annotations

import abc
from typing import Any

from mp_exports.application.feature_flags.feature_flag import FeatureFlag


class FeatureFlagProvider(abc.ABC):
    """Port: evaluate feature flags for a given context."""

    @abc.abstractmethod
    async def is_enabled(self, flag: FeatureFlag, context: dict[str, Any] | None = None) -> bool: ...


__all__ = ["FeatureFlagProvider"]
