"""Application feature flags – ports and value objects."""
from mp_exports.application.feature_flags.feature_flag import LONG_LIVED_EXPORTS, FeatureFlag
from mp_exports.application.feature_flags.provider import FeatureFlagProvider
from mp_exports.application.feature_flags.in_memory import InMemoryFeatureFlagProvider

__all__ = ["FeatureFlag", "FeatureFlagProvider", "InMemoryFeatureFlagProvider", "LONG_LIVED_EXPORTS"]
