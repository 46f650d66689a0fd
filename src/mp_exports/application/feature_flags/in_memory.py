"""Application feature flags – InMemoryFeatureFlagProvider."""

from __future__ import annotations

from typing import Any

from mp_exports.application.feature_flags.feature_flag import FeatureFlag
from mp_exports.application.feature_flags.provider import FeatureFlagProvider


class InMemoryFeatureFlagProvider(FeatureFlagProvider):
    """Provider backed by a ``{key: bool}`` dict; unknown keys use the flag default."""

    def __init__(self, flags: dict[str, bool] | None = None) -> None:
        self._flags: dict[str, bool] = dict(flags or {})

    def set(self, flag: FeatureFlag | str, enabled: bool) -> "InMemoryFeatureFlagProvider":
        key = flag.key if isinstance(flag, FeatureFlag) else flag
        self._flags[key] = enabled
        return self

    async def is_enabled(
        self, flag: FeatureFlag, context: dict[str, Any] | None = None
    ) -> bool:
        return self._flags.get(flag.key, flag.default_value)


__all__ = ["InMemoryFeatureFlagProvider"]
