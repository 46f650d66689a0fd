"""Resilience – backoff strategies."""
from __future__ import annotations

import abc


class BackoffStrategy(abc.ABC):
    """Compute wait duration (seconds) after the *attempt*-th try."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ConstantBackoff(BackoffStrategy):
    """Fixed delay between attempts."""

    def __init__(self, delay: float = 1.0) -> None:
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay!r}")
        self._delay = delay

    @property
    def delay(self) -> float:
        return self._delay

    def compute(self, attempt: int) -> float:  # noqa: ARG002
        return self._delay


__all__ = ["BackoffStrategy", "ConstantBackoff"]
