"""Resilience – backoff strategies."""
from mp_exports.resilience.retry.backoff import BackoffStrategy, ConstantBackoff

__all__ = ["BackoffStrategy", "ConstantBackoff"]
