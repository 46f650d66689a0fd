"""Infrastructure errors – the closed set a remote producer may raise.

Producers map their transport failures onto exactly these two classes, so
callers never inspect exception names or messages to decide on a retry.
"""

from __future__ import annotations

from typing import Any

from mp_exports.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure talking to the remote producer."""

    default_code = "infrastructure_error"


class TransientNetworkError(InfrastructureError):
    """Connectivity-class failure: the request never got an HTTP answer."""

    default_code = "transient-network-error"

    def __init__(self, resource: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"NetworkError when attempting to fetch '{resource}'", **kwargs)
        self.resource = resource


class RemoteError(InfrastructureError):
    """The producer answered with an HTTP or application-level rejection."""

    default_code = "remote-error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Remote service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = ["InfrastructureError", "RemoteError", "TransientNetworkError"]
