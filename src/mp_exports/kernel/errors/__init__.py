"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ValidationError
    ├── ExportError              (export.py)
    │   ├── MissingJobIdError
    │   ├── PollTimeoutError
    │   └── PersistenceError
    └── InfrastructureError      (infrastructure.py)
        ├── TransientNetworkError
        └── RemoteError
"""

from mp_exports.kernel.errors.base import BaseError, ValidationError
from mp_exports.kernel.errors.export import (
    ExportError,
    MissingJobIdError,
    PersistenceError,
    PollTimeoutError,
)
from mp_exports.kernel.errors.infrastructure import (
    InfrastructureError,
    RemoteError,
    TransientNetworkError,
)

__all__ = [
    "BaseError",
    "ExportError",
    "InfrastructureError",
    "MissingJobIdError",
    "PersistenceError",
    "PollTimeoutError",
    "RemoteError",
    "TransientNetworkError",
    "ValidationError",
]
