from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from mp_exports.observability.logging import get_logger

__all__ = [
    "EventEmitter",
    "LoggingEventEmitter",
    "StructuredEvent",
]


@dataclass
class StructuredEvent:
    name: str
    service: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    duration_ms: float | None = None
    fields: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "service": self.service,
            "timestamp": self.timestamp.isoformat(),
            "duration_ms": self.duration_ms,
            **self.fields,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


class EventEmitter:
    """Buffers StructuredEvents until a shipper flushes them."""

    def __init__(self) -> None:
        self._buffer: list[StructuredEvent] = []

    def emit(self, event: StructuredEvent) -> None:
        self._buffer.append(event)

    async def flush(self) -> int:
        count = len(self._buffer)
        self._buffer.clear()
        return count

    @property
    def buffered(self) -> list[StructuredEvent]:
        return list(self._buffer)


class LoggingEventEmitter(EventEmitter):
    """Writes each event to the structured log instead of buffering it."""

    def __init__(self, logger: Any = None) -> None:
        super().__init__()
        self._logger = logger or get_logger(__name__)

    def emit(self, event: StructuredEvent) -> None:
        self._logger.info(
            event.name,
            service=event.service,
            duration_ms=event.duration_ms,
            **event.fields,
        )
