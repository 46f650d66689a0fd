"""Application export – default NotificationSink and TelemetrySink adapters."""
from __future__ import annotations

import asyncio
from typing import Any

from mp_exports.observability.events import EventEmitter, LoggingEventEmitter, StructuredEvent
from mp_exports.observability.logging import get_logger

__all__ = ["EventTelemetrySink", "LoggingNotificationSink"]


class LoggingNotificationSink:
    """Writes lifecycle messages to the log.

    When *slow_after* is set and a run is still pending that many seconds
    after :meth:`on_start`, a second "waiting" message is logged. One sink
    may serve overlapping runs: each run is the task that called
    :meth:`on_start`, and its terminal event cancels only that task's timer.
    Without a running event loop no timer is armed.
    """

    STARTING = "Export starting..."
    WAITING = "Waiting for export..."
    COMPLETE = "Export complete!"
    FAILED = "Export failed!"

    def __init__(self, *, slow_after: float | None = 30.0, logger: Any = None) -> None:
        self._slow_after = slow_after
        self._logger = logger or get_logger(__name__)
        self._slow_timers: dict[asyncio.Task[Any], asyncio.TimerHandle] = {}

    def on_start(self) -> None:
        self._logger.info(self.STARTING)
        if self._slow_after is None:
            return
        task = _current_task()
        if task is None:
            return
        self._cancel_timer(task)
        loop = task.get_loop()
        self._slow_timers[task] = loop.call_later(self._slow_after, self._still_waiting, task)

    def on_success(self) -> None:
        self._cancel_timer(_current_task())
        self._logger.info(self.COMPLETE)

    def on_error(self, detail: str | None = None) -> None:
        self._cancel_timer(_current_task())
        self._logger.error(self.FAILED, detail=detail)

    @property
    def pending(self) -> int:
        """Number of runs whose waiting message is still armed."""
        return len(self._slow_timers)

    def _still_waiting(self, task: asyncio.Task[Any]) -> None:
        self._slow_timers.pop(task, None)
        self._logger.info(self.WAITING)

    def _cancel_timer(self, task: asyncio.Task[Any] | None) -> None:
        if task is None:
            return
        timer = self._slow_timers.pop(task, None)
        if timer is not None:
            timer.cancel()


def _current_task() -> asyncio.Task[Any] | None:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


class EventTelemetrySink:
    """Forwards telemetry records to an :class:`EventEmitter`.

    Defaults to a :class:`LoggingEventEmitter`, so events reach the log
    rather than an unread buffer.
    """

    def __init__(self, emitter: EventEmitter | None = None, *, service: str = "exports") -> None:
        self.emitter = emitter or LoggingEventEmitter()
        self._service = service

    def record(self, event_name: str, properties: dict[str, Any]) -> None:
        self.emitter.emit(
            StructuredEvent(
                name=event_name,
                service=self._service,
                duration_ms=properties.get("total_time_ms"),
                fields=dict(properties),
            )
        )
