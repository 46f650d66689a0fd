"""Observability – Structured Events."""
from mp_exports.observability.events.emitter import EventEmitter, LoggingEventEmitter, StructuredEvent

__all__ = ["EventEmitter", "LoggingEventEmitter", "StructuredEvent"]
