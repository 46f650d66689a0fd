"""Observability – structured logging and telemetry events."""
