"""Resilience – pacing primitives for polling loops."""
