"""Application – export use cases and feature flags (framework-agnostic)."""
