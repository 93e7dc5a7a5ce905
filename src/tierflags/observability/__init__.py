"""Observability – structured logging for tierflags."""
