"""Observability – structlog configuration and logger helpers."""
from tierflags.observability.logging.factory import JsonLoggerFactory
from tierflags.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
