"""Observability – structured logging setup and helpers."""
from log_viewer.observability.logging.factory import JsonLoggerFactory
from log_viewer.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = [
    "CorrelationProcessor",
    "JsonLoggerFactory",
    "get_logger",
]
