"""Observability – structured logging helpers."""
from mp_monads.observability.logging.factory import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
