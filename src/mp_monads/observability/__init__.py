"""Observability – logging configuration for the library."""
from mp_monads.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
