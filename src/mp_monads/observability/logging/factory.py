"""Observability – structlog configuration and logger factory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from mp_monads.config import EnvSettingsLoader, MonadsSettings


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger wrapping the stdlib logger *name*.

    Events go through :mod:`logging`, so nothing is emitted until the
    application configures handlers (see :func:`configure_logging`).

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(logging.getLogger(name))
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def configure_logging(settings: MonadsSettings | None = None) -> MonadsSettings:
    """Route structlog through the stdlib root logger.

    When *settings* is omitted they are read from ``MP_MONADS_*`` environment
    variables. Returns the settings that were applied.
    """
    if settings is None:
        settings = EnvSettingsLoader().load()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.level)
    return settings


__all__ = ["configure_logging", "get_logger"]
