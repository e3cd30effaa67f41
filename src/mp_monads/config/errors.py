"""Config errors raised while reading ``MP_MONADS_*`` settings."""
from __future__ import annotations

from mp_monads.errors import BaseError


class ConfigError(BaseError):
    """Raised when library settings are invalid or could not be loaded."""
    default_code = "config_error"


class UnknownLogLevelError(ConfigError):
    """``log_level`` does not name a :mod:`logging` level."""
    default_code = "unknown_log_level"

    def __init__(self, level: str, known: list[str]) -> None:
        super().__init__(
            f"Unknown log level {level!r}; expected one of {', '.join(known)}",
            detail={"setting": "log_level", "value": level, "known": known},
        )
        self.level = level
        self.known = known


class InvalidFlagError(ConfigError):
    """A boolean setting holds something other than a recognised flag word."""
    default_code = "invalid_flag"

    def __init__(self, env_key: str, raw: str) -> None:
        super().__init__(
            f"Setting '{env_key}' expects a boolean flag, got {raw!r}",
            detail={"setting": env_key, "value": raw},
        )
        self.env_key = env_key
        self.raw = raw


__all__ = ["ConfigError", "InvalidFlagError", "UnknownLogLevelError"]
