"""Config – env-based library settings and their errors."""
from mp_monads.config.errors import ConfigError, InvalidFlagError, UnknownLogLevelError
from mp_monads.config.settings import DotenvSettingsLoader, EnvSettingsLoader, MonadsSettings

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidFlagError",
    "MonadsSettings",
    "UnknownLogLevelError",
]
