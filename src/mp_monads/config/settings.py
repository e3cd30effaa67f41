"""Config settings – library settings read from the environment."""
from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Mapping
from typing import ClassVar

from mp_monads.config.errors import InvalidFlagError, UnknownLogLevelError

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


@dataclasses.dataclass
class MonadsSettings:
    """Library-wide settings, read from ``MP_MONADS_*`` variables."""

    prefix: ClassVar[str] = "MP_MONADS"

    log_level: str = "WARNING"
    log_json: bool = True

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        known = logging.getLevelNamesMapping()
        if self.log_level not in known:
            raise UnknownLogLevelError(self.log_level, sorted(known))

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


class EnvSettingsLoader:
    """Build :class:`MonadsSettings` from ``MP_MONADS_<FIELD>`` variables.

    Unset variables keep the field default.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self) -> MonadsSettings:
        environ = os.environ if self._environ is None else self._environ
        kwargs: dict[str, str | bool] = {}
        for field in dataclasses.fields(MonadsSettings):
            env_key = f"{MonadsSettings.prefix}_{field.name}".upper()
            raw = environ.get(env_key)
            if raw is None:
                continue
            kwargs[field.name] = _parse_flag(env_key, raw) if field.type == "bool" else raw.strip()
        return MonadsSettings(**kwargs)  # type: ignore[arg-type]


def _parse_flag(env_key: str, raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE:
        return True
    if word in _FALSE:
        return False
    raise InvalidFlagError(env_key, raw)


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the process environment, then read it."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        super().__init__()
        self._env_file = env_file
        self._override = override

    def load(self) -> MonadsSettings:
        from dotenv import load_dotenv

        load_dotenv(self._env_file, override=self._override)
        return super().load()


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "MonadsSettings"]
