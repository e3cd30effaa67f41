"""Error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ContractViolationError   (contract.py)
    │   ├── UnwrapError          (also a ValueError)
    │   └── InvalidOptionError   (also a ValueError)
    └── ConfigError              (mp_monads.config.errors)
        ├── UnknownLogLevelError
        └── InvalidFlagError
"""

from mp_monads.errors.base import BaseError
from mp_monads.errors.contract import (
    ContractViolationError,
    InvalidOptionError,
    UnwrapError,
)

__all__ = [
    "BaseError",
    "ContractViolationError",
    "InvalidOptionError",
    "UnwrapError",
]
