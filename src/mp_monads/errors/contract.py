"""Contract violations — the container was used against the wrong variant."""

from __future__ import annotations

from typing import Any

from mp_monads.errors.base import BaseError


class ContractViolationError(BaseError):
    """A programmer error: the caller broke a documented precondition."""

    default_code = "contract_violation"


class UnwrapError(ContractViolationError, ValueError):
    """Raised by the ``unwrap`` / ``expect`` family on the wrong variant.

    ``detail["variant"]`` names the variant the call was made against
    (``"Ok"``, ``"Err"``, ``"Some"`` or ``"Nothing"``).
    """

    default_code = "unwrap_error"

    def __init__(self, message: str, *, variant: str, **kwargs: Any) -> None:
        detail = {"variant": variant, **(kwargs.pop("detail", None) or {})}
        super().__init__(message, detail=detail, **kwargs)
        self.variant = variant


class InvalidOptionError(ContractViolationError, ValueError):
    """A present Option was constructed from ``None``."""

    default_code = "invalid_option"


__all__ = ["ContractViolationError", "InvalidOptionError", "UnwrapError"]
