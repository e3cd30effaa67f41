"""Result[T, E] monad — Ok and Err variants.

The variant class is the discriminant: ``Ok(None)`` is a success holding
``None`` and ``Err(None)`` is a failure holding ``None``. Neither payload is
ever tested against a sentinel.
"""

from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable, Generic, NoReturn, ParamSpec, TypeVar

from mp_monads.errors import UnwrapError
from mp_monads.observability.logging import get_logger

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
D = TypeVar("D")
P = ParamSpec("P")


def _captured(fn: Callable[..., Any], exc: Exception) -> Err[Exception]:
    # Runs inside an except block: never call user __str__ or __repr__ here.
    get_logger(__name__).debug(
        "result.captured",
        function=getattr(fn, "__qualname__", None) or type(fn).__qualname__,
        error_type=type(exc).__qualname__,
    )
    return Err(exc)


class Result(abc.ABC, Generic[T, E]):
    """Holds exactly one of a success value (:class:`Ok`) or an error (:class:`Err`).

    Instances are immutable; every transformation returns a new instance.
    """

    __slots__ = ()

    # -- factories ---------------------------------------------------------

    @staticmethod
    def ok(value: T = None) -> Ok[T]:  # type: ignore[assignment]
        """Successful Result holding *value* (``None`` when omitted)."""
        return Ok(value)

    @staticmethod
    def err(error: E = None) -> Err[E]:  # type: ignore[assignment]
        """Failed Result holding *error* (``None`` when omitted)."""
        return Err(error)

    @staticmethod
    def try_(fn: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        """Call ``fn(*args, **kwargs)`` and capture any raised exception.

        Returns ``Ok(return_value)`` or ``Err(exception)``. Only
        :class:`Exception` subclasses are captured; ``KeyboardInterrupt``,
        ``SystemExit`` and friends still propagate.
        """
        try:
            return Ok(fn(*args, **kwargs))
        except Exception as exc:  # noqa: BLE001
            return _captured(fn, exc)

    @staticmethod
    async def try_async(
        fn: Callable[P, Awaitable[T]], *args: P.args, **kwargs: P.kwargs
    ) -> Result[T, Exception]:
        """Await ``fn(*args, **kwargs)`` and capture any raised exception.

        ``asyncio.CancelledError`` is a :class:`BaseException` and is never
        captured, so cancelling the awaiting task behaves as usual.
        """
        try:
            return Ok(await fn(*args, **kwargs))
        except Exception as exc:  # noqa: BLE001
            return _captured(fn, exc)

    # -- inspection --------------------------------------------------------

    @abc.abstractmethod
    def is_ok(self) -> bool: ...

    @abc.abstractmethod
    def is_err(self) -> bool: ...

    @abc.abstractmethod
    def match(self, *, on_ok: Callable[[T], U], on_err: Callable[[E], U]) -> U:
        """Invoke exactly one handler and return its result."""

    # -- extraction --------------------------------------------------------

    @abc.abstractmethod
    def unwrap_or(self, default: D) -> T | D: ...

    @abc.abstractmethod
    def unwrap(self) -> T: ...

    @abc.abstractmethod
    def expect(self, message: str) -> T: ...

    @abc.abstractmethod
    def unwrap_err(self) -> E: ...

    @abc.abstractmethod
    def expect_err(self, message: str) -> E: ...

    # -- transformation ----------------------------------------------------

    @abc.abstractmethod
    def map(self, mapper: Callable[[T], U]) -> Result[U, E | Exception]: ...

    @abc.abstractmethod
    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]: ...


class Ok(Result[T, Any]):
    """Successful result variant."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def match(self, *, on_ok: Callable[[T], U], on_err: Callable[[Any], U]) -> U:  # noqa: ARG002
        return on_ok(self._value)

    def unwrap_or(self, default: D) -> T:  # noqa: ARG002
        return self._value

    def unwrap(self) -> T:
        return self._value

    def expect(self, message: str) -> T:  # noqa: ARG002
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError("Attempted to unwrap error for an Ok value Result.", variant="Ok")

    def expect_err(self, message: str) -> NoReturn:
        raise UnwrapError(message, variant="Ok")

    def map(self, mapper: Callable[[T], U]) -> Result[U, Exception]:
        return Result.try_(mapper, self._value)

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return func(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ok):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Ok, self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Result[Any, E]):
    """Error result variant."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def match(self, *, on_ok: Callable[[Any], U], on_err: Callable[[E], U]) -> U:  # noqa: ARG002
        return on_err(self._error)

    def unwrap_or(self, default: D) -> D:
        return default

    def unwrap(self) -> NoReturn:
        raise UnwrapError(
            f"Attempted to unwrap an Err value Result. Error: {self._error}",
            variant="Err",
            cause=self._cause(),
        )

    def expect(self, message: str) -> NoReturn:
        raise UnwrapError(message, variant="Err", cause=self._cause())

    def unwrap_err(self) -> E:
        return self._error

    def expect_err(self, message: str) -> E:  # noqa: ARG002
        return self._error

    def map(self, mapper: Callable[[Any], U]) -> Err[E]:  # noqa: ARG002
        return Err(self._error)

    def flat_map(self, func: Callable[[Any], Result[U, E]]) -> Err[E]:  # noqa: ARG002
        return self

    def _cause(self) -> BaseException | None:
        return self._error if isinstance(self._error, BaseException) else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Err):
            return NotImplemented
        return self._error == other._error

    def __hash__(self) -> int:
        return hash((Err, self._error))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


__all__ = ["Err", "Ok", "Result"]
