"""Option[T] monad — Some and Nothing variants.

``None`` is the only absence marker: a :class:`Some` can never hold it, and
every path that turns a plain value into an Option (:meth:`Option.from_`,
:meth:`Option.from_async`, :meth:`Option.map`) collapses ``None`` to
:class:`Nothing`.
"""

from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable, Generic, Iterator, NoReturn, TypeVar

from mp_monads.errors import InvalidOptionError, UnwrapError

T = TypeVar("T")
U = TypeVar("U")
D = TypeVar("D")


class Option(abc.ABC, Generic[T]):
    """Holds either a present value (:class:`Some`) or nothing (:class:`Nothing`)."""

    __slots__ = ()

    @staticmethod
    def some(value: T) -> Some[T]:
        """Present Option holding *value*.

        Raises:
            InvalidOptionError: *value* is ``None``.
        """
        return Some(value)

    @staticmethod
    def none() -> Nothing[Any]:
        return Nothing()

    @staticmethod
    def from_(value: T | None) -> Option[T]:
        """``Nothing`` for ``None``, ``Some(value)`` for anything else. Never raises."""
        if value is None:
            return Nothing()
        return Some(value)

    @staticmethod
    async def from_async(value: Awaitable[T | None]) -> Option[T]:
        """Await *value* and pass the outcome through :meth:`from_`.

        Unlike :meth:`Result.try_async`, a failing awaitable is not captured:
        the exception propagates to the caller unchanged.
        """
        return Option.from_(await value)

    @abc.abstractmethod
    def is_some(self) -> bool: ...

    @abc.abstractmethod
    def is_none(self) -> bool: ...

    @abc.abstractmethod
    def match(self, *, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        """Invoke exactly one handler and return its result."""

    @abc.abstractmethod
    def unwrap_or(self, default: D) -> T | D: ...

    @abc.abstractmethod
    def unwrap(self) -> T: ...

    @abc.abstractmethod
    def expect(self, message: str) -> T: ...

    @abc.abstractmethod
    def unwrap_none(self) -> None: ...

    @abc.abstractmethod
    def expect_none(self, message: str) -> None: ...

    @abc.abstractmethod
    def map(self, mapper: Callable[[T], U | None]) -> Option[U]:
        """Apply *mapper* to a present value; a ``None`` output becomes ``Nothing``."""

    @abc.abstractmethod
    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]: ...

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]: ...


class Some(Option[T]):
    """Option with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        if value is None:
            raise InvalidOptionError("Cannot create a Some Option with a None value.")
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def match(self, *, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:  # noqa: ARG002
        return on_some(self._value)

    def unwrap_or(self, default: D) -> T:  # noqa: ARG002
        return self._value

    def unwrap(self) -> T:
        return self._value

    def expect(self, message: str) -> T:  # noqa: ARG002
        return self._value

    def unwrap_none(self) -> NoReturn:
        raise UnwrapError("Attempted to unwrap a Some value Option.", variant="Some")

    def expect_none(self, message: str) -> NoReturn:
        raise UnwrapError(message, variant="Some")

    def map(self, mapper: Callable[[T], U | None]) -> Option[U]:
        return Option.from_(mapper(self._value))

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return func(self._value)

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Some):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Option[T]):
    """Empty option."""

    __slots__ = ()
    __match_args__ = ()

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def match(self, *, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:  # noqa: ARG002
        return on_none()

    def unwrap_or(self, default: D) -> D:
        return default

    def unwrap(self) -> NoReturn:
        raise UnwrapError("Attempted to unwrap a None value Option.", variant="Nothing")

    def expect(self, message: str) -> NoReturn:
        raise UnwrapError(message, variant="Nothing")

    def unwrap_none(self) -> None:
        return None

    def expect_none(self, message: str) -> None:  # noqa: ARG002
        return None

    def map(self, mapper: Callable[[T], U | None]) -> Nothing[U]:  # noqa: ARG002
        return Nothing()

    def flat_map(self, func: Callable[[T], Option[U]]) -> Nothing[U]:  # noqa: ARG002
        return self

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nothing):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing"


__all__ = ["Nothing", "Option", "Some"]
