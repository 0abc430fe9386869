"""Typed conversion results.

Usage:
    result = parse_id2("STEAM_0:1:0")
    if result.is_ok():
        sid = result.value
    sid = result.unwrap()  # raises the carried CodecError on failure
    sid = result.unwrap_or(None)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from steamid.errors import CodecError


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful conversion carrying its value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[D](self, default: D) -> T | D:
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        """Apply fn to the carried value."""
        return Ok(fn(self.value))

    def then[U](self, fn: Callable[[T], Result[U]]) -> Result[U]:
        """Chain a conversion that may itself fail."""
        return fn(self.value)


@dataclass(frozen=True, slots=True)
class Err:
    """Failed conversion carrying the typed error."""

    error: CodecError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the carried error.

        Raises:
            CodecError: Always; the concrete subclass describes the failure.
        """
        raise self.error

    def unwrap_or[D](self, default: D) -> D:
        return default

    def map(self, fn: Callable[..., object]) -> Err:
        return self

    def then(self, fn: Callable[..., object]) -> Err:
        return self


type Result[T] = Ok[T] | Err
"""Outcome of a codec call: Ok(value) or Err(error). Never partially filled."""
