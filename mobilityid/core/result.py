"""Ok / Err values returned by every parser, constructor and converter.

Nothing in mobilityid raises on bad input. Callers pattern-match on the
variant, or chain a converter with .bind and add context with .map_err.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """The built identifier (or check digit)."""

    value: T

    def bind[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        return f(self.value)

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """A MobilityIdError describing why the input was rejected."""

    error: E

    def bind(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """The next step never runs."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))


type Result[T, E] = Ok[T] | Err[E]


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Value of an Ok, RuntimeError for an Err. For tests and call sites that
    have already checked the input."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise RuntimeError(f"unwrap on Err: {error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
