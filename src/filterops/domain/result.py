"""Result of a failable evaluation: Ok(value) or Err(error).

PEP 695 type alias syntax.
Both variants are frozen value objects and support structural matching:

    match flt.evaluate(value):
        case Ok(passed): ...
        case Err(error): ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Never

from filterops.domain.exceptions import UnwrapError


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful evaluation.

    Attributes:
        value: Evaluation outcome (bool for filters)
    """

    value: T

    def is_ok(self) -> bool:
        """Always True."""
        return True

    def is_err(self) -> bool:
        """Always False."""
        return False

    def unwrap(self) -> T:
        """Return the held value."""
        return self.value

    def unwrap_err(self) -> Never:
        """Raise: Ok holds no error.

        Raises:
            UnwrapError: Always
        """
        raise UnwrapError("called unwrap_err() on Ok", self.value)

    def unwrap_or(self, default: object) -> T:
        """Return the held value, ignoring default."""
        del default  # Unused
        return self.value

    def map_err[F](self, fn: Callable[..., F]) -> Ok[T]:
        """Return self unchanged: no error to map."""
        del fn  # Unused
        return self


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed evaluation.

    Attributes:
        error: Caller-defined failure value, never created by the library
    """

    error: E

    def is_ok(self) -> bool:
        """Always False."""
        return False

    def is_err(self) -> bool:
        """Always True."""
        return True

    def unwrap(self) -> Never:
        """Raise: Err holds no value.

        Raises:
            UnwrapError: Always, carrying the error
        """
        raise UnwrapError("called unwrap() on Err", self.error)

    def unwrap_err(self) -> E:
        """Return the held error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return default."""
        return default

    def map_err[F](self, fn: Callable[[E], F]) -> Err[F]:
        """Transform the held error through fn."""
        return Err(fn(self.error))


type Result[T, E] = Ok[T] | Err[E]


def is_result(obj: object) -> bool:
    """Check if obj is an Ok or Err."""
    return isinstance(obj, (Ok, Err))
