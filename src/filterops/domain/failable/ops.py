"""Failable combinators.

Evaluation order is left to right. The first Err observed is returned
as-is and nothing after it is evaluated.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from filterops.domain.failable.filter import FailableFilter
from filterops.domain.result import Err, Ok, Result


@dataclass(frozen=True, slots=True)
class FailableAnd[T, E](FailableFilter[T, E]):
    """left AND right.

    Err(e) from left -> Err(e); Ok(False) from left -> Ok(False).
    In both cases right is not evaluated.
    """

    left: FailableFilter[T, E]
    right: FailableFilter[T, E]

    def evaluate(self, value: T) -> Result[bool, E]:
        match self.left.evaluate(value):
            case Ok(passed) if passed:
                return self.right.evaluate(value)
            case decided:
                return decided


@dataclass(frozen=True, slots=True)
class FailableOr[T, E](FailableFilter[T, E]):
    """left OR right.

    Err(e) from left -> Err(e); Ok(True) from left -> Ok(True).
    In both cases right is not evaluated.
    """

    left: FailableFilter[T, E]
    right: FailableFilter[T, E]

    def evaluate(self, value: T) -> Result[bool, E]:
        match self.left.evaluate(value):
            case Ok(passed) if not passed:
                return self.right.evaluate(value)
            case decided:
                return decided


@dataclass(frozen=True, slots=True)
class FailableXOr[T, E](FailableFilter[T, E]):
    """left XOR right.

    Left is checked first: Err from left preempts evaluating right.
    """

    left: FailableFilter[T, E]
    right: FailableFilter[T, E]

    def evaluate(self, value: T) -> Result[bool, E]:
        left = self.left.evaluate(value)
        if isinstance(left, Err):
            return left
        right = self.right.evaluate(value)
        if isinstance(right, Err):
            return right
        return Ok(bool(left.value) != bool(right.value))


@dataclass(frozen=True, slots=True)
class FailableNot[T, E](FailableFilter[T, E]):
    """NOT inner. Err passes through unchanged."""

    inner: FailableFilter[T, E]

    def evaluate(self, value: T) -> Result[bool, E]:
        match self.inner.evaluate(value):
            case Ok(passed):
                return Ok(not passed)
            case failed:
                return failed


@dataclass(frozen=True, slots=True)
class FailableBool(FailableFilter[object, object]):
    """Constant failable filter: always Ok(value), never Err.

    Attributes:
        value: Result of every evaluation
    """

    value: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.value, bool):
            raise TypeError(f"value must be bool, got {type(self.value).__name__}")

    def evaluate(self, value: object) -> Ok[bool]:
        del value  # Unused
        return Ok(self.value)


@dataclass(frozen=True, slots=True)
class FailableMapInput[S, T, E](FailableFilter[S, E]):
    """Evaluate inner on mapper(value).

    Attributes:
        inner: Failable filter over the mapped type
        mapper: S -> T conversion
    """

    inner: FailableFilter[T, E]
    mapper: Callable[[S], T]

    def evaluate(self, value: S) -> Result[bool, E]:
        return self.inner.evaluate(self.mapper(value))


@dataclass(frozen=True, slots=True)
class FailableMapErr[T, E, F](FailableFilter[T, F]):
    """Transform the error of inner through mapper.

    Ok(b) -> Ok(b); Err(e) -> Err(mapper(e)).

    Attributes:
        inner: Failable filter with error type E
        mapper: E -> F conversion, pure
    """

    inner: FailableFilter[T, E]
    mapper: Callable[[E], F]

    def evaluate(self, value: T) -> Result[bool, F]:
        return self.inner.evaluate(value).map_err(self.mapper)
