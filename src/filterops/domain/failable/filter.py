"""FailableFilter capability: evaluate a value to a boolean or an error.

Evaluation returns Ok(bool) or Err(error); the error type is chosen by the
filter author. Combinators propagate the first Err reached in
left-to-right, short-circuit-aware order and never evaluate anything after
it. Both sides of a combinator must share one error type: reconcile them
with map_err() first.

A pure Filter is never accepted implicitly. Bridge it explicitly:

    checked = failable.and_(pure.into_failable())
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from filterops.domain.exceptions import ConversionError, InvalidFilterError
from filterops.domain.filter import Filter
from filterops.domain.result import Err, Ok, Result

if TYPE_CHECKING:
    from filterops.domain.failable.ops import (
        FailableAnd,
        FailableMapErr,
        FailableMapInput,
        FailableNot,
        FailableOr,
        FailableXOr,
    )

type FailableFilterLike[T, E] = FailableFilter[T, E] | Callable[[T], Result[bool, E]]


class FailableFilter[T, E](ABC):
    """Base for all failable filters.

    Subclasses implement evaluate(). Chaining methods mirror Filter,
    with failure-propagating short-circuit semantics.
    """

    __slots__ = ()

    @abstractmethod
    def evaluate(self, value: T) -> Result[bool, E]:
        """Evaluate value.

        Args:
            value: Value to test

        Returns:
            Ok(True) = passes, Ok(False) = rejected, Err(e) = could not decide
        """

    def __call__(self, value: T) -> Result[bool, E]:
        """Same as evaluate()."""
        return self.evaluate(value)

    # =========================================================================
    # Chaining
    # =========================================================================

    def not_(self) -> FailableNot[T, E]:
        """Invert this filter. Err passes through."""
        from filterops.domain.failable.ops import FailableNot

        return FailableNot(self)

    def and_(self, other: FailableFilterLike[T, E]) -> FailableAnd[T, E]:
        """Connect via logical AND.

        Err or Ok(False) from self is returned without evaluating other.
        """
        from filterops.domain.failable.ops import FailableAnd

        return FailableAnd(self, as_failable_filter(other))

    def or_(self, other: FailableFilterLike[T, E]) -> FailableOr[T, E]:
        """Connect via logical OR.

        Err or Ok(True) from self is returned without evaluating other.
        """
        from filterops.domain.failable.ops import FailableOr

        return FailableOr(self, as_failable_filter(other))

    def xor(self, other: FailableFilterLike[T, E]) -> FailableXOr[T, E]:
        """Connect via logical XOR.

        Err from self is returned without evaluating other.
        """
        from filterops.domain.failable.ops import FailableXOr

        return FailableXOr(self, as_failable_filter(other))

    def and3(
        self,
        other: FailableFilterLike[T, E],
        other2: FailableFilterLike[T, E],
    ) -> FailableAnd[T, E]:
        """self AND (other AND other2)."""
        return self.and_(as_failable_filter(other).and_(other2))

    def or3(
        self,
        other: FailableFilterLike[T, E],
        other2: FailableFilterLike[T, E],
    ) -> FailableOr[T, E]:
        """self OR (other OR other2)."""
        return self.or_(as_failable_filter(other).or_(other2))

    def and_not(self, other: FailableFilterLike[T, E]) -> FailableAnd[T, E]:
        """self AND NOT other."""
        return self.and_(as_failable_filter(other).not_())

    def or_not(self, other: FailableFilterLike[T, E]) -> FailableOr[T, E]:
        """self OR NOT other."""
        return self.or_(as_failable_filter(other).not_())

    def nand(self, other: FailableFilterLike[T, E]) -> FailableNot[T, E]:
        """NOT (self AND other)."""
        return self.and_(other).not_()

    def nor(self, other: FailableFilterLike[T, E]) -> FailableNot[T, E]:
        """NOT (self OR other)."""
        return self.or_(other).not_()

    def bool_and(self, value: bool) -> FailableAnd[T, E]:
        """self AND constant value."""
        from filterops.domain.failable.ops import FailableBool

        return self.and_(FailableBool(value))

    def bool_or(self, value: bool) -> FailableOr[T, E]:
        """self OR constant value."""
        from filterops.domain.failable.ops import FailableBool

        return self.or_(FailableBool(value))

    def map_input[S](self, mapper: Callable[[S], T]) -> FailableMapInput[S, T, E]:
        """Evaluate this filter on mapper(value) instead of value."""
        from filterops.domain.failable.ops import FailableMapInput

        if not callable(mapper):
            raise InvalidFilterError(expected="callable mapper", got=type(mapper))
        return FailableMapInput(self, mapper)

    def map_err[F](self, mapper: Callable[[E], F]) -> FailableMapErr[T, E, F]:
        """Transform the error on failure. The success path is untouched."""
        from filterops.domain.failable.ops import FailableMapErr

        if not callable(mapper):
            raise InvalidFilterError(expected="callable mapper", got=type(mapper))
        return FailableMapErr(self, mapper)

    # =========================================================================
    # Operators
    # =========================================================================

    def __and__(self, other: FailableFilterLike[T, E]) -> FailableAnd[T, E]:
        return self.and_(other)

    def __rand__(self, other: Callable[[T], Result[bool, E]]) -> FailableAnd[T, E]:
        return as_failable_filter(other).and_(self)

    def __or__(self, other: FailableFilterLike[T, E]) -> FailableOr[T, E]:
        return self.or_(other)

    def __ror__(self, other: Callable[[T], Result[bool, E]]) -> FailableOr[T, E]:
        return as_failable_filter(other).or_(self)

    def __xor__(self, other: FailableFilterLike[T, E]) -> FailableXOr[T, E]:
        return self.xor(other)

    def __rxor__(self, other: Callable[[T], Result[bool, E]]) -> FailableXOr[T, E]:
        return as_failable_filter(other).xor(self)

    def __invert__(self) -> FailableNot[T, E]:
        return self.not_()


@dataclass(frozen=True, slots=True)
class FunctionFailableFilter[T, E](FailableFilter[T, E]):
    """FailableFilter backed by a plain callable (T) -> Ok | Err.

    Attributes:
        fn: Wrapped predicate
    """

    fn: Callable[[T], Any]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.fn):
            raise InvalidFilterError(expected="callable", got=type(self.fn))

    @property
    def __name__(self) -> str:
        """Name of the wrapped callable."""
        return getattr(self.fn, "__name__", type(self.fn).__name__)

    def evaluate(self, value: T) -> Result[bool, E]:
        """Call fn and check it answered in the Ok/Err protocol."""
        return checked_result(self.fn(value))


def checked_result[E](result: object) -> Result[bool, E]:
    """Normalize a failable answer: Ok(v) -> Ok(bool(v)), Err unchanged.

    Raises:
        ConversionError: If result is neither Ok nor Err
    """
    match result:
        case Ok(passed) if isinstance(passed, bool):
            return result
        case Ok(passed):
            return Ok(bool(passed))
        case Err():
            return result
        case _:
            raise ConversionError(expected="failable filter must return Ok or Err", got=type(result))


def as_failable_filter[T, E](obj: FailableFilterLike[T, E]) -> FailableFilter[T, E]:
    """Convert obj into a FailableFilter.

    Args:
        obj: FailableFilter (returned unchanged) or callable (wrapped)

    Returns:
        FailableFilter instance

    Raises:
        InvalidFilterError: If obj is a pure Filter or not callable
    """
    if isinstance(obj, FailableFilter):
        return obj
    if isinstance(obj, Filter):
        raise InvalidFilterError(
            expected="FailableFilter",
            got=type(obj),
            hint="convert pure filters explicitly with into_failable()",
        )
    if not callable(obj):
        raise InvalidFilterError(expected="FailableFilter or callable", got=type(obj))
    return FunctionFailableFilter(obj)
