"""Filter capability: evaluate a value to a boolean, never fails.

Any callable (T) -> bool is accepted wherever a Filter is expected:
as_filter() wraps it in FunctionFilter. Chaining methods build
combinator trees (see filterops.domain.ops):

    in_range = as_filter(lambda a: a > 5).and_(lambda a: a < 15)
    in_range = as_filter(lambda a: a > 5) & (lambda a: a < 15)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from filterops.domain.exceptions import ConversionError, InvalidFilterError
from filterops.domain.result import is_result

if TYPE_CHECKING:
    from filterops.domain.ops.bridge import IntoFailable
    from filterops.domain.ops.logical import And, Not, Or, XOr
    from filterops.domain.ops.mapping import MapInput

type FilterLike[T] = Filter[T] | Callable[[T], bool]


class Filter[T](ABC):
    """Base for all pure filters.

    Subclasses implement evaluate(). Everything else (chaining, operators,
    calling the filter like a function) is derived from it.
    Filters must not be mutated after construction.
    """

    __slots__ = ()

    @abstractmethod
    def evaluate(self, value: T) -> bool:
        """Evaluate value.

        Args:
            value: Value to test

        Returns:
            True = value passes the filter
        """

    def __call__(self, value: T) -> bool:
        """Same as evaluate(): lets a Filter act as a plain predicate."""
        return self.evaluate(value)

    # =========================================================================
    # Chaining
    # =========================================================================

    def not_(self) -> Not[T]:
        """Invert this filter."""
        from filterops.domain.ops.logical import Not

        return Not(self)

    def and_(self, other: FilterLike[T]) -> And[T]:
        """Connect via logical AND. other is skipped if self is False."""
        from filterops.domain.ops.logical import And

        return And(self, as_filter(other))

    def or_(self, other: FilterLike[T]) -> Or[T]:
        """Connect via logical OR. other is skipped if self is True."""
        from filterops.domain.ops.logical import Or

        return Or(self, as_filter(other))

    def xor(self, other: FilterLike[T]) -> XOr[T]:
        """Connect via logical XOR. Both sides are always evaluated."""
        from filterops.domain.ops.logical import XOr

        return XOr(self, as_filter(other))

    def and3(self, other: FilterLike[T], other2: FilterLike[T]) -> And[T]:
        """self AND (other AND other2)."""
        return self.and_(as_filter(other).and_(other2))

    def or3(self, other: FilterLike[T], other2: FilterLike[T]) -> Or[T]:
        """self OR (other OR other2)."""
        return self.or_(as_filter(other).or_(other2))

    def and_not(self, other: FilterLike[T]) -> And[T]:
        """self AND NOT other."""
        return self.and_(as_filter(other).not_())

    def or_not(self, other: FilterLike[T]) -> Or[T]:
        """self OR NOT other."""
        return self.or_(as_filter(other).not_())

    def nand(self, other: FilterLike[T]) -> Not[T]:
        """NOT (self AND other)."""
        return self.and_(other).not_()

    def nor(self, other: FilterLike[T]) -> Not[T]:
        """NOT (self OR other)."""
        return self.or_(other).not_()

    def bool_and(self, value: bool) -> And[T]:
        """self AND constant value."""
        from filterops.domain.ops.constant import Bool

        return self.and_(Bool(value))

    def bool_or(self, value: bool) -> Or[T]:
        """self OR constant value."""
        from filterops.domain.ops.constant import Bool

        return self.or_(Bool(value))

    def map_input[S](self, mapper: Callable[[S], T]) -> MapInput[S, T]:
        """Evaluate this filter on mapper(value) instead of value."""
        from filterops.domain.ops.mapping import MapInput

        if not callable(mapper):
            raise InvalidFilterError(expected="callable mapper", got=type(mapper))
        return MapInput(self, mapper)

    def into_failable[E](self, error_type: type[E] | None = None) -> IntoFailable[T, E]:
        """Present this filter as a FailableFilter that never fails.

        Args:
            error_type: Error type of the target chain. Marker only,
                never instantiated.
        """
        from filterops.domain.ops.bridge import IntoFailable

        return IntoFailable(self, error_type)

    # =========================================================================
    # Operators
    # =========================================================================

    def __and__(self, other: FilterLike[T]) -> And[T]:
        return self.and_(other)

    def __rand__(self, other: Callable[[T], bool]) -> And[T]:
        return as_filter(other).and_(self)

    def __or__(self, other: FilterLike[T]) -> Or[T]:
        return self.or_(other)

    def __ror__(self, other: Callable[[T], bool]) -> Or[T]:
        return as_filter(other).or_(self)

    def __xor__(self, other: FilterLike[T]) -> XOr[T]:
        return self.xor(other)

    def __rxor__(self, other: Callable[[T], bool]) -> XOr[T]:
        return as_filter(other).xor(self)

    def __invert__(self) -> Not[T]:
        return self.not_()


@dataclass(frozen=True, slots=True)
class FunctionFilter[T](Filter[T]):
    """Filter backed by a plain callable (T) -> bool.

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

    def evaluate(self, value: T) -> bool:
        """Call fn. Ok/Err results are rejected: failable callables need as_failable_filter()."""
        result = self.fn(value)
        if is_result(result):
            raise ConversionError(expected="pure filter must return bool, not Ok/Err", got=type(result))
        return bool(result)


def as_filter[T](obj: FilterLike[T]) -> Filter[T]:
    """Convert obj into a Filter.

    Args:
        obj: Filter (returned unchanged) or callable (wrapped)

    Returns:
        Filter instance

    Raises:
        InvalidFilterError: If obj is a FailableFilter or not callable
    """
    from filterops.domain.failable.filter import FailableFilter

    if isinstance(obj, Filter):
        return obj
    if isinstance(obj, FailableFilter):
        raise InvalidFilterError(
            expected="Filter",
            got=type(obj),
            hint="failable filters cannot be used in a pure chain",
        )
    if not callable(obj):
        raise InvalidFilterError(expected="Filter or callable", got=type(obj))
    return FunctionFilter(obj)
