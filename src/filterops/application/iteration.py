"""Iterator extension: filter lazy sequences with Filter instances.

The filter is validated before iteration starts (FAIL-FIRST);
iteration itself stays lazy. Finite sources give finite results,
infinite sources infinite ones.

Usage:
    from filterops import as_filter
    from filterops.application.iteration import filter_with

    in_range = as_filter(lambda a: a > 5) & (lambda a: a < 15)
    list(filter_with(range(21), in_range))  # [6, ..., 14]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterops.domain.exceptions import ConversionError
from filterops.domain.filter import as_filter
from filterops.domain.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from filterops.domain.filter import Filter, FilterLike
    from filterops.domain.result import Result


def filter_with[T](items: Iterable[T], flt: FilterLike[T]) -> Iterator[T]:
    """Yield items for which flt evaluates True, in source order.

    Args:
        items: Source sequence
        flt: Filter or plain predicate

    Returns:
        Lazy iterator over passing items

    Raises:
        InvalidFilterError: If flt is not usable as a Filter
    """
    return _filtered(iter(items), as_filter(flt))


def filter_oks[T, E](
    items: Iterable[Result[T, E]],
    flt: FilterLike[T],
) -> Iterator[Result[T, E]]:
    """Filter Ok values of a Result stream; Err items pass through.

    Args:
        items: Source of Ok/Err items
        flt: Filter applied to Ok payloads

    Returns:
        Lazy iterator: every Err, and each Ok whose value passes flt
    """
    return _filtered_oks(iter(items), as_filter(flt))


def filter_errs[T, E](
    items: Iterable[Result[T, E]],
    flt: FilterLike[E],
) -> Iterator[Result[T, E]]:
    """Filter Err values of a Result stream; Ok items pass through.

    Args:
        items: Source of Ok/Err items
        flt: Filter applied to Err payloads

    Returns:
        Lazy iterator: every Ok, and each Err whose error passes flt
    """
    return _filtered_errs(iter(items), as_filter(flt))


def _filtered[T](items: Iterator[T], flt: Filter[T]) -> Iterator[T]:
    for item in items:
        if flt.evaluate(item):
            yield item


def _filtered_oks[T, E](items: Iterator[Result[T, E]], flt: Filter[T]) -> Iterator[Result[T, E]]:
    for item in items:
        match item:
            case Ok(value):
                if flt.evaluate(value):
                    yield item
            case Err():
                yield item
            case _:
                raise ConversionError(expected="expected Ok or Err item", got=type(item))


def _filtered_errs[T, E](items: Iterator[Result[T, E]], flt: Filter[E]) -> Iterator[Result[T, E]]:
    for item in items:
        match item:
            case Err(error):
                if flt.evaluate(error):
                    yield item
            case Ok():
                yield item
            case _:
                raise ConversionError(expected="expected Ok or Err item", got=type(item))
