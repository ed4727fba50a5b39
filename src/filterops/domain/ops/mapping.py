"""Input mapping: evaluate a filter on a transformed value."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from filterops.domain.filter import Filter


@dataclass(frozen=True, slots=True)
class MapInput[S, T](Filter[S]):
    """Evaluate inner on mapper(value).

    Lets a Filter[T] join a chain over S:

        by_len = as_filter(lambda n: n > 3).map_input(len)

    Attributes:
        inner: Filter over the mapped type
        mapper: S -> T conversion
    """

    inner: Filter[T]
    mapper: Callable[[S], T]

    def evaluate(self, value: S) -> bool:
        return self.inner.evaluate(self.mapper(value))
