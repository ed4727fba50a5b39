"""Logical combinators: AND, OR, XOR, NOT composition."""

from __future__ import annotations

from dataclasses import dataclass

from filterops.domain.filter import Filter


@dataclass(frozen=True, slots=True)
class And[T](Filter[T]):
    """left AND right.

    Short-circuits: right is not evaluated if left is False.
    """

    left: Filter[T]
    right: Filter[T]

    def evaluate(self, value: T) -> bool:
        return self.left.evaluate(value) and self.right.evaluate(value)


@dataclass(frozen=True, slots=True)
class Or[T](Filter[T]):
    """left OR right.

    Short-circuits: right is not evaluated if left is True.
    """

    left: Filter[T]
    right: Filter[T]

    def evaluate(self, value: T) -> bool:
        return self.left.evaluate(value) or self.right.evaluate(value)


@dataclass(frozen=True, slots=True)
class XOr[T](Filter[T]):
    """left XOR right. Both sides are always evaluated."""

    left: Filter[T]
    right: Filter[T]

    def evaluate(self, value: T) -> bool:
        return self.left.evaluate(value) != self.right.evaluate(value)


@dataclass(frozen=True, slots=True)
class Not[T](Filter[T]):
    """NOT inner."""

    inner: Filter[T]

    def evaluate(self, value: T) -> bool:
        return not self.inner.evaluate(value)
