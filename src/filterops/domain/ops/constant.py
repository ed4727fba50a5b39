"""Constant filter, so plain booleans can take part in filter construction."""

from __future__ import annotations

from dataclasses import dataclass

from filterops.domain.filter import Filter


@dataclass(frozen=True, slots=True)
class Bool(Filter[object]):
    """Filter that ignores its input and returns a fixed value.

    Attributes:
        value: Result of every evaluation
    """

    value: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.value, bool):
            raise TypeError(f"value must be bool, got {type(self.value).__name__}")

    def evaluate(self, value: object) -> bool:
        del value  # Unused
        return self.value
