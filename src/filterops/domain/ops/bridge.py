"""Bridge: present a pure Filter as a FailableFilter that never fails.

Conversion is always explicit. Failable combinators reject pure filters,
so a mixed chain spells out where the bridge sits:

    checked = exists_on_disk.and_(is_python.into_failable(OSError))
    checked = exists_on_disk.and_(IntoFailable[Path, OSError](is_python))
"""

from __future__ import annotations

from dataclasses import dataclass

from filterops.domain.failable.filter import FailableFilter
from filterops.domain.filter import Filter, as_filter
from filterops.domain.result import Ok


@dataclass(frozen=True, slots=True)
class IntoFailable[T, E](FailableFilter[T, E]):
    """Failable view of a pure filter.

    E is a phantom marker: no E value is ever constructed.
    A plain callable is accepted as inner and wrapped via as_filter().

    Attributes:
        inner: Wrapped pure filter
        error_type: Optional runtime record of E (reporting only)
    """

    inner: Filter[T]
    error_type: type[E] | None = None

    def __post_init__(self) -> None:
        """Normalize inner, validate invariants. FAIL-FIRST."""
        object.__setattr__(self, "inner", as_filter(self.inner))
        if self.error_type is not None and not isinstance(self.error_type, type):
            raise TypeError(f"error_type must be a type, got {type(self.error_type).__name__}")

    def evaluate(self, value: T) -> Ok[bool]:
        return Ok(self.inner.evaluate(value))
