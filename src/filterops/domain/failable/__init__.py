"""Failable filters: evaluation may fail with a caller-defined error."""

from filterops.domain.failable.filter import (
    FailableFilter,
    FailableFilterLike,
    FunctionFailableFilter,
    as_failable_filter,
)
from filterops.domain.failable.ops import (
    FailableAnd,
    FailableBool,
    FailableMapErr,
    FailableMapInput,
    FailableNot,
    FailableOr,
    FailableXOr,
)

__all__ = [
    "FailableAnd",
    "FailableBool",
    "FailableFilter",
    "FailableFilterLike",
    "FailableMapErr",
    "FailableMapInput",
    "FailableNot",
    "FailableOr",
    "FailableXOr",
    "FunctionFailableFilter",
    "as_failable_filter",
]
