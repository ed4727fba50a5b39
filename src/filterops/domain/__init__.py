"""Domain layer: filter capabilities, combinators and the Result protocol."""

from filterops.domain.exceptions import (
    ConversionError,
    FilterOpsError,
    InvalidFilterError,
    UnwrapError,
)
from filterops.domain.failable import (
    FailableAnd,
    FailableBool,
    FailableFilter,
    FailableMapErr,
    FailableMapInput,
    FailableNot,
    FailableOr,
    FailableXOr,
    FunctionFailableFilter,
    as_failable_filter,
)
from filterops.domain.filter import Filter, FunctionFilter, as_filter
from filterops.domain.ops import And, Bool, IntoFailable, MapInput, Not, Or, XOr
from filterops.domain.result import Err, Ok, Result, is_result

__all__ = [
    # Capabilities
    "Filter",
    "FunctionFilter",
    "as_filter",
    "FailableFilter",
    "FunctionFailableFilter",
    "as_failable_filter",
    # Pure combinators
    "And",
    "Or",
    "XOr",
    "Not",
    "Bool",
    "MapInput",
    "IntoFailable",
    # Failable combinators
    "FailableAnd",
    "FailableOr",
    "FailableXOr",
    "FailableNot",
    "FailableBool",
    "FailableMapInput",
    "FailableMapErr",
    # Result
    "Ok",
    "Err",
    "Result",
    "is_result",
    # Exceptions
    "FilterOpsError",
    "InvalidFilterError",
    "ConversionError",
    "UnwrapError",
]
