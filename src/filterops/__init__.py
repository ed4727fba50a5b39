"""filterops - composable boolean filters with failable variants."""

__version__ = "0.1.0"

import logging

from filterops.application import (
    FailableProbe,
    Probe,
    failable_predicate,
    filter_errs,
    filter_oks,
    filter_with,
    make_failable_filter,
    make_filter,
    predicate,
)
from filterops.domain import (
    And,
    Bool,
    ConversionError,
    Err,
    FailableAnd,
    FailableBool,
    FailableFilter,
    FailableMapErr,
    FailableMapInput,
    FailableNot,
    FailableOr,
    FailableXOr,
    Filter,
    FilterOpsError,
    FunctionFailableFilter,
    FunctionFilter,
    IntoFailable,
    InvalidFilterError,
    MapInput,
    Not,
    Ok,
    Or,
    Result,
    UnwrapError,
    XOr,
    as_failable_filter,
    as_filter,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "And",
    "Bool",
    "ConversionError",
    "Err",
    "FailableAnd",
    "FailableBool",
    "FailableFilter",
    "FailableMapErr",
    "FailableMapInput",
    "FailableNot",
    "FailableOr",
    "FailableProbe",
    "FailableXOr",
    "Filter",
    "FilterOpsError",
    "FunctionFailableFilter",
    "FunctionFilter",
    "IntoFailable",
    "InvalidFilterError",
    "MapInput",
    "Not",
    "Ok",
    "Or",
    "Probe",
    "Result",
    "UnwrapError",
    "XOr",
    "__version__",
    "as_failable_filter",
    "as_filter",
    "failable_predicate",
    "filter_errs",
    "filter_oks",
    "filter_with",
    "make_failable_filter",
    "make_filter",
    "predicate",
]
