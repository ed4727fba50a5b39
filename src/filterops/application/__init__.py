"""Application layer: iteration helpers, builders, probes and reporters."""

from filterops.application.builder import (
    failable_predicate,
    make_failable_filter,
    make_filter,
    predicate,
)
from filterops.application.iteration import filter_errs, filter_oks, filter_with
from filterops.application.probe import FailableProbe, Probe

__all__ = [
    "FailableProbe",
    "Probe",
    "failable_predicate",
    "filter_errs",
    "filter_oks",
    "filter_with",
    "make_failable_filter",
    "make_filter",
    "predicate",
]
