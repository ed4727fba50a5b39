"""pytest fixtures for filter testing.

Probe factories return fresh probes per call; probes created in one test
are never shared with another.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from filterops.application.probe import FailableProbe, Probe
from filterops.application.reporters.console import ConsoleConfig, ConsoleReporter
from filterops.domain.result import Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from filterops.domain.result import Result


@pytest.fixture
def probe() -> Callable[..., Probe[object]]:
    """Factory for Probe filters.

    Usage:
        def test_and_short_circuits(probe):
            right = probe(True)
            as_filter(lambda _: False).and_(right).evaluate(1)
            assert right.call_count == 0
    """

    def _make(answer: bool | Callable[[object], bool] = True, *, name: str = "probe") -> Probe[object]:
        return Probe(answer, name=name)

    return _make


@pytest.fixture
def failable_probe() -> Callable[..., FailableProbe[object, object]]:
    """Factory for FailableProbe filters."""

    def _make(
        answer: Result[bool, object] | Callable[[object], Result[bool, object]] = Ok(True),
        *,
        name: str = "failable_probe",
    ) -> FailableProbe[object, object]:
        return FailableProbe(answer, name=name)

    return _make


@pytest.fixture
def filter_reporter() -> ConsoleReporter:
    """ConsoleReporter with defaults suitable for assertion messages."""
    return ConsoleReporter(ConsoleConfig(width=120))
