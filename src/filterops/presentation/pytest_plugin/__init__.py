"""pytest plugin for filterops.

Provides fixtures for testing filters:
    probe: Factory for call-recording Probe filters
    failable_probe: Factory for call-recording FailableProbe filters
    filter_reporter: ConsoleReporter for tree dumps in assertion messages

Registered through the pytest11 entry point; also usable with
pytest_plugins = ["filterops.presentation.pytest_plugin"].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterops.presentation.pytest_plugin.fixtures import failable_probe, filter_reporter, probe

if TYPE_CHECKING:
    import pytest

__all__ = [
    "failable_probe",
    "filter_reporter",
    "probe",
]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "filterops: mark test as filter composition test",
    )
