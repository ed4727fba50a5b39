"""Reporters for filter trees.

Output is str, not print(). Caller decides destination.
"""

from filterops.application.reporters.console import ConsoleConfig, ConsoleReporter, children, describe

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "children",
    "describe",
]
