"""Probe filters: record every evaluation.

Used to observe evaluation order and short-circuiting:

    probe = Probe(answer=True)
    as_filter(lambda a: False).and_(probe).evaluate(1)
    assert probe.call_count == 0

Probes are the only stateful filters in the package. The call log is
guarded by a lock so probes can be shared between threads.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from filterops.domain.exceptions import InvalidFilterError
from filterops.domain.failable.filter import FailableFilter, checked_result
from filterops.domain.filter import Filter
from filterops.domain.result import Ok, is_result

if TYPE_CHECKING:
    from collections.abc import Callable

    from filterops.domain.result import Result

logger = logging.getLogger(__name__)


class Probe[T](Filter[T]):
    """Filter that records each value it is asked about.

    Attributes:
        name: Label used in logs and reports
    """

    __slots__ = ("_answer", "_calls", "_lock", "name")

    def __init__(self, answer: bool | Callable[[T], bool] = True, *, name: str = "probe") -> None:
        """Initialize with a fixed answer or a predicate computing it.

        Args:
            answer: Returned for every value, or called with the value
            name: Label used in logs and reports

        Raises:
            InvalidFilterError: If answer is neither bool nor callable
        """
        if not isinstance(answer, bool) and not callable(answer):
            raise InvalidFilterError(expected="bool or callable answer", got=type(answer))
        self._answer = answer
        self._calls: list[T] = []
        self._lock = threading.Lock()
        self.name = name

    def evaluate(self, value: T) -> bool:
        with self._lock:
            self._calls.append(value)
        result = self._answer if isinstance(self._answer, bool) else bool(self._answer(value))
        logger.debug("%s(%r) -> %s", self.name, value, result)
        return result

    @property
    def calls(self) -> tuple[T, ...]:
        """Values evaluated so far, in order."""
        with self._lock:
            return tuple(self._calls)

    @property
    def call_count(self) -> int:
        """Number of evaluations so far."""
        with self._lock:
            return len(self._calls)

    def reset(self) -> None:
        """Forget recorded calls."""
        with self._lock:
            self._calls.clear()

    def __repr__(self) -> str:
        return f"Probe(name={self.name!r}, calls={self.call_count})"


class FailableProbe[T, E](FailableFilter[T, E]):
    """FailableFilter that records each value it is asked about.

    Attributes:
        name: Label used in logs and reports
    """

    __slots__ = ("_answer", "_calls", "_lock", "name")

    def __init__(
        self,
        answer: Result[bool, E] | Callable[[T], Result[bool, E]] = Ok(True),
        *,
        name: str = "failable_probe",
    ) -> None:
        """Initialize with a fixed Result or a callable computing it.

        Args:
            answer: Returned for every value, or called with the value
            name: Label used in logs and reports

        Raises:
            InvalidFilterError: If answer is neither Ok/Err nor callable
        """
        if not is_result(answer) and not callable(answer):
            raise InvalidFilterError(expected="Ok/Err or callable answer", got=type(answer))
        self._answer = answer
        self._calls: list[T] = []
        self._lock = threading.Lock()
        self.name = name

    def evaluate(self, value: T) -> Result[bool, E]:
        with self._lock:
            self._calls.append(value)
        result = checked_result(self._answer if is_result(self._answer) else self._answer(value))
        logger.debug("%s(%r) -> %r", self.name, value, result)
        return result

    @property
    def calls(self) -> tuple[T, ...]:
        """Values evaluated so far, in order."""
        with self._lock:
            return tuple(self._calls)

    @property
    def call_count(self) -> int:
        """Number of evaluations so far."""
        with self._lock:
            return len(self._calls)

    def reset(self) -> None:
        """Forget recorded calls."""
        with self._lock:
            self._calls.clear()

    def __repr__(self) -> str:
        return f"FailableProbe(name={self.name!r}, calls={self.call_count})"
