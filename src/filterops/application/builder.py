"""Declarative filter builder.

Generates named filter classes at definition time, so many small filters
need no hand-written class bodies:

    LowerThan = make_filter("LowerThan", lambda this, n: n < this.limit, {"limit": int})
    LowerThan(10).evaluate(3)  # True

Generated classes are frozen dataclasses: fields are captured constants,
equality and repr come for free.
"""

from __future__ import annotations

import keyword
import logging
import sys
from dataclasses import make_dataclass
from typing import TYPE_CHECKING, Any

from filterops.domain.exceptions import InvalidFilterError
from filterops.domain.failable.filter import FailableFilter, FunctionFailableFilter, checked_result
from filterops.domain.filter import Filter, FunctionFilter

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from filterops.domain.result import Result

logger = logging.getLogger(__name__)


def make_filter(
    name: str,
    expression: Callable[[Any, Any], bool],
    fields: Mapping[str, type] | None = None,
    *,
    doc: str | None = None,
    module: str | None = None,
) -> type[Filter[Any]]:
    """Generate a Filter subclass named name.

    Args:
        name: Class name (valid identifier)
        expression: (self, value) -> bool, becomes evaluate()
        fields: Captured constants, field name -> type. None = no fields.
        doc: Class docstring
        module: __module__ of the class. None = caller's module.

    Returns:
        New frozen dataclass type implementing Filter

    Raises:
        ValueError: If name or a field name is not a valid identifier,
            or a field name shadows a Filter member (evaluate, and_, ...)
        InvalidFilterError: If expression is not callable
    """

    def evaluate(self: Any, value: Any) -> bool:
        return bool(expression(self, value))

    return _build(
        name,
        expression,
        fields,
        base=Filter,
        evaluate=evaluate,
        doc=doc,
        module=module or _caller_module(),
    )


def make_failable_filter(
    name: str,
    expression: Callable[[Any, Any], Result[bool, Any]],
    fields: Mapping[str, type] | None = None,
    *,
    doc: str | None = None,
    module: str | None = None,
) -> type[FailableFilter[Any, Any]]:
    """Generate a FailableFilter subclass named name.

    Same contract as make_filter(), but expression returns Ok or Err.
    """

    def evaluate(self: Any, value: Any) -> Result[bool, Any]:
        return checked_result(expression(self, value))

    return _build(
        name,
        expression,
        fields,
        base=FailableFilter,
        evaluate=evaluate,
        doc=doc,
        module=module or _caller_module(),
    )


def predicate[T](fn: Callable[[T], bool]) -> FunctionFilter[T]:
    """Decorator: turn a function into a Filter.

    Example:
        @predicate
        def is_even(n: int) -> bool:
            return n % 2 == 0

        (is_even & (lambda n: n > 2)).evaluate(4)  # True
    """
    return FunctionFilter(fn)


def failable_predicate[T, E](fn: Callable[[T], Result[bool, E]]) -> FunctionFailableFilter[T, E]:
    """Decorator: turn a function returning Ok/Err into a FailableFilter."""
    return FunctionFailableFilter(fn)


def _build[B](
    name: str,
    expression: object,
    fields: Mapping[str, type] | None,
    *,
    base: type[B],
    evaluate: Callable[..., Any],
    doc: str | None,
    module: str,
) -> type[B]:
    """Validate inputs and create the dataclass. FAIL-FIRST."""
    _check_identifier(name, "name")
    if not callable(expression):
        raise InvalidFilterError(expected="callable expression", got=type(expression))

    field_specs = list((fields or {}).items())
    for field_name, _ in field_specs:
        _check_identifier(field_name, "field name")
        if field_name in dir(base):
            raise ValueError(f"field name {field_name!r} shadows {base.__name__}.{field_name}")

    cls = make_dataclass(
        name,
        field_specs,
        bases=(base,),
        namespace={"evaluate": evaluate, "__doc__": doc or f"{name} filter."},
        frozen=True,
        slots=True,
        module=module,
    )
    logger.debug(
        "Generated %s %s.%s with fields %s",
        base.__name__,
        module,
        name,
        [f for f, _ in field_specs],
    )
    return cls


def _check_identifier(value: str, what: str) -> None:
    if not isinstance(value, str) or not value.isidentifier() or keyword.iskeyword(value):
        raise ValueError(f"{what} must be a valid identifier, got {value!r}")


def _caller_module() -> str:
    """Module name of the code calling make_filter()/make_failable_filter()."""
    # SLF001: sys._getframe is the documented way to inspect the calling frame
    return sys._getframe(2).f_globals.get("__name__", "__main__")  # noqa: SLF001
