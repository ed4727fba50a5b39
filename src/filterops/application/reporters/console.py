"""Console reporter: filter tree -> rich formatted string."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from filterops.domain.failable.filter import FailableFilter, FunctionFailableFilter
from filterops.domain.filter import Filter, FunctionFilter
from filterops.domain.result import Err, Ok

if TYPE_CHECKING:
    from filterops.domain.result import Result

type AnyFilter = Filter[object] | FailableFilter[object, object]

logger = logging.getLogger(__name__)

_ELLIPSIS = "…"


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_fields: Show non-filter fields in node labels (Bool(value=True)).
        max_depth: Max tree depth to render. None = unlimited.
        title: Root caption. None = no caption.
        width: Console width in characters.
    """

    show_fields: bool = True
    max_depth: int | None = None
    title: str | None = None
    width: int = 100

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: renders combinator trees.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, flt: AnyFilter) -> str:
        """Format filter structure as a tree.

        Args:
            flt: Root of the combinator tree.

        Returns:
            Formatted string.
        """
        tree = self._root()
        self._add(tree, flt, depth=1, value=None, traced=False)
        return self._render(tree)

    def trace(self, flt: AnyFilter, value: object) -> str:
        """Format filter structure annotated with each node's result for value.

        Every node is evaluated independently, so leaf filters may run
        more than once and nodes a short-circuit would skip still show a
        result.

        Args:
            flt: Root of the combinator tree.
            value: Input to evaluate.

        Returns:
            Formatted string.
        """
        tree = self._root()
        self._add(tree, flt, depth=1, value=value, traced=True)
        return self._render(tree)

    def _root(self) -> Tree:
        label = f"[bold]{escape(self._config.title)}[/bold]" if self._config.title else ""
        return Tree(label, hide_root=not self._config.title)

    def _render(self, tree: Tree) -> str:
        output = StringIO()
        console = Console(file=output, force_terminal=False, width=self._config.width)
        console.print(tree)
        return output.getvalue()

    def _add(self, parent: Tree, node: AnyFilter, *, depth: int, value: object, traced: bool) -> None:
        """Append node and its children to parent."""
        max_depth = self._config.max_depth
        if max_depth is not None and depth > max_depth:
            parent.add(_ELLIPSIS)
            return

        label = f"[cyan]{escape(describe(node, show_fields=self._config.show_fields))}[/cyan]"
        if traced:
            label = f"{label}  {_format_outcome(node.evaluate(value))}"
        branch = parent.add(label)

        for child in children(node):
            self._add(branch, child, depth=depth + 1, value=value, traced=traced)

        logger.debug("Rendered %s at depth %d", type(node).__name__, depth)


def children(node: AnyFilter) -> tuple[AnyFilter, ...]:
    """Child filters of node, in field order.

    Children are the dataclass fields holding filters. Nodes that are not
    dataclasses (hand-written filters, probes) are leaves.
    """
    if not dataclasses.is_dataclass(node):
        return ()
    return tuple(
        child
        for field in dataclasses.fields(node)
        if isinstance(child := getattr(node, field.name), (Filter, FailableFilter))
    )


def describe(node: AnyFilter, *, show_fields: bool = True) -> str:
    """One-line label for node: class name plus non-filter fields.

    Function-backed filters are labelled by the wrapped callable.
    """
    if isinstance(node, (FunctionFilter, FunctionFailableFilter)):
        return _callable_name(node.fn)

    name = type(node).__name__
    if not show_fields or not dataclasses.is_dataclass(node):
        return name

    parts = [
        f"{field.name}={_format_field(getattr(node, field.name))}"
        for field in dataclasses.fields(node)
        if not isinstance(getattr(node, field.name), (Filter, FailableFilter))
    ]
    return f"{name}({', '.join(parts)})" if parts else name


def _format_field(value: object) -> str:
    if isinstance(value, type):
        return value.__name__
    if callable(value):
        return _callable_name(value)
    return repr(value)


def _callable_name(fn: object) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def _format_outcome(outcome: bool | Result[bool, object]) -> str:
    match outcome:
        case Ok(passed):
            return f"[green]Ok({passed})[/green]" if passed else f"[red]Ok({passed})[/red]"
        case Err(error):
            return f"[yellow]Err({escape(repr(error))})[/yellow]"
        case _:
            return "[green]True[/green]" if outcome else "[red]False[/red]"
