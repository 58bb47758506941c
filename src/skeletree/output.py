"""Output formatting system with strict stdout/stderr discipline.

Follows `clig.dev <https://clig.dev/>`_ conventions:

* **stdout** -- primary data only (rendered trees, node tables, JSON).
* **stderr** -- all diagnostics (status, warnings, errors, debug logs).
* **TTY detection** -- Rich formatting when stdout is an interactive
  terminal, plain text when piped to another process.
* **Colour control** -- respects ``NO_COLOR``, ``TERM=dumb``, and the
  ``--no-color`` CLI flag.

The module exposes two layers:

1. :class:`OutputManager` -- a stateful object holding format preferences,
   Rich consoles, and quiet/verbose flags. Created once in
   :func:`~skeletree.app.main_callback` and installed via :func:`set_output`.
2. Module-level convenience functions (:func:`info`, :func:`error`, ...)
   that delegate to the global ``OutputManager`` instance.

:func:`configure_logging` routes the core's :mod:`logging` records to
stderr through Rich when ``--verbose`` is given.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich.tree import Tree

from skeletree.graph import ROOT_ID, SkeletonTree
from skeletree.models import Node, NodeType


class OutputFormat(str, Enum):
    """Enumeration of supported output formats.

    ``AUTO`` resolves to ``RICH`` when stdout is an interactive TTY and colour
    is not disabled, or to ``PLAIN`` otherwise.
    """

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


_NODE_STYLES: dict[NodeType, str] = {
    NodeType.COLLECTION: "bold",
    NodeType.FOLDER: "bold cyan",
    NodeType.REQUEST: "green",
    NodeType.WEBHOOK_FOLDER: "bold magenta",
    NodeType.WEBHOOK_REQUEST: "magenta",
}


class OutputManager:
    """Central manager for all CLI output with stdout/stderr discipline.

    Args:
        format: Desired output format. ``AUTO`` resolves based on TTY
            detection.
        no_color: Disable all colour and Rich markup.
        quiet: Suppress non-essential informational messages on stderr.
        verbose: Enable debug-level messages on stderr.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            self._format = (
                OutputFormat.RICH if _is_tty() and not self._no_color else OutputFormat.PLAIN
            )
        else:
            self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(self._format == OutputFormat.RICH),
        )
        self._stderr = Console(
            file=sys.stderr,
            no_color=self._no_color,
            stderr=True,
        )

    @property
    def format(self) -> OutputFormat:
        """The resolved output format."""
        return self._format

    @property
    def is_quiet(self) -> bool:
        return self._quiet

    @property
    def is_verbose(self) -> bool:
        return self._verbose

    @property
    def no_color(self) -> bool:
        return self._no_color

    # ------------------------------------------------------------------ #
    # Data output (stdout)
    # ------------------------------------------------------------------ #

    def format_response(self, data: Any) -> None:
        """Print a dict/list payload to stdout in the active format."""
        if self._format == OutputFormat.JSON:
            self.print_data(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        elif self._format == OutputFormat.PLAIN:
            if isinstance(data, dict):
                for key, value in data.items():
                    self.print_data(f"{key}\t{value}")
            else:
                self.print_data(str(data))
        else:
            json_str = json.dumps(data, indent=2, ensure_ascii=False, default=str)
            self._stdout.print(Syntax(json_str, "json", theme="monokai", word_wrap=True))

    def print_data(self, text: str) -> None:
        """Print raw text to stdout."""
        print(text, file=sys.stdout, flush=True)

    def print_table(
        self,
        headers: list[str],
        rows: list[list[str]],
        title: Optional[str] = None,
    ) -> None:
        """Print tabular data to stdout in the active format.

        * **Rich mode** -- styled :class:`~rich.table.Table`.
        * **JSON mode** -- array of objects keyed by header names.
        * **Plain mode** -- tab-separated values, one row per line.
        """
        if self._format == OutputFormat.JSON:
            records = [dict(zip(headers, row)) for row in rows]
            self.print_data(json.dumps(records, indent=2, ensure_ascii=False))

        elif self._format == OutputFormat.PLAIN:
            self.print_data("\t".join(headers))
            for row in rows:
                self.print_data("\t".join(row))

        else:
            table = Table(title=title, show_header=True, header_style="bold cyan")
            for h in headers:
                table.add_column(h)
            for row in rows:
                table.add_row(*(escape(cell) for cell in row))
            self._stdout.print(table)

    def print_tree(self, tree: SkeletonTree, show_ids: bool = False) -> None:
        """Render a skeleton tree to stdout.

        * **Rich mode** -- a :class:`rich.tree.Tree` with one style per node type.
        * **JSON mode** -- :meth:`SkeletonTree.to_dict` (nodes and edges).
        * **Plain mode** -- two-space indentation per depth level.

        Args:
            tree: The tree to render.
            show_ids: Append each node id to its label (Rich and plain modes).
        """
        if self._format == OutputFormat.JSON:
            self.print_data(json.dumps(tree.to_dict(), indent=2, ensure_ascii=False))
            return

        if self._format == OutputFormat.PLAIN:
            for depth, node_id, node in tree.walk():
                self.print_data("  " * depth + node_label(node_id, node, show_ids))
            return

        branches: dict[int, Tree] = {}
        for depth, node_id, node in tree.walk():
            label = f"[{_NODE_STYLES[node.type]}]{escape(node_label(node_id, node, show_ids))}[/]"
            if depth == 0:
                branches[0] = Tree(label)
            else:
                branches[depth] = branches[depth - 1].add(label)
        self._stdout.print(branches[0])

    # ------------------------------------------------------------------ #
    # Diagnostics (stderr)
    # ------------------------------------------------------------------ #

    def info(self, message: str) -> None:
        """Print an informational message to stderr. Suppressed by ``--quiet``."""
        if not self._quiet:
            if self._no_color:
                print(message, file=sys.stderr, flush=True)
            else:
                self._stderr.print(message)

    def success(self, message: str) -> None:
        """Print a green success message to stderr. Suppressed by ``--quiet``."""
        if not self._quiet:
            if self._no_color:
                print(message, file=sys.stderr, flush=True)
            else:
                self._stderr.print(f"[green]{message}[/green]")

    def warning(self, message: str) -> None:
        """Print a yellow warning to stderr. NOT suppressed by ``--quiet``."""
        if self._no_color:
            print(f"Warning: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Print a bold-red error to stderr. Never suppressed."""
        if self._no_color:
            print(f"Error: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def debug(self, message: str) -> None:
        """Print a debug message to stderr. Only shown when ``--verbose`` is active."""
        if self._verbose:
            if self._no_color:
                print(f"[debug] {message}", file=sys.stderr, flush=True)
            else:
                self._stderr.print(f"[dim]\\[debug] {escape(message)}[/dim]")

    def logging_handler(self) -> logging.Handler:
        """Return a handler that writes log records to this manager's stderr."""
        if self._no_color:
            handler: logging.Handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
            return handler
        return RichHandler(console=self._stderr, show_time=False, show_path=False)


def node_label(node_id: str, node: Node, show_ids: bool = False) -> str:
    """Human-readable label for a node: folder name or ``METHOD path``."""
    label = node.name or "collection"
    if show_ids:
        label = f"{label}  ({node_id})"
    return label


def node_rows(tree: SkeletonTree) -> list[list[str]]:
    """One ``[id, type, parents, name]`` row per node, in insertion order."""
    rows: list[list[str]] = []
    for node_id in tree.nodes():
        node = tree.node(node_id)
        parents = ", ".join(tree.parents(node_id)) if node_id != ROOT_ID else "-"
        rows.append([node_id, node.type.value, parents or "-", node.name or "-"])
    return rows


# ------------------------------------------------------------------ #
# Module-level helpers
# ------------------------------------------------------------------ #


def _is_tty() -> bool:
    """Check if stdout is a TTY."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """Check if color should be disabled per clig.dev (``NO_COLOR`` set or ``TERM=dumb``)."""
    if os.environ.get("NO_COLOR") is not None:
        return True
    return os.environ.get("TERM") == "dumb"


def configure_logging(output: OutputManager) -> None:
    """Attach a stderr handler to the ``skeletree`` logger.

    DEBUG records are emitted only when *output* is verbose; otherwise only
    warnings and above get through. Calling this again replaces the handler
    installed by the previous call.
    """
    logger = logging.getLogger("skeletree")
    for handler in list(logger.handlers):
        if getattr(handler, "_skeletree_handler", False):
            logger.removeHandler(handler)

    handler = output.logging_handler()
    handler._skeletree_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if output.is_verbose else logging.WARNING)
    logger.propagate = False


# ------------------------------------------------------------------ #
# Global output instance (set during app startup)
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager` instance."""
    global _output
    _output = output


def reset_output() -> None:
    """Reset the global :class:`OutputManager` to ``None`` (used by tests)."""
    global _output
    _output = None


# ------------------------------------------------------------------ #
# Convenience functions that use the global instance
# ------------------------------------------------------------------ #


def format_response(data: Any) -> None:
    get_output().format_response(data)


def info(message: str) -> None:
    """Print info message to stderr via the global OutputManager."""
    get_output().info(message)


def error(message: str) -> None:
    """Print error to stderr via the global OutputManager."""
    get_output().error(message)


def success(message: str) -> None:
    """Print success message to stderr via the global OutputManager."""
    get_output().success(message)


def warning(message: str) -> None:
    """Print warning to stderr via the global OutputManager."""
    get_output().warning(message)


def debug(message: str) -> None:
    """Print debug message to stderr via the global OutputManager."""
    get_output().debug(message)
