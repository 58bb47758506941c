"""Typer application and CLI entry point for skeletree.

This module wires together the top-level Typer application and registers the
built-in sub-commands (``tree``, ``nodes``, ``config``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler and invokes the Typer app;
:class:`~skeletree.exceptions.SkeletreeError` escaping a command becomes a
clean exit with the error's code.

See Also:
    :mod:`skeletree.config`: Option resolution.
    :mod:`skeletree.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
from typing import Any

import typer

from skeletree import __version__
from skeletree.commands.config import config_app
from skeletree.commands.tree import nodes_command, tree_command
from skeletree.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="skeletree",
    help="Organise an OpenAPI document into a folder/request skeleton tree.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("tree")(tree_command)
app.command("nodes")(nodes_command)
app.add_typer(config_app, name="config", help="Default option management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"skeletree {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~skeletree.output.OutputManager` built from
    the CLI flags and routes the core's log records to stderr.
    """
    from skeletree.output import OutputFormat, OutputManager, configure_logging, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    output = OutputManager(
        format=fmt,
        no_color=no_color,
        quiet=quiet,
        verbose=verbose,
    )
    set_output(output)
    configure_logging(output)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``skeletree`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except Exception as exc:
        from skeletree.exceptions import SkeletreeError
        from skeletree.output import error

        if isinstance(exc, SkeletreeError):
            error(str(exc))
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
