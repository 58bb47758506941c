"""Config commands -- view and modify the user's default options.

Provides the ``skeletree config`` sub-command group for reading, updating,
and resetting the user config file (a
:class:`~skeletree.models.SkeletonOptions` object stored in the skeletree
config directory).
"""

from __future__ import annotations

import typer

from skeletree.output import error, format_response, info, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show(
    effective: bool = typer.Option(
        False,
        "--effective",
        help="Show the options after applying project config and environment.",
    ),
) -> None:
    """Show the stored (or effective) default options.

    Example::

        skeletree config show
        skeletree --json config show --effective
    """
    from skeletree.config import get_config_dir, load_user_config, resolve_options
    from skeletree.exceptions import ConfigError

    try:
        options = resolve_options() if effective else load_user_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    info(f"Config directory: {get_config_dir()}")
    format_response(options.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Option name: folder_strategy, include_webhooks, include_deprecated."
    ),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a default option.

    Boolean options accept ``true/false``, ``yes/no``, ``1/0``. The folder
    strategy is checked against the known strategies before saving.

    Example::

        skeletree config set folder_strategy tags
        skeletree config set include_deprecated false
    """
    from skeletree.config import load_user_config, save_user_config
    from skeletree.exceptions import SkeletreeError

    try:
        options = load_user_config()
        coerced = _coerce_option(options.model_dump(), key, value)
    except SkeletreeError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    data = options.model_dump()
    data[key] = coerced
    path = save_user_config(type(options).model_validate(data))
    success(f"Set {key} = {coerced} ({path})")


def _coerce_option(data: dict, key: str, value: str) -> object:
    """Convert *value* to the type of option *key*; validate strategies."""
    from skeletree.exceptions import InvalidUsageError
    from skeletree.generator import resolve_builder

    if key not in data:
        raise InvalidUsageError(f"Unknown config key: {key}")

    current = data[key]
    if isinstance(current, bool):
        lowered = value.lower()
        if lowered in ("true", "1", "yes", "on"):
            coerced: object = True
        elif lowered in ("false", "0", "no", "off"):
            coerced = False
        else:
            raise InvalidUsageError(f"Expected a boolean for {key}, got: {value}")
    else:
        resolve_builder(value)
        coerced = value
    return coerced


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Reset the user config to defaults.

    Example::

        skeletree config reset --force
    """
    from skeletree.config import save_user_config
    from skeletree.models import SkeletonOptions

    if not force:
        confirmed = typer.confirm("Reset all options to defaults?")
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    save_user_config(SkeletonOptions())
    success("Configuration reset to defaults.")
