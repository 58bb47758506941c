"""Configuration with XDG paths, atomic writes, and precedence resolution.

This module decides which :class:`~skeletree.models.SkeletonOptions` a CLI
invocation builds with:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.skeletree/`` on macOS and Windows. See :func:`get_config_dir`.
* **User config** -- a single ``config.json`` holding a
  :class:`~skeletree.models.SkeletonOptions` object.
* **Project config** -- an optional ``./skeletree.json`` with a subset of
  the same keys.
* **Precedence resolution** -- :func:`resolve_options` merges CLI flags,
  environment variables, project config, and user config.

All file writes use an atomic temp-file-then-rename strategy
(:func:`_atomic_write`).
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from skeletree.exceptions import ConfigError
from skeletree.models import SkeletonOptions

_APP_NAME = "skeletree"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "skeletree.json"

ENV_FOLDER_STRATEGY = "SKELETREE_FOLDER_STRATEGY"
ENV_INCLUDE_WEBHOOKS = "SKELETREE_INCLUDE_WEBHOOKS"
ENV_INCLUDE_DEPRECATED = "SKELETREE_INCLUDE_DEPRECATED"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/skeletree/`` (default ``~/.config/skeletree/``).
    On macOS/Windows: ``~/.skeletree/``.
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_CONFIG_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".config"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file lives in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is removed and the exception re-raised.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- User config ---


def _user_config_path() -> Path:
    return get_config_dir() / _CONFIG_FILENAME


def _read_json_object(path: Path, label: str) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Invalid {label} at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {label} at {path}: expected a JSON object")
    return data


def load_user_config() -> SkeletonOptions:
    """Load the user's default options from the config directory.

    Returns:
        The stored options, or defaults if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not valid JSON or fails
            validation.
    """
    path = _user_config_path()
    if not path.is_file():
        return SkeletonOptions()
    data = _read_json_object(path, "user config")
    try:
        return SkeletonOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid user config at {path}: {exc}") from exc


def save_user_config(options: SkeletonOptions) -> Path:
    """Persist *options* atomically as the user config; return the file path."""
    path = _user_config_path()
    _atomic_write(path, json.dumps(options.model_dump(mode="json"), indent=2) + "\n")
    return path


# --- Project-local config ---


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local overrides from ``./skeletree.json``.

    Returns:
        The parsed JSON object, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but contains invalid JSON.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    return _read_json_object(path, "project config")


# --- Environment ---


def _env_bool(name: str) -> Optional[bool]:
    """Read a boolean environment variable; ``None`` when unset or empty."""
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return None
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigError(f"Environment variable {name} must be a boolean, got {raw!r}")


def load_env_overrides() -> dict[str, Any]:
    """Collect option overrides from ``SKELETREE_*`` environment variables."""
    overrides: dict[str, Any] = {}
    strategy = os.environ.get(ENV_FOLDER_STRATEGY)
    if strategy:
        overrides["folder_strategy"] = strategy
    webhooks = _env_bool(ENV_INCLUDE_WEBHOOKS)
    if webhooks is not None:
        overrides["include_webhooks"] = webhooks
    deprecated = _env_bool(ENV_INCLUDE_DEPRECATED)
    if deprecated is not None:
        overrides["include_deprecated"] = deprecated
    return overrides


# --- Precedence resolution ---


def resolve_options(
    cli_folder_strategy: Optional[str] = None,
    cli_include_webhooks: Optional[bool] = None,
    cli_include_deprecated: Optional[bool] = None,
) -> SkeletonOptions:
    """Resolve the effective options with the full precedence chain.

    Precedence (high to low):
        1. CLI flags (``None`` means "not given")
        2. Environment variables (``SKELETREE_FOLDER_STRATEGY``,
           ``SKELETREE_INCLUDE_WEBHOOKS``, ``SKELETREE_INCLUDE_DEPRECATED``)
        3. Project config (``./skeletree.json``)
        4. User config (``~/.config/skeletree/config.json``)
        5. Defaults

    The folder strategy is not checked here; an unknown value is reported
    by the dispatcher.

    Raises:
        ConfigError: If a config file or environment variable is invalid.
    """
    merged = load_user_config().model_dump()

    project = load_project_config()
    if project is not None:
        merged.update(
            {k: v for k, v in project.items() if k in SkeletonOptions.model_fields}
        )

    merged.update(load_env_overrides())

    cli = {
        "folder_strategy": cli_folder_strategy,
        "include_webhooks": cli_include_webhooks,
        "include_deprecated": cli_include_deprecated,
    }
    merged.update({k: v for k, v in cli.items() if v is not None})

    try:
        return SkeletonOptions.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid options: {exc}") from exc
