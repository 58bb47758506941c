"""Shared test fixtures for skeletree.

Provides the petstore fixture documents, isolated config environments, and
resets the global output/logging state between tests. These fixtures are
discovered by pytest automatically.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from skeletree.models import APIDocument, SkeletonOptions
from skeletree.output import reset_output
from skeletree.parser.extractor import extract_document


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_global_state() -> None:
    """Reset the global OutputManager and the ``skeletree`` logger.

    The CLI callback installs an OutputManager bound to the streams of the
    CliRunner that invoked it, and attaches a non-propagating handler to the
    ``skeletree`` logger. Both would leak into later tests (closed streams,
    records invisible to ``caplog``).
    """
    yield
    reset_output()
    logger = logging.getLogger("skeletree")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


# ---------------------------------------------------------------------------
# Document fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_raw() -> dict[str, Any]:
    """Raw petstore document: tags, nested paths, a deprecated op, webhooks."""
    with open(FIXTURES_DIR / "petstore.json") as f:
        return json.load(f)


@pytest.fixture
def petstore_document(petstore_raw: dict[str, Any]) -> APIDocument:
    """The petstore document after extraction."""
    return extract_document(petstore_raw)


@pytest.fixture
def petstore_json_path() -> Path:
    return FIXTURES_DIR / "petstore.json"


@pytest.fixture
def petstore_yaml_path() -> Path:
    return FIXTURES_DIR / "petstore.yaml"


@pytest.fixture
def default_options() -> SkeletonOptions:
    return SkeletonOptions()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME at ``tmp_path/config``, forces the XDG code path,
    clears every SKELETREE_* variable, and changes the working directory to
    ``tmp_path`` so no project config is picked up by accident.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("skeletree.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))

    for var in [
        "SKELETREE_FOLDER_STRATEGY",
        "SKELETREE_INCLUDE_WEBHOOKS",
        "SKELETREE_INCLUDE_DEPRECATED",
        "NO_COLOR",
    ]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
