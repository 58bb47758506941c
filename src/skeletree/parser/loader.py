"""Load API documents from a local file or stdin.

Both JSON and YAML are supported. The format is taken from the file
extension when it is ``.json``, ``.yaml`` or ``.yml``; otherwise JSON is
tried first and YAML second (valid JSON is also valid YAML, but JSON parsing
is stricter and faster).

The loaded mapping is handed to
:func:`~skeletree.parser.extractor.extract_document`. No schema validation
and no ``$ref`` resolution happen here.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

from skeletree.exceptions import SpecParseError


def load_document(source: str) -> dict[str, Any]:
    """Load an API document from a file path, or from stdin when *source* is ``-``.

    Args:
        source: A local file path or ``-``.

    Returns:
        The parsed document as a dictionary.

    Raises:
        SpecParseError: If the source cannot be read, is empty, is not
            valid JSON/YAML, or does not hold a mapping at the top level.
    """
    if source == "-":
        return _load_from_stdin()
    return _load_from_file(source)


def _load_from_stdin() -> dict[str, Any]:
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise SpecParseError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise SpecParseError("No input received from stdin")

    return parse_content(content)


def _load_from_file(path: str) -> dict[str, Any]:
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Document not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecParseError(f"Failed to read document {path}: {exc}") from exc

    if not content.strip():
        raise SpecParseError(f"Document is empty: {path}")

    suffix = file_path.suffix.lower()
    hint = ""
    if suffix == ".json":
        hint = "json"
    elif suffix in (".yaml", ".yml"):
        hint = "yaml"

    return parse_content(content, hint=hint)


def parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse *content* as JSON or YAML.

    Args:
        content: The raw text.
        hint: ``"json"`` to accept JSON only, ``"yaml"`` to go straight to
            YAML, or ``""`` to try JSON then YAML.

    Returns:
        The parsed mapping.

    Raises:
        SpecParseError: If the content parses as neither format or its top
            level is not a mapping.
    """
    json_error: Exception | None = None

    if hint != "yaml":
        try:
            return _require_mapping(json.loads(content))
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
            json_error = exc

    try:
        return _require_mapping(yaml.safe_load(content))
    except yaml.YAMLError as exc:
        msg = "Failed to parse document as JSON or YAML"
        if json_error:
            msg += f"\n  JSON error: {json_error}"
        msg += f"\n  YAML error: {exc}"
        raise SpecParseError(msg) from exc


def _require_mapping(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        kind = type(result).__name__ if result is not None else "empty document"
        raise SpecParseError(f"Document must be a JSON/YAML object (got {kind})")
    return result
