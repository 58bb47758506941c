"""Operation filtering shared by the tree builders."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from skeletree.models import OperationInfo

logger = logging.getLogger(__name__)

ALLOWED_HTTP_METHODS: frozenset[str] = frozenset(
    {"get", "head", "post", "put", "patch", "delete", "connect", "options", "trace"}
)
"""Lowercase method keys that turn into request nodes under ``paths``."""


def select_operations(
    path: str,
    methods: dict[str, OperationInfo],
    include_deprecated: bool,
    allowed_methods: Optional[frozenset[str]] = ALLOWED_HTTP_METHODS,
) -> list[tuple[str, OperationInfo]]:
    """Return the ``(method, operation)`` pairs of *path* that become requests.

    Method keys are matched case-sensitively against *allowed_methods*;
    pass ``None`` to accept every key (webhooks). Deprecated operations are
    dropped unless *include_deprecated* is set. Document order is kept.
    """
    selected: list[tuple[str, OperationInfo]] = []
    for method, operation in methods.items():
        if allowed_methods is not None and method not in allowed_methods:
            continue
        if operation.deprecated and not include_deprecated:
            logger.debug("Skipping deprecated operation %s %s", method, path)
            continue
        selected.append((method, operation))
    return selected


def iter_operations(
    paths: dict[str, dict[str, OperationInfo]],
    include_deprecated: bool,
) -> Iterator[tuple[str, str, OperationInfo]]:
    """Yield ``(path, method, operation)`` for every selected operation in *paths*."""
    for path, methods in paths.items():
        for method, operation in select_operations(path, methods, include_deprecated):
            yield path, method, operation
