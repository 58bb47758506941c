"""Strategy dispatcher: build the skeleton tree for a document.

:func:`generate_skeleton_tree` is the public entry point of the core. It
picks exactly one folder strategy, runs it, and then appends the webhook
subtree when asked to. An unknown strategy is rejected before any tree is
built.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Union

from skeletree.exceptions import ConfigError
from skeletree.generator.paths import build_path_tree
from skeletree.generator.tag_hierarchy import build_tag_hierarchy_tree
from skeletree.generator.tags import build_tag_tree
from skeletree.generator.webhooks import append_webhooks
from skeletree.graph import SkeletonTree
from skeletree.models import APIDocument, FolderStrategy, SkeletonOptions
from skeletree.parser.extractor import extract_document

logger = logging.getLogger(__name__)

TreeBuilder = Callable[[APIDocument, bool], SkeletonTree]

STRATEGY_BUILDERS: Mapping[str, TreeBuilder] = {
    FolderStrategy.TAGS.value: build_tag_tree,
    FolderStrategy.TAGS_HIERARCHICAL.value: build_tag_hierarchy_tree,
    "TagsHierarchical": build_tag_hierarchy_tree,
    FolderStrategy.PATHS.value: build_path_tree,
}
"""Accepted ``folder_strategy`` spellings and the builder each one selects."""


def resolve_builder(folder_strategy: Union[str, FolderStrategy]) -> TreeBuilder:
    """Return the builder registered for *folder_strategy*.

    Raises:
        ConfigError: If the strategy is not one of :data:`STRATEGY_BUILDERS`.
    """
    key = (
        folder_strategy.value
        if isinstance(folder_strategy, FolderStrategy)
        else folder_strategy
    )
    try:
        return STRATEGY_BUILDERS[key]
    except (KeyError, TypeError):
        expected = ", ".join(s.value for s in FolderStrategy)
        raise ConfigError(
            f"Invalid folder strategy {folder_strategy!r} (expected one of: {expected})"
        ) from None


def generate_skeleton_tree(
    document: Union[APIDocument, Mapping[str, Any]],
    options: Optional[SkeletonOptions] = None,
) -> SkeletonTree:
    """Build the folder/request skeleton tree for *document*.

    Args:
        document: An :class:`~skeletree.models.APIDocument`, or a raw
            OpenAPI mapping which is run through
            :func:`~skeletree.parser.extractor.extract_document` first.
        options: Strategy and filtering options. Defaults to
            :class:`~skeletree.models.SkeletonOptions` defaults (paths
            strategy, no webhooks, deprecated operations kept).

    Returns:
        A new :class:`~skeletree.graph.SkeletonTree` owned by the caller.

    Raises:
        ConfigError: If ``options.folder_strategy`` is unknown. Raised
            before the document is looked at.

    Example::

        tree = generate_skeleton_tree(
            raw_document, SkeletonOptions(folder_strategy="tags", include_webhooks=True)
        )
    """
    options = options or SkeletonOptions()
    builder = resolve_builder(options.folder_strategy)

    if not isinstance(document, APIDocument):
        document = extract_document(document)

    logger.debug(
        "Building skeleton tree: strategy=%s webhooks=%s deprecated=%s",
        options.folder_strategy,
        options.include_webhooks,
        options.include_deprecated,
    )
    tree = builder(document, options.include_deprecated)

    if options.include_webhooks:
        tree = append_webhooks(document, tree, options.include_deprecated)

    logger.debug("Skeleton tree has %d node(s)", len(tree))
    return tree
