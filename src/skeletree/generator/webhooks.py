"""Webhook appender: a separate subtree for the document's webhooks.

Runs after any of the folder strategies. All webhook requests live under a
single ``webhook-folder`` node attached to the root; nothing built by the
main strategy is moved under it. Webhook method keys are not filtered
against the HTTP method list, only deprecated operations can be dropped.
"""

from __future__ import annotations

import logging

from skeletree.generator.operations import select_operations
from skeletree.graph import ROOT_ID, SkeletonTree
from skeletree.models import APIDocument, FolderMeta, Node, NodeType, RequestMeta

logger = logging.getLogger(__name__)

WEBHOOK_PREFIX = "path~webhook"
WEBHOOK_FOLDER_ID = f"{WEBHOOK_PREFIX}:folder"
WEBHOOK_FOLDER_NAME = "webhook~folder"


def append_webhooks(
    document: APIDocument, tree: SkeletonTree, include_deprecated: bool
) -> SkeletonTree:
    """Add the webhook subtree of *document* to *tree* and return *tree*.

    The webhook folder is created whenever the webhook map is non-empty,
    even if every webhook operation ends up filtered out.
    """
    if not document.webhooks:
        return tree

    tree.ensure_child(
        ROOT_ID,
        WEBHOOK_FOLDER_ID,
        Node(
            type=NodeType.WEBHOOK_FOLDER,
            meta=FolderMeta(name=WEBHOOK_FOLDER_NAME, path=WEBHOOK_FOLDER_NAME, description=""),
        ),
    )

    count = 0
    for path, methods in document.webhooks.items():
        for method, _ in select_operations(
            path, methods, include_deprecated, allowed_methods=None
        ):
            node_id = webhook_request_id(path, method)
            tree.set_node(
                node_id,
                Node(
                    type=NodeType.WEBHOOK_REQUEST,
                    meta=RequestMeta(path=path, method=method),
                ),
            )
            tree.set_edge(WEBHOOK_FOLDER_ID, node_id)
            count += 1

    logger.debug("Appended %d webhook request(s)", count)
    return tree


def webhook_request_id(path: str, method: str) -> str:
    return f"{WEBHOOK_PREFIX}:{path}:{method}"
