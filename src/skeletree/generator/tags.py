"""Flat tag strategy: one folder per tag, requests replicated per tag.

Every declared tag gets a folder under the root, even when no operation
uses it. An operation tagged ``["a", "b"]`` on ``GET /x`` produces two
distinct request nodes, ``path:a:/x:get`` and ``path:b:/x:get``, one in each
tag folder. The result is therefore not a single-parent-per-operation tree:
the same operation appears once per tag. Untagged operations hang directly
off the root as ``path:<path>:<method>``.
"""

from __future__ import annotations

import logging

from skeletree.generator.operations import iter_operations
from skeletree.graph import ROOT_ID, SkeletonTree
from skeletree.models import APIDocument, FolderMeta, Node, NodeType, RequestMeta

logger = logging.getLogger(__name__)


def build_tag_tree(document: APIDocument, include_deprecated: bool) -> SkeletonTree:
    """Build a tree with one top-level folder per tag.

    Args:
        document: The extracted API document.
        include_deprecated: Keep operations marked ``deprecated``.

    Returns:
        A fresh :class:`~skeletree.graph.SkeletonTree`.
    """
    tree = SkeletonTree()
    descriptions = document.tag_descriptions()

    for tag, description in descriptions.items():
        tree.ensure_child(
            ROOT_ID,
            tag_folder_id(tag),
            Node(
                type=NodeType.FOLDER,
                meta=FolderMeta(name=tag, path="", description=description),
            ),
        )

    for path, method, operation in iter_operations(document.paths, include_deprecated):
        if not operation.tags:
            node_id = untagged_request_id(path, method)
            tree.set_node(
                node_id,
                Node(type=NodeType.REQUEST, meta=RequestMeta(path=path, method=method)),
            )
            tree.set_edge(ROOT_ID, node_id)
            continue

        for tag in operation.tags:
            node_id = tag_request_id(tag, path, method)
            tree.set_node(
                node_id,
                Node(
                    type=NodeType.REQUEST,
                    meta=RequestMeta(path=path, method=method, tag=tag),
                ),
            )
            # Undeclared tag: its folder is created on first use.
            if tree.ensure_child(
                ROOT_ID,
                tag_folder_id(tag),
                Node(
                    type=NodeType.FOLDER,
                    meta=FolderMeta(
                        name=tag, path=path, description=descriptions.get(tag)
                    ),
                ),
            ):
                logger.debug("Tag %r is not declared; created its folder from %s", tag, path)
            tree.set_edge(tag_folder_id(tag), node_id)

    return tree


def tag_folder_id(tag: str) -> str:
    return f"path:{tag}"


def tag_request_id(tag: str, path: str, method: str) -> str:
    return f"path:{tag}:{path}:{method}"


def untagged_request_id(path: str, method: str) -> str:
    return f"path:{path}:{method}"
