"""Path strategy: nest requests in folders mirroring URL path segments.

Every path is split into segments and each cumulative prefix becomes a
folder, so ``/pet`` and ``/pet/{petId}`` share the ``pet`` folder::

    root:collection
    +-- path:folder:pet
        +-- path:request:pet:get
        +-- path:folder:pet/{petId}
            +-- path:request:pet/{petId}:get

A one-segment path gets its folder only when at least one of its methods
survives filtering. For longer paths the intermediate folders are always
created, while the final folder is created together with its first request.
"""

from __future__ import annotations

import logging

from skeletree.generator.operations import select_operations
from skeletree.graph import ROOT_ID, SkeletonTree
from skeletree.models import APIDocument, FolderMeta, Node, NodeType, RequestMeta

logger = logging.getLogger(__name__)


def build_path_tree(document: APIDocument, include_deprecated: bool) -> SkeletonTree:
    """Build a tree whose folders follow the URL path segments of *document*.

    Args:
        document: The extracted API document.
        include_deprecated: Keep operations marked ``deprecated``.

    Returns:
        A fresh :class:`~skeletree.graph.SkeletonTree`. An empty ``paths``
        map yields a tree holding only the root.
    """
    tree = SkeletonTree()

    for path, methods in document.paths.items():
        segments = split_path(path)
        if not segments:
            logger.debug("Path %r has no segments, skipping", path)
            continue

        operations = select_operations(path, methods, include_deprecated)

        if len(segments) == 1:
            identifier = segments[0]
            for method, _ in operations:
                tree.ensure_child(
                    ROOT_ID, folder_id(identifier), _folder(segments[0], identifier)
                )
                _attach_request(tree, path, method, identifier)
            continue

        for index, segment in enumerate(segments):
            parent = ROOT_ID if index == 0 else folder_id("/".join(segments[:index]))
            identifier = "/".join(segments[: index + 1])

            if index + 1 < len(segments):
                tree.ensure_child(parent, folder_id(identifier), _folder(segment, identifier))
                continue

            for method, _ in operations:
                tree.ensure_child(parent, folder_id(identifier), _folder(segment, identifier))
                _attach_request(tree, path, method, identifier)

    return tree


def split_path(path: str) -> list[str]:
    """Split *path* into non-empty segments; the root path ``/`` is its own segment.

    ``"/pet/{petId}"`` -> ``["pet", "{petId}"]``
    ``"/"``            -> ``["/"]``
    """
    if path == "/":
        return [path]
    return [segment for segment in path.split("/") if segment]


def folder_id(path_identifier: str) -> str:
    return f"path:folder:{path_identifier}"


def request_id(path_identifier: str, method: str) -> str:
    return f"path:request:{path_identifier}:{method}"


def _folder(segment: str, path_identifier: str) -> Node:
    return Node(
        type=NodeType.FOLDER,
        meta=FolderMeta(name=segment, path=segment, path_identifier=path_identifier),
    )


def _attach_request(tree: SkeletonTree, path: str, method: str, identifier: str) -> None:
    node_id = request_id(identifier, method)
    tree.set_node(
        node_id,
        Node(
            type=NodeType.REQUEST,
            meta=RequestMeta(path=path, method=method, path_identifier=identifier),
        ),
    )
    tree.set_edge(folder_id(identifier), node_id)
