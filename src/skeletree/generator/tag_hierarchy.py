"""Tag hierarchy strategy: an operation's tag list is a folder path.

The tag list is read back to front. For an operation tagged
``["a", "b", "c"]`` the last tag is the outermost folder and the first tag
the innermost one, nearest the request::

    root:collection
    +-- path:c
        +-- path:c/b
            +-- path:c/b/a
                +-- path:c/b/a:/x:get      (tagPath = ["a", "b", "c"])

Operations sharing a leading run of (reversed) tags share those folders.
Only tags that some operation uses become folders.
"""

from __future__ import annotations

from typing import Optional

from skeletree.generator.operations import iter_operations
from skeletree.generator.tags import untagged_request_id
from skeletree.graph import ROOT_ID, SkeletonTree
from skeletree.models import APIDocument, FolderMeta, Node, NodeType, RequestMeta


def build_tag_hierarchy_tree(
    document: APIDocument, include_deprecated: bool
) -> SkeletonTree:
    """Build a tree whose folder nesting follows each operation's reversed tags.

    Args:
        document: The extracted API document.
        include_deprecated: Keep operations marked ``deprecated``.

    Returns:
        A fresh :class:`~skeletree.graph.SkeletonTree`.
    """
    tree = SkeletonTree()
    descriptions = document.tag_descriptions()

    for path, method, operation in iter_operations(document.paths, include_deprecated):
        if not operation.tags:
            node_id = untagged_request_id(path, method)
            tree.set_node(
                node_id,
                Node(type=NodeType.REQUEST, meta=RequestMeta(path=path, method=method)),
            )
            tree.set_edge(ROOT_ID, node_id)
            continue

        current_path = _ensure_tag_folders(tree, list(reversed(operation.tags)), descriptions)

        node_id = f"{hierarchy_folder_id(current_path)}:{path}:{method}"
        tree.set_node(
            node_id,
            Node(
                type=NodeType.REQUEST,
                meta=RequestMeta(path=path, method=method, tag_path=list(operation.tags)),
            ),
        )
        tree.set_edge(hierarchy_folder_id(current_path), node_id)

    return tree


def hierarchy_folder_id(tag_path: str) -> str:
    return f"path:{tag_path}"


def _ensure_tag_folders(
    tree: SkeletonTree,
    tags: list[str],
    descriptions: dict[str, Optional[str]],
) -> str:
    """Create the folder chain for *tags* (outermost first); return the deepest path."""
    current_path = ""
    for index, tag in enumerate(tags):
        parent = ROOT_ID if index == 0 else hierarchy_folder_id(current_path)
        current_path = f"{current_path}/{tag}" if current_path else tag
        tree.ensure_child(
            parent,
            hierarchy_folder_id(current_path),
            Node(
                type=NodeType.FOLDER,
                meta=FolderMeta(name=tag, path="", description=descriptions.get(tag) or ""),
            ),
        )
    return current_path
