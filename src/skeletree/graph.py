"""Append-only adjacency structure holding a skeleton tree.

A :class:`SkeletonTree` maps string node ids to :class:`~skeletree.models.Node`
payloads and keeps, per node, the ordered list of child ids and the list of
parent ids. Edges are directed parent -> child and mean "contains". There are
no deletion operations: builders only ever insert.

Node ids are deterministic strings derived from a node's role and position
(``path:folder:pet``, ``path:request:pet:get``, ...), so re-deriving the same
logical node yields the same id. :meth:`SkeletonTree.ensure_node` and
:meth:`SkeletonTree.ensure_child` are the insert-or-get operations that keep
that identity idempotent.
"""

from __future__ import annotations

from typing import Any, Iterator

from skeletree.models import CollectionMeta, Node, NodeType

ROOT_ID = "root:collection"
"""Id of the single root node of every tree."""


class SkeletonTree:
    """Directed graph of folders and requests rooted at :data:`ROOT_ID`.

    The root node is created by the constructor. Under the path and
    tag-hierarchy strategies the graph is a true tree; under the flat-tag
    strategy an operation with several tags is represented by several request
    nodes, each with a single parent.

    Example::

        tree = SkeletonTree()
        tree.ensure_child(ROOT_ID, "path:folder:pet", folder_node)
        for depth, node_id, node in tree.walk():
            print("  " * depth, node_id)
    """

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._children: dict[str, list[str]] = {}
        self._parents: dict[str, list[str]] = {}
        self.set_node(ROOT_ID, Node(type=NodeType.COLLECTION, meta=CollectionMeta()))

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #

    def set_node(self, node_id: str, node: Node) -> None:
        """Insert *node* under *node_id*, overwriting any existing payload.

        Edges of an overwritten node are kept.
        """
        self._nodes[node_id] = node
        self._children.setdefault(node_id, [])
        self._parents.setdefault(node_id, [])

    def ensure_node(self, node_id: str, node: Node) -> Node:
        """Insert *node* unless *node_id* already exists; return the stored node."""
        if node_id not in self._nodes:
            self.set_node(node_id, node)
        return self._nodes[node_id]

    def ensure_child(self, parent_id: str, node_id: str, node: Node) -> bool:
        """Insert *node* and link it under *parent_id* on first sight.

        When *node_id* already exists nothing changes: neither the payload
        nor its edges.

        Returns:
            ``True`` if the node was created by this call.
        """
        if node_id in self._nodes:
            return False
        self.set_node(node_id, node)
        self.set_edge(parent_id, node_id)
        return True

    def set_edge(self, from_id: str, to_id: str) -> None:
        """Add the edge *from_id* -> *to_id*. Existing edges are not duplicated.

        Raises:
            KeyError: If either endpoint has not been inserted.
        """
        for node_id in (from_id, to_id):
            if node_id not in self._nodes:
                raise KeyError(f"Unknown node: {node_id}")
        if to_id in self._children[from_id]:
            return
        self._children[from_id].append(to_id)
        self._parents[to_id].append(from_id)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def has_edge(self, from_id: str, to_id: str) -> bool:
        return to_id in self._children.get(from_id, ())

    def node(self, node_id: str) -> Node:
        """Return the payload stored under *node_id* (``KeyError`` if absent)."""
        return self._nodes[node_id]

    def children(self, node_id: str) -> list[str]:
        """Child ids of *node_id* in insertion order."""
        return list(self._children[node_id])

    def parents(self, node_id: str) -> list[str]:
        return list(self._parents[node_id])

    def nodes(self) -> list[str]:
        """All node ids in insertion order (the root first)."""
        return list(self._nodes)

    def edges(self) -> list[tuple[str, str]]:
        """All ``(parent, child)`` pairs, grouped by parent in insertion order."""
        return [
            (parent, child)
            for parent, children in self._children.items()
            for child in children
        ]

    @property
    def root(self) -> Node:
        return self._nodes[ROOT_ID]

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def is_tree(self) -> bool:
        """Return ``True`` if the root has no parent and every other node exactly one."""
        for node_id, parents in self._parents.items():
            expected = 0 if node_id == ROOT_ID else 1
            if len(parents) != expected:
                return False
        return True

    def walk(self) -> Iterator[tuple[int, str, Node]]:
        """Yield ``(depth, node_id, node)`` depth-first, pre-order, from the root.

        Children are visited in insertion order. A node reachable through
        several parents is yielded once per path; nodes not reachable from
        the root are not yielded.
        """
        stack: list[tuple[int, str]] = [(0, ROOT_ID)]
        while stack:
            depth, node_id = stack.pop()
            yield depth, node_id, self._nodes[node_id]
            for child in reversed(self._children[node_id]):
                stack.append((depth + 1, child))

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready ``{"nodes": [...], "edges": [[from, to], ...]}`` view."""
        return {
            "nodes": [
                {"id": node_id, **node.to_dict()}
                for node_id, node in self._nodes.items()
            ],
            "edges": [[parent, child] for parent, child in self.edges()],
        }
