"""Canonical Pydantic models shared across all skeletree modules.

This is the single source of truth for data shapes in the project. The models
fall into three groups:

**Configuration models** -- serialised as JSON in the user's config directory
or a project-local ``skeletree.json``:
    :class:`FolderStrategy` and :class:`SkeletonOptions`.

**Document models** -- produced by the lenient extractor in
:mod:`skeletree.parser.extractor` and consumed by the tree builders:
    :class:`TagInfo`, :class:`OperationInfo`, and :class:`APIDocument`.

**Tree node models** -- the payload stored on every node of a
:class:`~skeletree.graph.SkeletonTree`:
    :class:`NodeType`, :class:`CollectionMeta`, :class:`FolderMeta`,
    :class:`RequestMeta`, and :class:`Node`.

Node metadata is a tagged variant: ``Node.type`` discriminates the role and
``Node.meta`` must be the metadata class registered for that role. Metadata
fields serialise with the camelCase names downstream emitters expect
(``pathIdentifier``, ``tagPath``).
"""

from __future__ import annotations

import enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# --- Configuration ---


class FolderStrategy(str, enum.Enum):
    """Folder organisation strategies understood by the dispatcher.

    ``TagsHierarchical`` is also accepted as a spelling of
    :attr:`TAGS_HIERARCHICAL` by
    :func:`~skeletree.generator.skeleton.generate_skeleton_tree`.
    """

    PATHS = "paths"
    TAGS = "tags"
    TAGS_HIERARCHICAL = "tagshierarchical"


class SkeletonOptions(BaseModel):
    """Options controlling how a skeleton tree is built.

    ``folder_strategy`` is kept as a plain string so that an unknown value
    reaches the dispatcher, which rejects it with a
    :class:`~skeletree.exceptions.ConfigError` before any tree exists.

    Example::

        SkeletonOptions(folder_strategy="tags", include_webhooks=True)
    """

    folder_strategy: str = Field(
        default=FolderStrategy.PATHS.value,
        description="Folder strategy: paths, tags, tagshierarchical",
    )
    include_webhooks: bool = Field(
        default=False, description="Append a webhook subtree after the main builder"
    )
    include_deprecated: bool = Field(
        default=True, description="Keep operations marked deprecated"
    )


# --- Document ---


class TagInfo(BaseModel):
    """A top-level tag declaration (``tags[*]`` in the document)."""

    name: str
    description: Optional[str] = None


class OperationInfo(BaseModel):
    """A single operation under a path or webhook.

    Only the fields the builders look at are modelled, plus a couple of
    display fields for the CLI. Everything else in the raw operation is
    ignored.
    """

    deprecated: bool = False
    tags: list[str] = Field(default_factory=list)
    operation_id: Optional[str] = None
    summary: Optional[str] = None


class APIDocument(BaseModel):
    """The subset of an OpenAPI document needed to build a skeleton tree.

    ``paths`` and ``webhooks`` map a path string to an ordered mapping of
    method key to :class:`OperationInfo`. Method keys are kept verbatim; the
    path builders decide which of them are real HTTP methods.
    """

    paths: dict[str, dict[str, OperationInfo]] = Field(default_factory=dict)
    tags: list[TagInfo] = Field(default_factory=list)
    webhooks: dict[str, dict[str, OperationInfo]] = Field(default_factory=dict)

    def tag_descriptions(self) -> dict[str, Optional[str]]:
        """Map each declared tag name to its description.

        A tag declared twice keeps its first position and its last
        description.
        """
        return {tag.name: tag.description for tag in self.tags}


# --- Tree nodes ---


class NodeType(str, enum.Enum):
    """Role of a node in the skeleton tree."""

    COLLECTION = "collection"
    FOLDER = "folder"
    REQUEST = "request"
    WEBHOOK_FOLDER = "webhook-folder"
    WEBHOOK_REQUEST = "webhook-request"


class CollectionMeta(BaseModel):
    """Metadata of the root collection node (intentionally empty)."""

    model_config = ConfigDict(extra="forbid")


class FolderMeta(BaseModel):
    """Metadata of ``folder`` and ``webhook-folder`` nodes."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    path: str = ""
    path_identifier: Optional[str] = Field(default=None, alias="pathIdentifier")
    description: Optional[str] = None


class RequestMeta(BaseModel):
    """Metadata of ``request`` and ``webhook-request`` nodes.

    ``tag`` is set by the flat-tag strategy, ``tag_path`` by the
    tag-hierarchy strategy, and ``path_identifier`` by the path strategy.
    """

    model_config = ConfigDict(populate_by_name=True)

    path: str
    method: str
    path_identifier: Optional[str] = Field(default=None, alias="pathIdentifier")
    tag: Optional[str] = None
    tag_path: Optional[list[str]] = Field(default=None, alias="tagPath")


NodeMeta = Union[CollectionMeta, FolderMeta, RequestMeta]

_META_FOR_TYPE: dict[NodeType, type[BaseModel]] = {
    NodeType.COLLECTION: CollectionMeta,
    NodeType.FOLDER: FolderMeta,
    NodeType.REQUEST: RequestMeta,
    NodeType.WEBHOOK_FOLDER: FolderMeta,
    NodeType.WEBHOOK_REQUEST: RequestMeta,
}


class Node(BaseModel):
    """Payload stored under a node id in a :class:`~skeletree.graph.SkeletonTree`.

    ``data`` is reserved for the downstream emitter and is never written by
    the tree builders.
    """

    type: NodeType
    meta: NodeMeta
    data: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_meta_matches_type(self) -> "Node":
        expected = _META_FOR_TYPE[self.type]
        if not isinstance(self.meta, expected):
            raise ValueError(
                f"{self.type.value} node requires {expected.__name__}, "
                f"got {type(self.meta).__name__}"
            )
        return self

    @property
    def name(self) -> Optional[str]:
        """Display name: the folder name, or ``METHOD path`` for requests."""
        if isinstance(self.meta, FolderMeta):
            return self.meta.name
        if isinstance(self.meta, RequestMeta):
            return f"{self.meta.method.upper()} {self.meta.path}"
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialise with camelCase metadata keys, dropping unset ``None`` fields."""
        return {
            "type": self.type.value,
            "meta": self.meta.model_dump(by_alias=True, exclude_none=True),
            "data": dict(self.data),
        }
