"""skeletree -- Organise an OpenAPI document into a folder/request skeleton tree.

The core takes an API document (paths, tags, webhooks) and builds an
in-memory tree of folders and requests using one of three folder strategies:
by URL path, by flat tag, or by ordered tag hierarchy. Webhooks can be
appended as a separate subtree. A downstream emitter walks the tree to
produce a request collection.

Typical usage::

    from skeletree import SkeletonOptions, generate_skeleton_tree

    tree = generate_skeleton_tree(raw_document, SkeletonOptions(folder_strategy="tags"))
    for depth, node_id, node in tree.walk():
        print("  " * depth + node_id)

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models shared across the package.
    graph: The append-only tree structure.
    generator: Folder strategies, webhook appender, dispatcher.
    parser: Document loading and extraction.
    config: XDG-aware option configuration.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting with Rich support.
"""

__version__ = "0.1.0"

from skeletree.generator import generate_skeleton_tree  # noqa: E402
from skeletree.graph import ROOT_ID, SkeletonTree  # noqa: E402
from skeletree.models import SkeletonOptions  # noqa: E402

__all__ = ["generate_skeleton_tree", "SkeletonTree", "SkeletonOptions", "ROOT_ID"]
