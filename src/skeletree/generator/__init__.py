"""Skeleton tree generator -- organise an API document into folders and requests.

This sub-package is the core of skeletree: it takes an
:class:`~skeletree.models.APIDocument` and builds a
:class:`~skeletree.graph.SkeletonTree` that a downstream emitter walks to
produce a request collection.

Typical usage::

    from skeletree.generator import generate_skeleton_tree
    from skeletree.models import SkeletonOptions

    tree = generate_skeleton_tree(raw_document, SkeletonOptions(folder_strategy="tags"))

Sub-modules:

* :mod:`~skeletree.generator.skeleton` -- Strategy dispatcher.
* :mod:`~skeletree.generator.paths` -- Folders mirroring URL path segments.
* :mod:`~skeletree.generator.tags` -- One folder per tag.
* :mod:`~skeletree.generator.tag_hierarchy` -- Nested folders from reversed
  tag lists.
* :mod:`~skeletree.generator.webhooks` -- Webhook subtree appender.
* :mod:`~skeletree.generator.operations` -- Method and deprecation filtering.
"""

from skeletree.generator.skeleton import generate_skeleton_tree, resolve_builder

__all__ = ["generate_skeleton_tree", "resolve_builder"]
