"""Extract the tree-relevant parts of a raw OpenAPI mapping.

:func:`extract_document` turns the loaded JSON/YAML mapping into an
:class:`~skeletree.models.APIDocument`. It is deliberately lenient: it does
not validate the document, does not resolve ``$ref`` pointers, and never
raises on missing or oddly-typed fields. The rules are:

* ``paths``, ``tags`` and ``webhooks`` default to empty when absent or not
  of the expected container type.
* Inside a path item, only entries whose value is a mapping are treated as
  operations. ``parameters``, ``summary`` and friends are skipped. Method
  keys are kept verbatim so the builders can filter them.
* ``deprecated`` is truthiness-coerced; ``tags`` that is not a list counts
  as no tags, and non-string tag entries are dropped.
* Tag declarations without a string ``name`` are dropped.

Document order is preserved throughout, since it drives node creation order.
"""

from __future__ import annotations

from typing import Any, Mapping

from skeletree.models import APIDocument, OperationInfo, TagInfo


def extract_document(raw: Mapping[str, Any]) -> APIDocument:
    """Build an :class:`~skeletree.models.APIDocument` from a raw mapping.

    Example::

        raw = load_document("petstore.yaml")
        document = extract_document(raw)
        print(list(document.paths))
    """
    return APIDocument(
        paths=_extract_path_items(raw.get("paths")),
        tags=_extract_tags(raw.get("tags")),
        webhooks=_extract_path_items(raw.get("webhooks")),
    )


def _extract_path_items(section: Any) -> dict[str, dict[str, OperationInfo]]:
    if not isinstance(section, Mapping):
        return {}

    items: dict[str, dict[str, OperationInfo]] = {}
    for path, path_item in section.items():
        methods: dict[str, OperationInfo] = {}
        if isinstance(path_item, Mapping):
            for method, operation in path_item.items():
                if isinstance(operation, Mapping):
                    methods[str(method)] = extract_operation(operation)
        items[str(path)] = methods
    return items


def extract_operation(operation: Mapping[str, Any]) -> OperationInfo:
    """Read the fields the builders care about from one raw operation."""
    tags = operation.get("tags")
    operation_id = operation.get("operationId")
    summary = operation.get("summary")
    return OperationInfo(
        deprecated=bool(operation.get("deprecated", False)),
        tags=[tag for tag in tags if isinstance(tag, str)] if isinstance(tags, list) else [],
        operation_id=operation_id if isinstance(operation_id, str) else None,
        summary=summary if isinstance(summary, str) else None,
    )


def _extract_tags(section: Any) -> list[TagInfo]:
    if not isinstance(section, list):
        return []

    tags: list[TagInfo] = []
    for entry in section:
        if not isinstance(entry, Mapping) or not isinstance(entry.get("name"), str):
            continue
        description = entry.get("description")
        tags.append(
            TagInfo(
                name=entry["name"],
                description=description if isinstance(description, str) else None,
            )
        )
    return tags
