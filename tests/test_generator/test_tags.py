"""Tests for skeletree.generator.tags (flat tag strategy).

Covers:
- Declared tags get folders up front, even when unused
- Operations with several tags are replicated, one request per tag
- Undeclared tags get a folder on first use
- Untagged operations hang off the root
"""

from __future__ import annotations

from skeletree.generator.tags import (
    build_tag_tree,
    tag_folder_id,
    tag_request_id,
    untagged_request_id,
)
from skeletree.graph import ROOT_ID
from skeletree.models import APIDocument, NodeType
from skeletree.parser.extractor import extract_document


class TestPetstoreTags:
    def test_node_count(self, petstore_document: APIDocument) -> None:
        assert len(build_tag_tree(petstore_document, include_deprecated=True)) == 14

    def test_root_children_order(self, petstore_document: APIDocument) -> None:
        tree = build_tag_tree(petstore_document, include_deprecated=True)
        assert tree.children(ROOT_ID) == [
            "path:pets",
            "path:store",
            "path:admin",
            "path:/:get",
            "path:orders",
            "path:/health:get",
        ]

    def test_declared_folder_metadata(self, petstore_document: APIDocument) -> None:
        tree = build_tag_tree(petstore_document, include_deprecated=True)
        pets = tree.node("path:pets")
        assert pets.type == NodeType.FOLDER
        assert pets.meta.name == "pets"
        assert pets.meta.path == ""
        assert pets.meta.description == "Everything about pets"
        assert tree.node("path:admin").meta.description is None

    def test_multi_tag_operation_is_replicated(self, petstore_document: APIDocument) -> None:
        tree = build_tag_tree(petstore_document, include_deprecated=True)
        in_pets = tree.node("path:pets:/pets:post")
        in_admin = tree.node("path:admin:/pets:post")
        assert in_pets.meta.tag == "pets"
        assert in_admin.meta.tag == "admin"
        assert in_pets.meta.path == in_admin.meta.path == "/pets"
        assert tree.parents("path:pets:/pets:post") == ["path:pets"]
        assert tree.parents("path:admin:/pets:post") == ["path:admin"]

    def test_pets_folder_contents(self, petstore_document: APIDocument) -> None:
        tree = build_tag_tree(petstore_document, include_deprecated=True)
        assert tree.children("path:pets") == [
            "path:pets:/pets:get",
            "path:pets:/pets:post",
            "path:pets:/pets/{petId}:get",
            "path:pets:/pets/{petId}:delete",
        ]

    def test_undeclared_tag_folder(self, petstore_document: APIDocument) -> None:
        tree = build_tag_tree(petstore_document, include_deprecated=True)
        orders = tree.node("path:orders")
        assert orders.meta.name == "orders"
        assert orders.meta.path == "/store/orders/{orderId}"
        assert orders.meta.description is None
        assert tree.children("path:orders") == ["path:orders:/store/orders/{orderId}:get"]

    def test_untagged_requests(self, petstore_document: APIDocument) -> None:
        tree = build_tag_tree(petstore_document, include_deprecated=True)
        request = tree.node("path:/health:get")
        assert request.meta.tag is None
        assert tree.parents("path:/health:get") == [ROOT_ID]

    def test_excluding_deprecated(self, petstore_document: APIDocument) -> None:
        tree = build_tag_tree(petstore_document, include_deprecated=False)
        assert "path:pets:/pets/{petId}:delete" not in tree
        assert len(tree) == 13


class TestTagEdgeCases:
    def test_unused_declared_tag_still_has_folder(self) -> None:
        document = extract_document({"tags": [{"name": "unused", "description": "d"}]})
        tree = build_tag_tree(document, include_deprecated=True)
        assert tree.children(ROOT_ID) == ["path:unused"]
        assert tree.children("path:unused") == []

    def test_undeclared_tag_folder_keeps_first_path(self) -> None:
        document = extract_document(
            {
                "paths": {
                    "/a": {"get": {"tags": ["x"]}},
                    "/b": {"get": {"tags": ["x"]}},
                }
            }
        )
        tree = build_tag_tree(document, include_deprecated=True)
        assert tree.node("path:x").meta.path == "/a"
        assert tree.children("path:x") == ["path:x:/a:get", "path:x:/b:get"]

    def test_ids(self) -> None:
        assert tag_folder_id("pets") == "path:pets"
        assert tag_request_id("pets", "/pets", "get") == "path:pets:/pets:get"
        assert untagged_request_id("/pets", "get") == "path:/pets:get"

    def test_empty_document(self) -> None:
        assert build_tag_tree(APIDocument(), include_deprecated=True).nodes() == [ROOT_ID]
