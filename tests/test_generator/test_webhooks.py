"""Tests for skeletree.generator.webhooks.

Covers:
- No webhook folder when the webhook map is empty
- Folder metadata and request ids
- Method keys are not filtered, deprecated operations are
- Appending to a tree built by another strategy keeps its nodes
"""

from __future__ import annotations

from skeletree.generator.paths import build_path_tree
from skeletree.generator.webhooks import (
    WEBHOOK_FOLDER_ID,
    WEBHOOK_FOLDER_NAME,
    append_webhooks,
    webhook_request_id,
)
from skeletree.graph import ROOT_ID, SkeletonTree
from skeletree.models import APIDocument, NodeType
from skeletree.parser.extractor import extract_document


class TestAppendWebhooks:
    def test_returns_same_tree(self, petstore_document: APIDocument) -> None:
        tree = SkeletonTree()
        assert append_webhooks(petstore_document, tree, True) is tree

    def test_no_webhooks_no_folder(self) -> None:
        tree = append_webhooks(APIDocument(), SkeletonTree(), True)
        assert tree.nodes() == [ROOT_ID]

    def test_folder_and_requests(self, petstore_document: APIDocument) -> None:
        tree = append_webhooks(petstore_document, SkeletonTree(), True)
        assert tree.children(ROOT_ID) == [WEBHOOK_FOLDER_ID]
        assert tree.children(WEBHOOK_FOLDER_ID) == [
            "path~webhook:newPet:post",
            "path~webhook:oldPet:post",
        ]

        folder = tree.node(WEBHOOK_FOLDER_ID)
        assert folder.type == NodeType.WEBHOOK_FOLDER
        assert folder.meta.name == WEBHOOK_FOLDER_NAME == "webhook~folder"
        assert folder.meta.description == ""

        request = tree.node("path~webhook:newPet:post")
        assert request.type == NodeType.WEBHOOK_REQUEST
        assert request.meta.path == "newPet"
        assert request.meta.method == "post"

    def test_deprecated_filtered(self, petstore_document: APIDocument) -> None:
        tree = append_webhooks(petstore_document, SkeletonTree(), False)
        assert tree.children(WEBHOOK_FOLDER_ID) == ["path~webhook:newPet:post"]

    def test_folder_kept_when_everything_filtered(self) -> None:
        document = extract_document(
            {"webhooks": {"gone": {"post": {"deprecated": True}}}}
        )
        tree = append_webhooks(document, SkeletonTree(), False)
        assert tree.children(ROOT_ID) == [WEBHOOK_FOLDER_ID]
        assert tree.children(WEBHOOK_FOLDER_ID) == []

    def test_method_keys_not_filtered(self) -> None:
        document = extract_document({"webhooks": {"evt": {"subscribe": {}}}})
        tree = append_webhooks(document, SkeletonTree(), True)
        assert webhook_request_id("evt", "subscribe") in tree

    def test_appends_after_existing_nodes(self, petstore_document: APIDocument) -> None:
        tree = build_path_tree(petstore_document, include_deprecated=True)
        before = tree.nodes()
        append_webhooks(petstore_document, tree, True)
        assert tree.nodes()[: len(before)] == before
        assert tree.children(ROOT_ID)[-1] == WEBHOOK_FOLDER_ID
        assert len(tree) == len(before) + 3
        assert tree.is_tree()
