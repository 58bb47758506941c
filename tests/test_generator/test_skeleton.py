"""Tests for skeletree.generator.skeleton (strategy dispatcher).

Covers:
- Each accepted strategy spelling selects its builder
- Unknown strategies raise ConfigError before anything is built
- Webhooks appended only when include_webhooks is set
- Raw mappings are extracted before building
- Each call returns a fresh tree
"""

from __future__ import annotations

from typing import Any

import pytest

from skeletree.exceptions import ConfigError
from skeletree.generator.paths import build_path_tree
from skeletree.generator.skeleton import (
    STRATEGY_BUILDERS,
    generate_skeleton_tree,
    resolve_builder,
)
from skeletree.generator.tag_hierarchy import build_tag_hierarchy_tree
from skeletree.generator.tags import build_tag_tree
from skeletree.generator.webhooks import WEBHOOK_FOLDER_ID
from skeletree.graph import ROOT_ID
from skeletree.models import APIDocument, FolderStrategy, SkeletonOptions


class TestResolveBuilder:
    @pytest.mark.parametrize(
        "strategy, builder",
        [
            ("paths", build_path_tree),
            ("tags", build_tag_tree),
            ("tagshierarchical", build_tag_hierarchy_tree),
            ("TagsHierarchical", build_tag_hierarchy_tree),
            (FolderStrategy.TAGS, build_tag_tree),
        ],
    )
    def test_known(self, strategy: Any, builder: Any) -> None:
        assert resolve_builder(strategy) is builder

    @pytest.mark.parametrize("strategy", ["", "Paths", "TAGS", "bogus", None])
    def test_unknown(self, strategy: Any) -> None:
        with pytest.raises(ConfigError, match="Invalid folder strategy"):
            resolve_builder(strategy)

    def test_registered_spellings(self) -> None:
        assert set(STRATEGY_BUILDERS) == {"paths", "tags", "tagshierarchical", "TagsHierarchical"}


class TestGenerateSkeletonTree:
    def test_default_options_use_paths(self, petstore_document: APIDocument) -> None:
        tree = generate_skeleton_tree(petstore_document)
        assert len(tree) == 15
        assert WEBHOOK_FOLDER_ID not in tree

    @pytest.mark.parametrize(
        "strategy, expected",
        [("paths", 15), ("tags", 14), ("tagshierarchical", 13), ("TagsHierarchical", 13)],
    )
    def test_strategies(
        self, petstore_document: APIDocument, strategy: str, expected: int
    ) -> None:
        tree = generate_skeleton_tree(
            petstore_document, SkeletonOptions(folder_strategy=strategy)
        )
        assert len(tree) == expected

    def test_unknown_strategy_raises(self, petstore_document: APIDocument) -> None:
        with pytest.raises(ConfigError) as exc_info:
            generate_skeleton_tree(
                petstore_document, SkeletonOptions(folder_strategy="folders")
            )
        assert "'folders'" in str(exc_info.value)
        assert exc_info.value.exit_code == 1

    def test_unknown_strategy_checked_before_document(self) -> None:
        with pytest.raises(ConfigError):
            generate_skeleton_tree(
                {"paths": "not even a mapping"}, SkeletonOptions(folder_strategy="x")
            )

    @pytest.mark.parametrize("strategy", ["paths", "tags", "tagshierarchical"])
    def test_webhooks_appended(self, petstore_document: APIDocument, strategy: str) -> None:
        tree = generate_skeleton_tree(
            petstore_document,
            SkeletonOptions(folder_strategy=strategy, include_webhooks=True),
        )
        assert tree.children(ROOT_ID)[-1] == WEBHOOK_FOLDER_ID
        assert len(tree.children(WEBHOOK_FOLDER_ID)) == 2

    def test_webhooks_with_deprecated_excluded(self, petstore_document: APIDocument) -> None:
        tree = generate_skeleton_tree(
            petstore_document,
            SkeletonOptions(include_webhooks=True, include_deprecated=False),
        )
        assert len(tree) == 16
        assert tree.children(WEBHOOK_FOLDER_ID) == ["path~webhook:newPet:post"]

    def test_accepts_raw_mapping(self, petstore_raw: dict[str, Any]) -> None:
        tree = generate_skeleton_tree(petstore_raw, SkeletonOptions(folder_strategy="tags"))
        assert "path:admin:/pets:post" in tree

    def test_fresh_tree_each_call(self, petstore_document: APIDocument) -> None:
        first = generate_skeleton_tree(petstore_document)
        second = generate_skeleton_tree(petstore_document)
        assert first is not second
        assert first.to_dict() == second.to_dict()

    def test_empty_document(self) -> None:
        tree = generate_skeleton_tree({}, SkeletonOptions(include_webhooks=True))
        assert tree.nodes() == [ROOT_ID]
