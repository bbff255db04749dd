"""Tests for sidebar config parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from docsidebar.exceptions import SchemaError
from docsidebar.schemas import CategoryNode, DocNode
from docsidebar.tree_model import default_label, parse


class TestParse:
    """Tests for parse function."""

    def test_parses_nested_structure(self, streams_sidebar) -> None:
        """Docs and categories become typed nodes in written order."""
        tree = parse(streams_sidebar)

        items = tree.groups["docs"]
        assert [type(node) for node in items] == [DocNode, CategoryNode, CategoryNode, DocNode]
        assert items[1].label == "Getting Started"
        assert [doc.id for doc in items[1].items] == [
            "getting_started/overview",
            "getting_started/rust_getting_started",
        ]

    def test_string_item_is_doc_shorthand(self, streams_sidebar) -> None:
        """Bare strings parse as docs with a derived label."""
        tree = parse(streams_sidebar)

        channels = tree.groups["docs"][2].items[0]
        assert channels.items[0] == DocNode(
            id="key_concepts/channels_protocol/overview", label="Overview"
        )

    def test_missing_label_uses_default(self) -> None:
        tree = parse({"docs": [{"type": "doc", "id": "welcome"}]})
        assert tree.groups["docs"][0].label == "Welcome"

    def test_explicit_label_is_kept(self) -> None:
        tree = parse({"docs": [{"type": "doc", "id": "how_tos/c_how_tos", "label": "C Binding"}]})
        assert tree.groups["docs"][0].label == "C Binding"

    def test_extra_fields_are_ignored(self) -> None:
        """Unknown keys do not cause errors."""
        tree = parse(
            {
                "docs": [
                    {"type": "doc", "id": "a", "customProps": {"x": 1}},
                    {"type": "category", "label": "B", "collapsed": True, "items": ["c"]},
                ]
            }
        )
        assert tree.groups["docs"][0] == DocNode(id="a", label="A")
        assert tree.groups["docs"][1].items == (DocNode(id="c", label="C"),)

    def test_empty_category_items_parse(self) -> None:
        """Empty categories are left for the validator to reject."""
        tree = parse({"docs": [{"type": "category", "label": "Empty", "items": []}]})
        assert tree.groups["docs"][0].items == ()

    def test_multiple_groups_keep_order(self) -> None:
        tree = parse({"docs": ["a"], "api": ["b"]})
        assert list(tree.groups) == ["docs", "api"]

    def test_groups_are_read_only(self) -> None:
        tree = parse({"docs": ["a"]})

        with pytest.raises(TypeError):
            tree.groups["api"] = ()
        with pytest.raises(TypeError):
            del tree.groups["docs"]

    def test_later_raw_changes_do_not_leak_in(self) -> None:
        raw = {"docs": ["a"]}
        tree = parse(raw)

        raw["docs"].append("b")
        raw["api"] = ["c"]

        assert list(tree.groups) == ["docs"]
        assert [doc.id for doc in tree.groups["docs"]] == ["a"]

    def test_parsed_nodes_are_frozen(self) -> None:
        tree = parse({"docs": ["a"]})
        with pytest.raises(PydanticValidationError, match="frozen"):
            tree.groups["docs"][0].label = "changed"


class TestParseErrors:
    """Tests for SchemaError reporting."""

    def test_rejects_non_mapping_root(self) -> None:
        with pytest.raises(SchemaError, match="must be a mapping") as exc_info:
            parse([{"type": "doc", "id": "a"}])
        assert exc_info.value.path == ()

    def test_rejects_non_list_group(self) -> None:
        with pytest.raises(SchemaError, match="items must be a list") as exc_info:
            parse({"docs": "welcome"})
        assert exc_info.value.path == ("docs",)

    def test_missing_type(self) -> None:
        with pytest.raises(SchemaError, match="missing the 'type' field") as exc_info:
            parse({"docs": ["a", {"id": "b"}]})
        assert exc_info.value.path == ("docs", 1)

    def test_unknown_type(self) -> None:
        with pytest.raises(SchemaError, match="unknown node type 'link'"):
            parse({"docs": [{"type": "link", "href": "https://example.com"}]})

    def test_doc_missing_id(self) -> None:
        with pytest.raises(SchemaError, match="missing 'id'") as exc_info:
            parse({"docs": [{"type": "category", "label": "A", "items": [{"type": "doc"}]}]})
        assert exc_info.value.path == ("docs", 0, 0)
        assert exc_info.value.reason == "doc node is missing 'id'"

    def test_doc_id_must_be_string(self) -> None:
        with pytest.raises(SchemaError, match="non-empty string"):
            parse({"docs": [{"type": "doc", "id": 42}]})

    def test_category_missing_label(self) -> None:
        with pytest.raises(SchemaError, match="missing 'label'"):
            parse({"docs": [{"type": "category", "items": ["a"]}]})

    def test_category_missing_items(self) -> None:
        with pytest.raises(SchemaError, match="missing 'items'") as exc_info:
            parse({"docs": ["a", "b", {"type": "category", "label": "Ref"}]})
        assert exc_info.value.path == ("docs", 2)

    def test_rejects_non_node_values(self) -> None:
        with pytest.raises(SchemaError, match="got int"):
            parse({"docs": [3]})

    def test_error_message_includes_path(self) -> None:
        with pytest.raises(SchemaError, match=r"^docs\[0\]\[1\]: "):
            parse({"docs": [{"type": "category", "label": "A", "items": ["x", {}]}]})

    def test_doc_label_must_be_string(self) -> None:
        with pytest.raises(SchemaError, match="doc label must be a string, got int") as exc_info:
            parse({"docs": ["a", {"type": "doc", "id": "b", "label": 7}]})
        assert exc_info.value.path == ("docs", 1)

    def test_category_label_must_be_string(self) -> None:
        with pytest.raises(SchemaError, match="category label must be a string, got list"):
            parse({"docs": [{"type": "category", "label": ["Guides"], "items": ["a"]}]})

    def test_category_items_must_be_list(self) -> None:
        """A category whose items is a single string is not shorthand for one doc."""
        with pytest.raises(SchemaError, match="items must be a list of nodes, got str") as exc_info:
            parse({"docs": ["a", {"type": "category", "label": "Guides", "items": "setup"}]})
        assert exc_info.value.path == ("docs", 1)

    def test_rejects_cyclic_category(self) -> None:
        """A category that contains itself is not a tree."""
        category: dict = {"type": "category", "label": "Loop", "items": []}
        category["items"].append(category)

        with pytest.raises(SchemaError, match="own ancestor") as exc_info:
            parse({"docs": [category]})
        assert exc_info.value.path == ("docs", 0, 0)


@pytest.mark.parametrize(
    ("doc_id", "label"),
    [
        ("welcome", "Welcome"),
        ("getting_started/rust_getting_started", "Rust Getting Started"),
        ("reference/c-api-reference", "C Api Reference"),
        ("key_concepts/channels_protocol/overview", "Overview"),
    ],
)
def test_default_label(doc_id: str, label: str) -> None:
    assert default_label(doc_id) == label
