"""Parse raw sidebar configuration into typed nodes."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from docsidebar.exceptions import SchemaError
from docsidebar.schemas import CategoryNode, DocNode, NodePath, SidebarItem, SidebarTree

_LABEL_SEPARATOR_RE = re.compile(r"[_\-]+")


def default_label(doc_id: str) -> str:
    """Derive a display label from the last segment of a doc id.

    ``getting_started/rust_getting_started`` becomes ``Rust Getting Started``.
    """
    segment = doc_id.rstrip("/").rsplit("/", 1)[-1]
    words = _LABEL_SEPARATOR_RE.sub(" ", segment).split()
    return " ".join(word[:1].upper() + word[1:] for word in words) or doc_id


def parse(raw: Mapping[str, Any]) -> SidebarTree:
    """Convert a ``{group: [node, ...]}`` mapping into a SidebarTree.

    Args:
        raw: Group name to ordered node specs. A node spec is either a mapping
            with ``type`` of ``"doc"`` or ``"category"``, or a bare string
            standing for a doc id.

    Returns:
        The typed tree, with item order preserved.

    Raises:
        SchemaError: If any node does not match the doc/category shape.
    """
    if not isinstance(raw, Mapping):
        raise SchemaError((), f"sidebar config must be a mapping of groups, got {type(raw).__name__}")

    groups: dict[str, tuple[SidebarItem, ...]] = {}
    for group, items in raw.items():
        if not isinstance(group, str) or not group:
            raise SchemaError((), f"group names must be non-empty strings, got {group!r}")
        groups[group] = _parse_items(items, (group,), ancestors=())
    return SidebarTree(groups=groups)


def _parse_items(items: Any, path: NodePath, *, ancestors: tuple[int, ...]) -> tuple[SidebarItem, ...]:
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        raise SchemaError(path, f"items must be a list of nodes, got {type(items).__name__}")
    if id(items) in ancestors:
        raise SchemaError(path, "items list contains itself")

    inner = ancestors + (id(items),)
    return tuple(_parse_node(node, path + (index,), ancestors=inner) for index, node in enumerate(items))


def _parse_node(node: Any, path: NodePath, *, ancestors: tuple[int, ...]) -> SidebarItem:
    # Bare strings are shorthand for a doc with a derived label.
    if isinstance(node, str):
        return _build_doc({"id": node}, path)
    if not isinstance(node, Mapping):
        raise SchemaError(path, f"node must be a mapping or a doc id string, got {type(node).__name__}")
    if id(node) in ancestors:
        raise SchemaError(path, "node is its own ancestor")

    node_type = node.get("type")
    if node_type == "doc":
        return _build_doc(node, path)
    if node_type == "category":
        return _build_category(node, path, ancestors=ancestors + (id(node),))
    if node_type is None:
        raise SchemaError(path, "node is missing the 'type' field")
    raise SchemaError(path, f"unknown node type {node_type!r}, expected 'doc' or 'category'")


def _build_doc(node: Mapping[str, Any], path: NodePath) -> DocNode:
    doc_id = node.get("id")
    if doc_id is None:
        raise SchemaError(path, "doc node is missing 'id'")
    if not isinstance(doc_id, str) or not doc_id.strip():
        raise SchemaError(path, f"doc id must be a non-empty string, got {doc_id!r}")

    label = node.get("label")
    if label is None:
        label = default_label(doc_id)
    elif not isinstance(label, str):
        raise SchemaError(path, f"doc label must be a string, got {type(label).__name__}")
    return DocNode(id=doc_id, label=label)


def _build_category(node: Mapping[str, Any], path: NodePath, *, ancestors: tuple[int, ...]) -> CategoryNode:
    label = node.get("label")
    if label is None:
        raise SchemaError(path, "category node is missing 'label'")
    if not isinstance(label, str):
        raise SchemaError(path, f"category label must be a string, got {type(label).__name__}")
    if "items" not in node:
        raise SchemaError(path, f"category {label!r} is missing 'items'")

    items = _parse_items(node["items"], path, ancestors=ancestors)
    return CategoryNode(label=label, items=items)
