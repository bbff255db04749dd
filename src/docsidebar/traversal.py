"""Navigation views derived from a validated sidebar tree."""

from __future__ import annotations

from typing import Iterator

from docsidebar.config import DOCSIDEBAR_DEFAULT_GROUP
from docsidebar.exceptions import NotFoundError
from docsidebar.schemas import (
    CategoryNode,
    DocNode,
    Pagination,
    SidebarItem,
    ValidatedTree,
)


def resolve_group(tree: ValidatedTree, group: str | None = None) -> str:
    """Pick the group a query runs against.

    An explicit name must exist. Otherwise the configured default group is
    used when present, falling back to the first declared group.
    """
    if group is not None:
        if group not in tree.groups:
            raise NotFoundError(f"Sidebar group {group!r} not found")
        return group
    if DOCSIDEBAR_DEFAULT_GROUP in tree.groups:
        return DOCSIDEBAR_DEFAULT_GROUP
    for name in tree.groups:
        return name
    raise NotFoundError("Sidebar tree has no groups")


def flatten(tree: ValidatedTree, group: str | None = None) -> tuple[DocNode, ...]:
    """List every doc of a group in pre-order, as written."""
    name = resolve_group(tree, group)
    return tuple(doc for doc, _ in _iter_docs(tree.groups[name], ()))


def breadcrumb(tree: ValidatedTree, doc_id: str) -> tuple[str, ...]:
    """Return ancestor category labels of a doc, outermost first.

    Raises:
        NotFoundError: If no group contains ``doc_id``.
    """
    _, labels = _locate(tree, doc_id)
    return labels


def get_pagination(tree: ValidatedTree, doc_id: str) -> Pagination:
    """Return the previous and next docs around ``doc_id`` within its group.

    Raises:
        NotFoundError: If no group contains ``doc_id``.
    """
    group, _ = _locate(tree, doc_id)
    docs = flatten(tree, group)
    index = next(i for i, doc in enumerate(docs) if doc.id == doc_id)
    return Pagination(
        previous=docs[index - 1] if index > 0 else None,
        next=docs[index + 1] if index + 1 < len(docs) else None,
    )


def _locate(tree: ValidatedTree, doc_id: str) -> tuple[str, tuple[str, ...]]:
    for group, items in tree.groups.items():
        for doc, labels in _iter_docs(items, ()):
            if doc.id == doc_id:
                return group, labels
    raise NotFoundError(f"Doc {doc_id!r} not found in sidebar")


def _iter_docs(
    items: tuple[SidebarItem, ...], labels: tuple[str, ...]
) -> Iterator[tuple[DocNode, tuple[str, ...]]]:
    for node in items:
        if isinstance(node, DocNode):
            yield node, labels
        elif isinstance(node, CategoryNode):
            yield from _iter_docs(node.items, labels + (node.label,))
