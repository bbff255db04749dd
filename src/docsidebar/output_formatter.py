"""Format sidebar trees and violation reports as plain text."""

from __future__ import annotations

from typing import Iterable

from docsidebar.exceptions import ValidationError, format_path
from docsidebar.schemas import CategoryNode, DocNode, SidebarItem, SidebarTree, ValidatedTree


def format_sidebar_tree(tree: SidebarTree | ValidatedTree) -> str:
    """Render every group as an indented outline of labels."""
    if isinstance(tree, ValidatedTree):
        tree = tree.tree
    blocks: list[str] = []
    for group, items in tree.groups.items():
        lines = [f"Sidebar: {group}"]
        outline = _create_outline(items, indent=1)
        if outline:
            lines.append(outline)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def format_violations(error: ValidationError) -> str:
    """One line per violation: kind, path, message."""
    return "\n".join(
        f"{violation.kind.value} {format_path(violation.path)}: {violation.message}"
        for violation in error.violations
    )


def count_docs(items: Iterable[SidebarItem]) -> int:
    """Count doc nodes in the tree."""
    total = 0
    for node in items:
        if isinstance(node, DocNode):
            total += 1
        else:
            total += count_docs(node.items)
    return total


def count_categories(items: Iterable[SidebarItem]) -> int:
    """Count category nodes in the tree."""
    total = 0
    for node in items:
        if isinstance(node, CategoryNode):
            total += 1 + count_categories(node.items)
    return total


def _create_outline(items: Iterable[SidebarItem], indent: int = 0) -> str:
    lines: list[str] = []
    for node in items:
        prefix = " " * (indent * 4)
        if isinstance(node, DocNode):
            lines.append(f"{prefix}{node.label} ({node.id})")
        else:
            lines.append(f"{prefix}{node.label}/")
            if node.items:
                lines.append(_create_outline(node.items, indent + 1))
    return "\n".join(lines)
