"""Cross-tree validation for parsed sidebar trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Protocol, runtime_checkable

from docsidebar.exceptions import ValidationError, format_path
from docsidebar.schemas import (
    CategoryNode,
    DocNode,
    NodePath,
    SidebarItem,
    SidebarTree,
    ValidatedTree,
    Violation,
    ViolationKind,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class DocRegistry(Protocol):
    """Lookup of document ids that have content behind them."""

    def exists(self, doc_id: str) -> bool: ...


@dataclass
class _ValidationContext:
    """Accumulator threaded through one validation walk."""

    registry: DocRegistry | None = None
    seen: dict[str, NodePath] = field(default_factory=dict)
    violations: list[Violation] = field(default_factory=list)

    def record(self, violation: Violation) -> None:
        logger.debug(
            "Sidebar violation",
            extra={"kind": violation.kind.value, "path": format_path(violation.path)},
        )
        self.violations.append(violation)


def validate(tree: SidebarTree, registry: DocRegistry | None = None) -> ValidatedTree:
    """Check a parsed tree against every cross-tree invariant.

    The walk never stops at the first problem: all violations are collected
    and reported together.

    Args:
        tree: Parsed sidebar tree.
        registry: Optional doc registry; when given, every doc id must exist in it.

    Returns:
        The tree wrapped as a ValidatedTree.

    Raises:
        ValidationError: If any violation was found.
    """
    context = _ValidationContext(registry=registry)
    for group, items in tree.groups.items():
        _walk(items, (group,), context)

    if context.violations:
        raise ValidationError(context.violations)

    logger.info(
        "Validated sidebar tree",
        extra={"groups": list(tree.groups), "docs": len(context.seen)},
    )
    return ValidatedTree.issue(tree)


def _walk(items: Iterable[SidebarItem], path: NodePath, context: _ValidationContext) -> None:
    for index, node in enumerate(items):
        node_path = path + (index,)
        if isinstance(node, DocNode):
            _check_doc(node, node_path, context)
        elif isinstance(node, CategoryNode):
            if not node.items:
                context.record(
                    Violation(
                        kind=ViolationKind.EMPTY_CATEGORY,
                        path=node_path,
                        label=node.label,
                        message=f"category {node.label!r} has no items",
                    )
                )
            _walk(node.items, node_path, context)


def _check_doc(node: DocNode, path: NodePath, context: _ValidationContext) -> None:
    first_path = context.seen.get(node.id)
    if first_path is not None:
        context.record(
            Violation(
                kind=ViolationKind.DUPLICATE_ID,
                path=path,
                node_id=node.id,
                label=node.label,
                message=f"doc id {node.id!r} already used at {format_path(first_path)}",
                first_path=first_path,
            )
        )
    else:
        context.seen[node.id] = path

    if context.registry is not None and not context.registry.exists(node.id):
        context.record(
            Violation(
                kind=ViolationKind.UNKNOWN_DOC_REFERENCE,
                path=path,
                node_id=node.id,
                label=node.label,
                message=f"doc id {node.id!r} has no matching document",
            )
        )
