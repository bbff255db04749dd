"""Custom exceptions for docsidebar."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docsidebar.schemas import NodePath, Violation


def format_path(path: NodePath) -> str:
    """Render a node path as ``group[i][j]``."""
    if not path:
        return "<root>"
    group, *indices = path
    return str(group) + "".join(f"[{index}]" for index in indices)


class DocSidebarError(Exception):
    """Base exception for docsidebar operations."""


class SchemaError(DocSidebarError):
    """A raw node does not match the doc/category shape."""

    def __init__(self, path: NodePath, reason: str) -> None:
        self.path = tuple(path)
        self.reason = reason
        super().__init__(f"{format_path(self.path)}: {reason}")


class ValidationError(DocSidebarError):
    """The parsed tree breaks one or more cross-tree invariants."""

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        lines = [f"Sidebar validation failed with {len(self.violations)} violation(s):"]
        lines.extend(
            f"  {violation.kind.value} at {format_path(violation.path)}: {violation.message}"
            for violation in self.violations
        )
        super().__init__("\n".join(lines))


class NotFoundError(DocSidebarError, LookupError):
    """A doc id or group name is not present in the tree."""


class SidebarLoadError(DocSidebarError):
    """The sidebar configuration file could not be read or decoded."""
