"""Shared schemas for docsidebar."""

from docsidebar.schemas.navigation import Pagination
from docsidebar.schemas.nodes import (
    CategoryNode,
    DocNode,
    NodePath,
    SidebarItem,
    SidebarTree,
    ValidatedTree,
)
from docsidebar.schemas.violations import Violation, ViolationKind

__all__ = [
    "CategoryNode",
    "DocNode",
    "NodePath",
    "Pagination",
    "SidebarItem",
    "SidebarTree",
    "ValidatedTree",
    "Violation",
    "ViolationKind",
]
