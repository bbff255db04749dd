"""docsidebar: ordered sidebar navigation trees for documentation sites."""

from docsidebar.exceptions import (
    DocSidebarError,
    NotFoundError,
    SchemaError,
    SidebarLoadError,
    ValidationError,
)
from docsidebar.loading import build_sidebars, load_sidebars
from docsidebar.output_formatter import format_sidebar_tree, format_violations
from docsidebar.registry import DirectoryDocRegistry, InMemoryDocRegistry
from docsidebar.schemas import (
    CategoryNode,
    DocNode,
    Pagination,
    SidebarTree,
    ValidatedTree,
    Violation,
    ViolationKind,
)
from docsidebar.traversal import breadcrumb, flatten, get_pagination
from docsidebar.tree_model import parse
from docsidebar.validator import DocRegistry, validate

__all__ = [
    "CategoryNode",
    "DirectoryDocRegistry",
    "DocNode",
    "DocRegistry",
    "DocSidebarError",
    "InMemoryDocRegistry",
    "NotFoundError",
    "Pagination",
    "SchemaError",
    "SidebarLoadError",
    "SidebarTree",
    "ValidatedTree",
    "ValidationError",
    "Violation",
    "ViolationKind",
    "breadcrumb",
    "build_sidebars",
    "flatten",
    "format_sidebar_tree",
    "format_violations",
    "get_pagination",
    "load_sidebars",
    "parse",
    "validate",
]
