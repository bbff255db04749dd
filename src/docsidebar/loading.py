"""Build validated sidebar trees from raw configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from docsidebar.exceptions import SidebarLoadError
from docsidebar.schemas import ValidatedTree
from docsidebar.tree_model import parse
from docsidebar.validator import DocRegistry, validate

logger = logging.getLogger(__name__)


def build_sidebars(raw: Mapping[str, Any], *, registry: DocRegistry | None = None) -> ValidatedTree:
    """Parse and validate a raw sidebar mapping.

    Raises:
        SchemaError: If a node is malformed.
        ValidationError: If the parsed tree breaks any invariant.
    """
    tree = parse(raw)
    return validate(tree, registry=registry)


def load_sidebars(path: Path, *, registry: DocRegistry | None = None) -> ValidatedTree:
    """Read a JSON sidebar file and build a validated tree from it.

    Args:
        path: JSON file holding ``{group: [node, ...]}``.
        registry: Optional doc registry passed through to validation.

    Returns:
        The validated tree.

    Raises:
        SidebarLoadError: If the file cannot be read or is not valid JSON.
        SchemaError: If a node is malformed.
        ValidationError: If the parsed tree breaks any invariant.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SidebarLoadError(f"Could not read sidebar file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SidebarLoadError(f"Sidebar file {path} is not valid JSON: {exc}") from exc

    logger.debug("Loaded sidebar config", extra={"path": str(path)})
    return build_sidebars(raw, registry=registry)
