"""Validation violation models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from docsidebar.schemas.nodes import NodePath


class ViolationKind(str, Enum):
    """Cross-tree invariant that a node breaks."""

    DUPLICATE_ID = "DuplicateId"
    EMPTY_CATEGORY = "EmptyCategory"
    UNKNOWN_DOC_REFERENCE = "UnknownDocReference"


class Violation(BaseModel):
    """A single problem found while validating a sidebar tree.

    Attributes:
        kind: Which invariant the node breaks.
        path: Position of the offending node.
        node_id: Doc id, when the offending node is a doc.
        label: Label of the offending node.
        message: Human-readable description.
        first_path: For duplicate ids, where the id was first seen.
    """

    model_config = ConfigDict(frozen=True)

    kind: ViolationKind
    path: NodePath
    node_id: str | None = None
    label: str | None = None
    message: str
    first_path: NodePath | None = None
