"""Sidebar tree models."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Literal, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

# Group name followed by the index of every item stepped through from the root.
NodePath: TypeAlias = tuple[Union[str, int], ...]


class DocNode(BaseModel):
    """A leaf referencing a single document by id."""

    model_config = ConfigDict(frozen=True)

    type: Literal["doc"] = "doc"
    id: str = Field(..., min_length=1)
    label: str


class CategoryNode(BaseModel):
    """A labeled grouping of child nodes.

    ``items`` may be empty here; an empty category is reported by the
    validator rather than rejected while parsing.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["category"] = "category"
    label: str
    items: tuple[SidebarItem, ...] = ()


SidebarItem = Annotated[Union[DocNode, CategoryNode], Field(discriminator="type")]

CategoryNode.model_rebuild()


class SidebarTree(BaseModel):
    """Named groups of top-level sidebar items, in declaration order.

    ``groups`` is stored as a read-only copy, so a tree cannot gain, lose or
    replace groups after it is built.
    """

    model_config = ConfigDict(frozen=True)

    groups: Mapping[str, tuple[SidebarItem, ...]] = Field(default_factory=dict, validate_default=True)

    @field_validator("groups", mode="after")
    @classmethod
    def _freeze_groups(cls, value: Mapping[str, tuple[SidebarItem, ...]]) -> Mapping[str, tuple[SidebarItem, ...]]:
        return MappingProxyType(dict(value))


# Context token that only ValidatedTree.issue passes to model validation.
_ISSUED = object()


class ValidatedTree(BaseModel):
    """A sidebar tree that passed validation.

    Traversal queries trust this wrapper and re-check nothing, so it can only
    be built through ``issue``, which ``docsidebar.validator.validate`` calls
    once the tree is clean. Constructing it directly raises.
    """

    model_config = ConfigDict(frozen=True)

    tree: SidebarTree

    @model_validator(mode="after")
    def _require_issuer(self, info: ValidationInfo) -> ValidatedTree:
        if not info.context or info.context.get("issuer") is not _ISSUED:
            raise ValueError("ValidatedTree is only built by docsidebar.validator.validate")
        return self

    @classmethod
    def issue(cls, tree: SidebarTree) -> ValidatedTree:
        """Wrap a tree that has already been checked. Internal to the validator."""
        return cls.model_validate({"tree": tree}, context={"issuer": _ISSUED})

    @property
    def groups(self) -> Mapping[str, tuple[SidebarItem, ...]]:
        return self.tree.groups
