"""Navigation view models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from docsidebar.schemas.nodes import DocNode


class Pagination(BaseModel):
    """Previous and next documents around one document."""

    model_config = ConfigDict(frozen=True)

    previous: DocNode | None = None
    next: DocNode | None = None
