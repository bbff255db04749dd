"""Doc registry implementations used by the validator."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from docsidebar.config import DOCSIDEBAR_DOC_EXTENSIONS, DOCSIDEBAR_DOCS_PATH


class InMemoryDocRegistry:
    """Registry backed by a fixed set of known doc ids."""

    def __init__(self, doc_ids: Iterable[str]) -> None:
        self._doc_ids = frozenset(doc_ids)

    def exists(self, doc_id: str) -> bool:
        return doc_id in self._doc_ids

    def __len__(self) -> int:
        return len(self._doc_ids)


class DirectoryDocRegistry:
    """Registry that resolves a doc id to ``<root>/<id><ext>`` on disk.

    Args:
        root: Content root. Defaults to ``DOCSIDEBAR_DOCS_PATH``.
        extensions: Candidate file extensions, tried in order. Defaults to
            ``DOCSIDEBAR_DOC_EXTENSIONS``.
    """

    def __init__(
        self,
        root: Path | None = None,
        *,
        extensions: Iterable[str] | None = None,
    ) -> None:
        self.root = (root or DOCSIDEBAR_DOCS_PATH).resolve()
        self.extensions = tuple(extensions) if extensions is not None else DOCSIDEBAR_DOC_EXTENSIONS

    def path_for(self, doc_id: str) -> Path | None:
        """Return the file backing ``doc_id``, or None if there is none."""
        for ext in self.extensions:
            try:
                candidate = (self.root / f"{doc_id}{ext}").resolve()
                # Ids that climb out of the content root never resolve.
                if not candidate.is_relative_to(self.root):
                    return None
                if candidate.is_file():
                    return candidate
            except (OSError, ValueError):
                # Ids the OS cannot express as a path (e.g. embedded NUL).
                return None
        return None

    def exists(self, doc_id: str) -> bool:
        return self.path_for(doc_id) is not None
