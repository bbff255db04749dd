"""Local configuration for docsidebar."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_GROUP = "docs"
DEFAULT_DOCS_DIR = "docs"
DEFAULT_DOC_EXTENSIONS = ".md,.mdx"

# Group used by traversal queries when the caller does not name one.
DOCSIDEBAR_DEFAULT_GROUP = os.getenv("DOCSIDEBAR_DEFAULT_GROUP", DEFAULT_GROUP)
# Content root consulted by DirectoryDocRegistry.
DOCSIDEBAR_DOCS_PATH = Path(os.getenv("DOCSIDEBAR_DOCS_PATH", DEFAULT_DOCS_DIR)).expanduser().resolve()
DOCSIDEBAR_DOC_EXTENSIONS = tuple(
    ext.strip()
    for ext in os.getenv("DOCSIDEBAR_DOC_EXTENSIONS", DEFAULT_DOC_EXTENSIONS).split(",")
    if ext.strip()
)
