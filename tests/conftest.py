"""Test setup for docsidebar."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def streams_sidebar() -> dict[str, Any]:
    """A trimmed copy of a real docs site sidebar, using both node forms."""
    return {
        "docs": [
            {"type": "doc", "id": "welcome"},
            {
                "type": "category",
                "label": "Getting Started",
                "items": [
                    {"type": "doc", "id": "getting_started/overview", "label": "Overview"},
                    {"type": "doc", "id": "getting_started/rust_getting_started", "label": "Rust"},
                ],
            },
            {
                "type": "category",
                "label": "Key Concepts",
                "items": [
                    {
                        "type": "category",
                        "label": "Channels Protocol",
                        "items": [
                            "key_concepts/channels_protocol/overview",
                            "key_concepts/channels_protocol/authors",
                        ],
                    }
                ],
            },
            {"type": "doc", "id": "troubleshooting", "label": "Troubleshooting"},
        ]
    }
