from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from docmanifest.manifest import CategoryManifest
from docmanifest.models import Category
from tests._fixtures.content_builder import ContentBuilder


@pytest.fixture
def content_builder(tmp_path: Path) -> ContentBuilder:
    """Provide a content store rooted at the pytest tmp_path."""
    return ContentBuilder(tmp_path)


@pytest.fixture
def small_manifest() -> CategoryManifest:
    return CategoryManifest(
        [
            Category(display_name="Getting Started", path="GettingStarted", files=("Install.md", "Usage.md")),
            Category(display_name="Reference", path="Reference", files=("API.md",)),
        ]
    )


@pytest.fixture(autouse=True)
def _reset_docmanifest_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog keeps seeing docmanifest records."""
    yield
    logger = logging.getLogger("docmanifest")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
