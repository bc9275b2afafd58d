"""Helper utilities for constructing temporary content stores in tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from docmanifest.manifest import CategoryManifest


class ContentBuilder:
    """Writes markdown files for manifest entries under a throwaway content root."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "content"
        self.root.mkdir()

    def populate(self, manifest: CategoryManifest, *, skip: Iterable[str] = ()) -> None:
        """Create every resolved file except the relative paths listed in ``skip``.

        Category directories are always created, so skipped entries show up as
        missing files rather than missing directories.
        """
        skipped = set(skip)
        for relative in manifest.resolve_all():
            if relative in skipped:
                (self.root / relative).parent.mkdir(parents=True, exist_ok=True)
                continue
            self.write(relative, f"# {Path(relative).stem}\n")

    def write(self, relative: str, content: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def path(self) -> Path:
        """Return the content root path."""
        return self.root


__all__ = ["ContentBuilder"]
