"""Checks that every manifest entry exists in a content store on disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from .logging import get_logger
from .manifest import CategoryManifest

_LOGGER = get_logger("integrity")


@dataclass(frozen=True)
class IntegrityIssue:
    """A manifest entry with no matching resource under the content root."""

    category: str
    path: str
    detail: str


class IntegrityError(RuntimeError):
    """Raised when manifest entries are missing from the content root."""

    def __init__(self, message: str, issues: Sequence[IntegrityIssue]) -> None:
        super().__init__(message)
        self.issues = list(issues)


class IntegrityChecker:
    """Resolves ``content_root / path / file`` for every manifest entry."""

    def __init__(self, content_root: Path) -> None:
        self.content_root = content_root

    def check(self, manifest: CategoryManifest) -> List[IntegrityIssue]:
        """Return issues in manifest order; an empty list means the store is complete."""
        issues: List[IntegrityIssue] = []
        if not self.content_root.is_dir():
            return [
                IntegrityIssue(
                    category="",
                    path=str(self.content_root),
                    detail="Content root is not a directory",
                )
            ]

        for name, category in manifest.list():
            directory = self.content_root / category.path
            if not directory.is_dir():
                issues.append(
                    IntegrityIssue(
                        category=name,
                        path=category.path,
                        detail="Category directory not found",
                    )
                )
                continue
            for filename in category.files:
                relative = manifest.resolve_path(name, filename)
                if relative is None:  # pragma: no cover - files come from the manifest
                    continue
                if not (self.content_root / relative).is_file():
                    issues.append(
                        IntegrityIssue(category=name, path=relative, detail="File not found")
                    )

        for issue in issues:
            _LOGGER.warning("%s: %s (%s)", issue.category, issue.detail, issue.path)
        return issues

    def ensure(self, manifest: CategoryManifest) -> None:
        """Raise :class:`IntegrityError` when :meth:`check` reports anything."""
        issues = self.check(manifest)
        if issues:
            raise IntegrityError(
                f"{len(issues)} manifest entries missing under {self.content_root}",
                issues,
            )


__all__ = ["IntegrityChecker", "IntegrityError", "IntegrityIssue"]
