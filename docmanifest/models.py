"""Core data models shared across docmanifest components."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Category:
    """A named group of markdown files stored under one directory."""

    display_name: str
    path: str
    files: Tuple[str, ...]

    def has_file(self, filename: str) -> bool:
        return filename in self.files
