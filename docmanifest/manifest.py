"""Immutable lookup table of documentation categories."""

from __future__ import annotations

from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from .logging import get_logger
from .models import Category

_LOGGER = get_logger("manifest")

_RESERVED_CHARS = frozenset('/\\<>:"|?*')
_MARKDOWN_SUFFIX = ".md"


class ConfigurationError(ValueError):
    """Raised when manifest data is malformed."""


class CategoryManifest:
    """Ordered, read-only mapping from display name to :class:`Category`.

    Instances are validated once on construction and never change afterwards,
    so they can be shared between threads without locking. Lookups for absent
    entries return ``None`` instead of raising.
    """

    def __init__(self, categories: Iterable[Category]) -> None:
        entries: Dict[str, Category] = {}
        owners: Dict[str, str] = {}
        for category in categories:
            _validate_category(category)
            if category.display_name in entries:
                raise ConfigurationError(
                    f"Duplicate category display name: {category.display_name!r}"
                )
            owner = owners.get(category.path)
            if owner is not None:
                raise ConfigurationError(
                    f"Categories {owner!r} and {category.display_name!r} share path {category.path!r}"
                )
            entries[category.display_name] = category
            owners[category.path] = category.display_name
        self._entries: Mapping[str, Category] = MappingProxyType(entries)
        self._items: Tuple[Tuple[str, Category], ...] = tuple(entries.items())
        _LOGGER.debug("Built manifest with %d categories", len(self._items))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CategoryManifest":
        """Build a manifest from ``{name: {"path": ..., "files": [...]}}`` data."""
        if not isinstance(data, Mapping):
            raise ConfigurationError("Manifest data must be a mapping of category names")
        categories: List[Category] = []
        for name, entry in data.items():
            if not isinstance(name, str):
                raise ConfigurationError(f"Category name must be a string, got {name!r}")
            if not isinstance(entry, Mapping):
                raise ConfigurationError(f"Category {name!r} must map to an object")
            path = entry.get("path")
            if not isinstance(path, str):
                raise ConfigurationError(f"Category {name!r} is missing a string 'path'")
            files = entry.get("files")
            if isinstance(files, (str, bytes)) or not isinstance(files, Sequence):
                raise ConfigurationError(f"Category {name!r} must list its 'files'")
            if not all(isinstance(item, str) for item in files):
                raise ConfigurationError(f"Category {name!r} has non-string file entries")
            categories.append(Category(display_name=name, path=path, files=tuple(files)))
        return cls(categories)

    def get(self, display_name: str) -> Optional[Category]:
        """Return the category with exactly this display name, or None."""
        return self._entries.get(display_name)

    def list(self) -> Tuple[Tuple[str, Category], ...]:
        """Return ``(display_name, category)`` pairs in declaration order."""
        return self._items

    def resolve_path(self, display_name: str, filename: str) -> Optional[str]:
        """Join a category path with one of its files, or return None."""
        category = self._entries.get(display_name)
        if category is None or not category.has_file(filename):
            return None
        return str(PurePosixPath(category.path, filename))

    def resolve_all(self) -> Tuple[str, ...]:
        return tuple(
            str(PurePosixPath(category.path, filename))
            for _, category in self._items
            for filename in category.files
        )

    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self._items)

    def categories(self) -> Tuple[Category, ...]:
        return tuple(category for _, category in self._items)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Return the nested ``{name: {"path", "files"}}`` shape."""
        return {
            name: {"path": category.path, "files": list(category.files)}
            for name, category in self._items
        }

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __contains__(self, display_name: object) -> bool:
        return display_name in self._entries

    def __repr__(self) -> str:
        return f"CategoryManifest({len(self._items)} categories)"


def is_valid_component(value: str) -> bool:
    """Return True when ``value`` can be used as a single path segment."""
    if not isinstance(value, str) or not value or value in {".", ".."}:
        return False
    if value != value.strip():
        return False
    return not any(char in _RESERVED_CHARS or ord(char) < 32 for char in value)


def _validate_category(category: Category) -> None:
    name = category.display_name
    if not isinstance(name, str) or not name.strip():
        raise ConfigurationError("Category display name must be a non-empty string")
    if not is_valid_component(category.path):
        raise ConfigurationError(
            f"Category {name!r} has an invalid path segment: {category.path!r}"
        )
    if not isinstance(category.files, tuple):
        raise ConfigurationError(f"Category {name!r} files must be a tuple")
    if not category.files:
        raise ConfigurationError(f"Category {name!r} has no files")
    seen = set()
    for filename in category.files:
        if not is_valid_component(filename):
            raise ConfigurationError(f"Category {name!r} has an invalid filename: {filename!r}")
        if not filename.lower().endswith(_MARKDOWN_SUFFIX):
            raise ConfigurationError(
                f"Category {name!r} lists a non-markdown file: {filename!r}"
            )
        if filename in seen:
            raise ConfigurationError(f"Category {name!r} lists {filename!r} more than once")
        seen.add(filename)


__all__ = ["CategoryManifest", "ConfigurationError", "is_valid_component"]
