"""Documentation category manifest and its read-only accessors."""

from .catalog import FILES_BY_CATEGORY, MANIFEST
from .manifest import CategoryManifest, ConfigurationError
from .models import Category

__all__ = [
    "Category",
    "CategoryManifest",
    "ConfigurationError",
    "FILES_BY_CATEGORY",
    "MANIFEST",
]
