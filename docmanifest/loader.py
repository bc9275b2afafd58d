"""Load category manifests from YAML or JSON documents."""

from __future__ import annotations

import json
from collections.abc import Hashable
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from .logging import get_logger
from .manifest import CategoryManifest, ConfigurationError

_LOGGER = get_logger("loader")

_YAML_SUFFIXES = {".yml", ".yaml"}


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings with repeated keys."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> Dict[Any, Any]:
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise ConfigurationError(
                    f"Duplicate key {key!r} at line {key_node.start_mark.line + 1}"
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _unique_pairs(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ConfigurationError(f"Duplicate key {key!r}")
        result[key] = value
    return result


def load_manifest(path: Path) -> CategoryManifest:
    """Read a manifest document and validate it.

    The document has the same shape as :data:`docmanifest.catalog.FILES_BY_CATEGORY`::

        Backend Intro:
          path: BackendIntro
          files:
            - Backend.md

    Key order in the document is kept as navigation order. Repeated keys are
    rejected rather than merged.
    """
    path = path.expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read manifest {path}: {exc}") from exc

    data = _parse(text, path)
    manifest = CategoryManifest.from_mapping(data)
    _LOGGER.debug("Loaded %d categories from %s", len(manifest), path)
    return manifest


def _parse(text: str, path: Path) -> Any:
    if not text.strip():
        raise ConfigurationError(f"Manifest {path.name} is empty")
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.load(text, Loader=_UniqueKeyLoader)  # noqa: S506 - SafeLoader subclass
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc
    try:
        return json.loads(text, object_pairs_hook=_unique_pairs)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc


__all__ = ["load_manifest"]
