"""Configuration loading for docmanifest (.docmanifest.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".docmanifest.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class NavigationConfig:
    """Sidebar rendering settings."""

    title: str = "Documentation"
    link_prefix: str = ""
    templates_dir: Optional[Path] = None


@dataclass
class ServiceConfig:
    """Bind address for the read-only HTTP service."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class DocManifestConfig:
    """Represents the settings defined in .docmanifest.yml."""

    root: Path
    content_root: Optional[Path] = None
    manifest: Optional[Path] = None
    navigation: NavigationConfig = field(default_factory=NavigationConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)


def load_config(config_path: Path) -> DocManifestConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocManifestConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    content_root_str = _as_str(data.get("content_root"))
    manifest_str = _as_str(data.get("manifest"))

    navigation = NavigationConfig()
    nav_data = _as_dict(data.get("navigation"))
    if nav_data:
        navigation.title = _as_str(nav_data.get("title")) or navigation.title
        navigation.link_prefix = _as_str(nav_data.get("link_prefix")) or ""
        templates_dir_str = _as_str(nav_data.get("templates_dir"))
        navigation.templates_dir = root / templates_dir_str if templates_dir_str else None

    service = ServiceConfig()
    service_data = _as_dict(data.get("service"))
    if service_data:
        service.host = _as_str(service_data.get("host")) or service.host
        port = _as_int(service_data.get("port"))
        if port is not None:
            if not 0 < port < 65536:
                raise ConfigError(f"service.port out of range: {port}")
            service.port = port

    return DocManifestConfig(
        root=root,
        content_root=root / content_root_str if content_root_str else None,
        manifest=root / manifest_str if manifest_str else None,
        navigation=navigation,
        service=service,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DocManifestConfig",
    "NavigationConfig",
    "ServiceConfig",
    "load_config",
]
