"""Navigation sidebar export for documentation sites."""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from .manifest import CategoryManifest

SIDEBAR_TEMPLATE = "sidebar.md.j2"


class NavigationBuilder:
    """Builds a navigation tree and markdown sidebar from a manifest."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        title: str = "Documentation",
        link_prefix: str = "",
    ) -> None:
        self.title = title
        self.link_prefix = link_prefix
        self._env = self._create_env(templates_dir)

    def build_tree(self, manifest: CategoryManifest) -> List[Dict[str, object]]:
        sections: List[Dict[str, object]] = []
        for name, category in manifest.list():
            files = [
                {
                    "name": filename,
                    "title": PurePosixPath(filename).stem,
                    "link": self._link(category.path, filename),
                }
                for filename in category.files
            ]
            sections.append(
                {
                    "title": name,
                    "path": category.path,
                    "slug": self._slugify(name),
                    "files": files,
                }
            )
        return sections

    def render(self, manifest: CategoryManifest) -> str:
        """Render the markdown sidebar template."""
        template = self._env.get_template(SIDEBAR_TEMPLATE)
        rendered = template.render(title=self.title, sections=self.build_tree(manifest))
        return rendered.rstrip() + "\n"

    def _link(self, category_path: str, filename: str) -> str:
        relative = PurePosixPath(category_path, filename)
        prefix = self.link_prefix.rstrip("/")
        if not prefix:
            return str(relative)
        return f"{prefix}/{relative}"

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        # Overrides fall back to the bundled template.
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)

    @staticmethod
    def _slugify(title: str) -> str:
        slug = title.lower()
        slug = re.sub(r"[^a-z0-9\s-]", "", slug)
        slug = re.sub(r"\s+", "-", slug)
        slug = re.sub(r"-+", "-", slug)
        return slug.strip("-")


__all__ = ["NavigationBuilder", "SIDEBAR_TEMPLATE"]
