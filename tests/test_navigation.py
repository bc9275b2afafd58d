"""Tests for navigation sidebar export."""

from __future__ import annotations

from pathlib import Path

from docmanifest.catalog import MANIFEST
from docmanifest.manifest import CategoryManifest
from docmanifest.navigation import SIDEBAR_TEMPLATE, NavigationBuilder


def test_build_tree_follows_manifest_order() -> None:
    tree = NavigationBuilder().build_tree(MANIFEST)

    assert [section["title"] for section in tree] == list(MANIFEST.names())
    backend = tree[0]
    assert backend["path"] == "BackendIntro"
    assert backend["slug"] == "backend-intro"
    assert backend["files"][0] == {  # type: ignore[index]
        "name": "Backend.md",
        "title": "Backend",
        "link": "BackendIntro/Backend.md",
    }


def test_slugs_drop_punctuation() -> None:
    tree = NavigationBuilder().build_tree(MANIFEST)
    slugs = {section["title"]: section["slug"] for section in tree}

    assert slugs["Auth & OAuth"] == "auth-oauth"
    assert slugs["Mega Project (YouTube)"] == "mega-project-youtube"
    assert slugs["Validations (Zod & Joi)"] == "validations-zod-joi"


def test_link_prefix_is_joined(small_manifest: CategoryManifest) -> None:
    tree = NavigationBuilder(link_prefix="/docs/").build_tree(small_manifest)

    links = [file["link"] for file in tree[0]["files"]]  # type: ignore[union-attr]
    assert links == ["/docs/GettingStarted/Install.md", "/docs/GettingStarted/Usage.md"]


def test_render_markdown_sidebar(small_manifest: CategoryManifest) -> None:
    rendered = NavigationBuilder(title="Guide").render(small_manifest)

    assert rendered == (
        "# Guide\n"
        "\n"
        "- **Getting Started**\n"
        "  - [Install](GettingStarted/Install.md)\n"
        "  - [Usage](GettingStarted/Usage.md)\n"
        "- **Reference**\n"
        "  - [API](Reference/API.md)\n"
    )


def test_render_uses_template_override(tmp_path: Path, small_manifest: CategoryManifest) -> None:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / SIDEBAR_TEMPLATE).write_text(
        "{% for section in sections %}{{ section.slug }}:{{ section.files | length }}\n{% endfor %}",
        encoding="utf-8",
    )

    rendered = NavigationBuilder(templates).render(small_manifest)

    assert rendered == "getting-started:2\nreference:1\n"


def test_render_falls_back_to_bundled_template(tmp_path: Path, small_manifest: CategoryManifest) -> None:
    rendered = NavigationBuilder(tmp_path).render(small_manifest)

    assert rendered.startswith("# Documentation\n")
