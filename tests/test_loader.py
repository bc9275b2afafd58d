"""Tests for docmanifest.loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docmanifest.catalog import FILES_BY_CATEGORY
from docmanifest.loader import load_manifest
from docmanifest.manifest import ConfigurationError


def test_load_yaml_manifest_keeps_document_order(tmp_path: Path) -> None:
    path = tmp_path / "manifest.yml"
    path.write_text(
        """
"Zeta Topics":
  path: Zeta
  files:
    - Last.md
    - First.md
"Auth & OAuth":
  path: AuthAndOAuth
  files: [MailSending.md]
""",
        encoding="utf-8",
    )

    manifest = load_manifest(path)

    assert manifest.names() == ("Zeta Topics", "Auth & OAuth")
    assert manifest.get("Zeta Topics").files == ("Last.md", "First.md")  # type: ignore[union-attr]
    assert manifest.resolve_path("Auth & OAuth", "MailSending.md") == "AuthAndOAuth/MailSending.md"


def test_load_json_manifest_matches_builtin_catalog(tmp_path: Path) -> None:
    path = tmp_path / "manifest.json"
    data = {name: {"path": entry["path"], "files": list(entry["files"])} for name, entry in FILES_BY_CATEGORY.items()}  # type: ignore[call-overload]
    path.write_text(json.dumps(data), encoding="utf-8")

    manifest = load_manifest(path)

    assert manifest.to_dict() == data


def test_load_manifest_rejects_duplicate_paths(tmp_path: Path) -> None:
    path = tmp_path / "manifest.yaml"
    path.write_text(
        "A:\n  path: Same\n  files: [a.md]\nB:\n  path: Same\n  files: [b.md]\n",
        encoding="utf-8",
    )

    with pytest.raises(ConfigurationError, match="share path"):
        load_manifest(path)


@pytest.mark.parametrize(
    ("filename", "content"),
    [
        ("empty.yml", "   \n"),
        ("broken.yml", "A: [unclosed\n"),
        ("broken.json", "{not json"),
        ("list.yml", "- a\n- b\n"),
    ],
)
def test_load_manifest_reports_bad_documents(tmp_path: Path, filename: str, content: str) -> None:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_manifest(path)


def test_load_manifest_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read manifest"):
        load_manifest(tmp_path / "absent.yml")


@pytest.mark.parametrize(
    ("filename", "content"),
    [
        (
            "manifest.yml",
            "A: {path: One, files: [a.md]}\nA: {path: Two, files: [b.md]}\n",
        ),
        (
            "manifest.json",
            '{"A": {"path": "One", "files": ["a.md"]}, "A": {"path": "Two", "files": ["b.md"]}}',
        ),
    ],
)
def test_load_manifest_rejects_repeated_category_names(
    tmp_path: Path, filename: str, content: str
) -> None:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Duplicate key 'A'"):
        load_manifest(path)


def test_load_manifest_rejects_repeated_nested_keys(tmp_path: Path) -> None:
    path = tmp_path / "manifest.yml"
    path.write_text("A:\n  path: One\n  path: Two\n  files: [a.md]\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Duplicate key 'path'"):
        load_manifest(path)


def test_load_manifest_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_bytes(b"A:\n  path: A\n  files: [\xff.md]\n")

    with pytest.raises(ConfigurationError, match="Cannot read manifest"):
        load_manifest(path)
