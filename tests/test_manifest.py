"""Tests for devpath.manifest."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from devpath.manifest import ManifestParseError, load_manifest, read_manifest


def test_read_manifest_returns_none_when_absent(tmp_path: Path) -> None:
    assert read_manifest(tmp_path) is None


def test_read_manifest_parses_dependency_sections(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        json.dumps(
            {
                "name": "demo",
                "dependencies": {"express": "^4.18.0"},
                "devDependencies": {"jest": "^29.0.0"},
            }
        ),
        encoding="utf-8",
    )

    manifest = read_manifest(tmp_path)

    assert manifest is not None
    assert manifest.dependencies == {"express": "^4.18.0"}
    assert manifest.dev_dependencies == {"jest": "^29.0.0"}
    assert manifest.all_dependencies() == {"express": "^4.18.0", "jest": "^29.0.0"}


def test_read_manifest_without_sections_yields_empty_maps(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text('{"name": "bare"}', encoding="utf-8")

    manifest = read_manifest(tmp_path)

    assert manifest is not None
    assert manifest.dependencies == {}
    assert manifest.dev_dependencies == {}


def test_read_manifest_drops_malformed_entries(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        '{"dependencies": ["react"], "devDependencies": {"eslint": "8", "weird": 3}}',
        encoding="utf-8",
    )

    manifest = read_manifest(tmp_path)

    assert manifest is not None
    assert manifest.dependencies == {}
    assert manifest.dev_dependencies == {"eslint": "8"}


def test_dev_dependencies_win_on_conflict(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        '{"dependencies": {"react": "17"}, "devDependencies": {"react": "18"}}',
        encoding="utf-8",
    )

    manifest = read_manifest(tmp_path)

    assert manifest is not None
    assert manifest.all_dependencies()["react"] == "18"


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", ""])
def test_read_manifest_raises_on_unparseable_content(tmp_path: Path, content: str) -> None:
    (tmp_path / "package.json").write_text(content, encoding="utf-8")

    with pytest.raises(ManifestParseError) as excinfo:
        read_manifest(tmp_path)

    assert "package.json" in str(excinfo.value)


def test_read_manifest_is_not_recursive(tmp_path: Path) -> None:
    nested = tmp_path / "packages" / "web"
    nested.mkdir(parents=True)
    (nested / "package.json").write_text('{"dependencies": {"vue": "3"}}', encoding="utf-8")

    assert read_manifest(tmp_path) is None


def test_load_manifest_recovers_from_parse_error(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / "package.json").write_text("{broken", encoding="utf-8")
    logger = logging.getLogger("tests.manifest")

    with caplog.at_level(logging.WARNING, logger="tests.manifest"):
        manifest, failed = load_manifest(tmp_path, logger=logger)

    assert manifest is None
    assert failed is True
    assert "continuing without dependency data" in caplog.text


def test_load_manifest_reports_clean_absence(tmp_path: Path) -> None:
    assert load_manifest(tmp_path) == (None, False)
