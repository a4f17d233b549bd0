"""Loading of the project's package.json dependency manifest."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .logging import get_logger
from .models import Manifest

MANIFEST_FILENAME = "package.json"


class ManifestParseError(ValueError):
    """Raised when package.json exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path.name}: {reason}")


def read_manifest(root: str | Path) -> Manifest | None:
    """Return the manifest at ``root`` or ``None`` when there is none."""
    path = Path(root) / MANIFEST_FILENAME
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestParseError(path, str(exc)) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ManifestParseError(path, "top-level value must be an object")

    return Manifest(
        dependencies=_string_map(data.get("dependencies")),
        dev_dependencies=_string_map(data.get("devDependencies")),
    )


def load_manifest(root: str | Path, logger: logging.Logger | None = None) -> tuple[Manifest | None, bool]:
    """Read the manifest, treating parse failures as an absent manifest.

    Returns the manifest and whether a parse failure was recovered from.
    """
    logger = logger or get_logger("manifest")
    try:
        manifest = read_manifest(root)
    except ManifestParseError as exc:
        logger.warning("%s; continuing without dependency data", exc)
        return None, True
    if manifest is None:
        logger.debug("No %s found in %s", MANIFEST_FILENAME, root)
    return manifest, False


def _string_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {
        str(name): version
        for name, version in value.items()
        if isinstance(version, str)
    }


__all__ = ["MANIFEST_FILENAME", "ManifestParseError", "load_manifest", "read_manifest"]
