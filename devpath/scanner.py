"""Depth-bounded directory scanning."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Tuple

from .logging import get_logger

DEFAULT_SKIP_DIRS = frozenset({"node_modules", "dist", "build", ".git"})
DEFAULT_MAX_DEPTH = 3


class DirectoryScanner:
    """Walks a project tree and returns the relative paths of its files."""

    def __init__(
        self,
        skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
        logger: logging.Logger | None = None,
    ) -> None:
        self.skip_dirs = frozenset(skip_dirs)
        self.logger = logger or get_logger("scanner")
        self.errors: List[Tuple[str, str]] = []

    def scan(self, root: str, max_depth: int = DEFAULT_MAX_DEPTH) -> List[str]:
        """Return forward-slash paths of every file under ``root`` within ``max_depth``.

        The root directory is depth 0. Files directly inside a directory at depth
        ``d`` are collected when ``d <= max_depth``. Symlinked directories are
        followed; the depth bound is what keeps link cycles finite.
        """
        if max_depth < 0:
            raise ValueError("max_depth must be zero or greater")

        root_path = Path(root)
        self.errors = []
        files: List[str] = []

        def _on_error(exc: OSError) -> None:
            failed = Path(exc.filename) if exc.filename else root_path
            rel_dir = _relative(failed, root_path) or "."
            self.logger.warning("Error scanning directory %s: %s", rel_dir, exc.strerror or exc)
            self.errors.append((rel_dir, str(exc)))

        for dirpath, dirnames, filenames in os.walk(root_path, onerror=_on_error, followlinks=True):
            current_dir = Path(dirpath)
            rel_dir = _relative(current_dir, root_path)
            depth = len(rel_dir.split("/")) if rel_dir else 0

            if depth >= max_depth:
                dirnames[:] = []
            else:
                dirnames[:] = sorted(name for name in dirnames if name not in self.skip_dirs)

            for filename in sorted(filenames):
                files.append(f"{rel_dir}/{filename}" if rel_dir else filename)

        self.logger.debug("Scanned %s: %d files, %d unreadable directories", root, len(files), len(self.errors))
        return files


def _relative(path: Path, root: Path) -> str:
    if path == root:
        return ""
    return path.relative_to(root).as_posix()


__all__ = ["DEFAULT_MAX_DEPTH", "DEFAULT_SKIP_DIRS", "DirectoryScanner"]
