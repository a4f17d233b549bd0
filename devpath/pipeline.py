"""Analysis pipeline: resolve, scan, classify, assess, summarize."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, Iterable

from .analyzers import assess_quality, classify, summarize
from .analyzers.quality import FileReader
from .logging import get_logger
from .manifest import MANIFEST_FILENAME, load_manifest
from .models import AnalysisResult, QualityInsight
from .paths import resolve_project_path
from .scanner import DEFAULT_MAX_DEPTH, DEFAULT_SKIP_DIRS, DirectoryScanner


class ProjectAnalyzer:
    """Coordinates the analysis stages for a single project directory."""

    def __init__(
        self,
        skip_dirs: Iterable[str] = (),
        resolver: Callable[[str], str] = resolve_project_path,
        logger: logging.Logger | None = None,
    ) -> None:
        self.skip_dirs = frozenset(DEFAULT_SKIP_DIRS).union(skip_dirs)
        self.resolver = resolver
        self.logger = logger or get_logger("pipeline")

    def analyze(self, path: str, max_depth: int = DEFAULT_MAX_DEPTH) -> AnalysisResult:
        """Analyze the project at ``path``.

        Only ``PathNotFoundError`` escapes; unreadable directories, a malformed
        manifest, and unreadable files reduce the result instead of failing it.
        """
        root = self.resolver(path)
        self.logger.info("Analyzing project at %s", root)

        scanner = DirectoryScanner(self.skip_dirs, logger=self.logger.getChild("scanner"))
        files = scanner.scan(root, max_depth)
        self.logger.info("Found %d files", len(files))

        manifest, manifest_failed = load_manifest(root, logger=self.logger.getChild("manifest"))
        tech_stack = classify(files, manifest)
        self.logger.debug(
            "Detected languages=%s frameworks=%s tools=%s",
            [entry.name for entry in tech_stack.languages] or "none",
            [entry.name for entry in tech_stack.frameworks] or "none",
            [entry.name for entry in tech_stack.tools] or "none",
        )

        code_quality = assess_quality(
            files,
            tech_stack,
            _file_reader(root),
            logger=self.logger.getChild("quality"),
        )
        if manifest_failed:
            code_quality.append(
                QualityInsight(
                    type="suggestion",
                    severity="low",
                    message=f"{MANIFEST_FILENAME} could not be parsed, so dependency-based detection was skipped.",
                )
            )

        return AnalysisResult(
            root=root,
            structure=summarize(files),
            tech_stack=tech_stack,
            code_quality=code_quality,
            files=files,
            manifest=manifest,
        )

    async def analyze_async(self, path: str, max_depth: int = DEFAULT_MAX_DEPTH) -> AnalysisResult:
        """Run :meth:`analyze` in a worker thread."""
        return await asyncio.to_thread(self.analyze, path, max_depth)


def analyze_project(
    path: str,
    max_depth: int = DEFAULT_MAX_DEPTH,
    *,
    skip_dirs: Iterable[str] = (),
    logger: logging.Logger | None = None,
) -> AnalysisResult:
    """Convenience wrapper around :class:`ProjectAnalyzer`."""
    return ProjectAnalyzer(skip_dirs=skip_dirs, logger=logger).analyze(path, max_depth)


def _file_reader(root: str) -> FileReader:
    root_path = Path(root)

    def _read(relative: str) -> str:
        return (root_path / relative).read_text(encoding="utf-8")

    return _read


__all__ = ["ProjectAnalyzer", "analyze_project"]
