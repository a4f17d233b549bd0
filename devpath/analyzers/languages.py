"""Language detection from file extension counts."""

from __future__ import annotations

from collections import Counter
from pathlib import PurePosixPath
from typing import Iterable, List

from ..models import LanguageEntry

LANGUAGE_BY_EXTENSION = {
    ".js": "JavaScript",
    ".jsx": "JavaScript (React)",
    ".ts": "TypeScript",
    ".tsx": "TypeScript (React)",
    ".vue": "Vue",
    ".html": "HTML",
    ".css": "CSS",
    ".scss": "SCSS",
    ".sass": "Sass",
    ".less": "Less",
    ".py": "Python",
    ".rb": "Ruby",
    ".java": "Java",
    ".php": "PHP",
    ".go": "Go",
    ".rs": "Rust",
    ".c": "C",
    ".cpp": "C++",
    ".cs": "C#",
    ".swift": "Swift",
    ".kt": "Kotlin",
    ".dart": "Dart",
    ".lua": "Lua",
    ".r": "R",
    ".sh": "Shell",
    ".md": "Markdown",
    ".json": "JSON",
    ".yml": "YAML",
    ".yaml": "YAML",
    ".xml": "XML",
    ".sql": "SQL",
}


def file_extension(path: str) -> str:
    """Return the lower-cased extension of ``path`` (empty for dotfiles)."""
    return PurePosixPath(path).suffix.lower()


def detect_languages(files: Iterable[str]) -> List[LanguageEntry]:
    """Count known extensions, most common first, ties ordered by extension."""
    counts = Counter(file_extension(path) for path in files)
    entries = [
        LanguageEntry(name=LANGUAGE_BY_EXTENSION[ext], extension=ext, count=count)
        for ext, count in counts.items()
        if ext in LANGUAGE_BY_EXTENSION
    ]
    entries.sort(key=lambda entry: (-entry.count, entry.extension))
    return entries


__all__ = ["LANGUAGE_BY_EXTENSION", "detect_languages", "file_extension"]
