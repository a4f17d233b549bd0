"""Plain-text summary of a project's directory layout."""

from __future__ import annotations

from collections import defaultdict
from pathlib import PurePosixPath
from typing import Dict, Iterable, List

ROOT_HEADING = "Root directory:"


def group_by_directory(files: Iterable[str]) -> Dict[str, List[str]]:
    """Map each parent directory (``.`` for the root) to its sorted file names."""
    groups: Dict[str, List[str]] = defaultdict(list)
    for path in files:
        pure = PurePosixPath(path)
        groups[str(pure.parent)].append(pure.name)
    return {directory: sorted(groups[directory]) for directory in sorted(groups)}


def summarize(files: Iterable[str]) -> str:
    lines: List[str] = []
    for directory, names in group_by_directory(files).items():
        lines.append(ROOT_HEADING if directory == "." else f"{directory}/:")
        lines.extend(f"  - {name}" for name in names)
        lines.append("")
    return "".join(f"{line}\n" for line in lines)


__all__ = ["ROOT_HEADING", "group_by_directory", "summarize"]
