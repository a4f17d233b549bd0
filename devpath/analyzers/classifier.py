"""Tech stack classification from a scanned file list and manifest."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .languages import detect_languages
from .rules import (
    FRAMEWORK_DEPENDENCIES,
    FRAMEWORK_PATTERNS,
    TOOL_DEPENDENCIES,
    TOOL_PATTERNS,
    DependencyRule,
    PatternRule,
)
from ..models import Manifest, TechEntry, TechStack


def classify(files: Sequence[str], manifest: Manifest | None) -> TechStack:
    """Return the languages, frameworks, and tools evidenced by ``files`` and ``manifest``."""
    dependencies = manifest.all_dependencies() if manifest is not None else {}
    return TechStack(
        languages=detect_languages(files),
        frameworks=detect_entries(files, dependencies, FRAMEWORK_DEPENDENCIES, FRAMEWORK_PATTERNS),
        tools=detect_entries(files, dependencies, TOOL_DEPENDENCIES, TOOL_PATTERNS),
    )


def detect_entries(
    files: Sequence[str],
    dependencies: Dict[str, str],
    dependency_rules: Sequence[DependencyRule],
    pattern_rules: Sequence[PatternRule],
) -> List[TechEntry]:
    """Apply manifest rules, then file-pattern rules for names not yet found."""
    entries: List[TechEntry] = []
    seen: set[str] = set()

    for rule in dependency_rules:
        for candidate in rule.candidates:
            if candidate in dependencies:
                if rule.name not in seen:
                    entries.append(TechEntry(rule.name, dependencies[candidate]))
                    seen.add(rule.name)
                break

    for rule in pattern_rules:
        if rule.name in seen:
            continue
        if any(rule.matches(path) for path in files):
            entries.append(TechEntry(rule.name))
            seen.add(rule.name)

    return entries


__all__ = ["classify", "detect_entries"]
