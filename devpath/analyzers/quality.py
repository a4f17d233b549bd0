"""Project hygiene heuristics that produce advisory quality insights."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Callable, List, Sequence

from .languages import file_extension
from .rules import ENV_LOADER_TOOL, LINT_TOOLS, TEST_FRAMEWORKS
from ..logging import get_logger
from ..models import QualityInsight, TechStack

FileReader = Callable[[str], str]

MAX_LINE_COUNT_FILES = 10
LONG_FILE_LINES = 300
ORGANIZED_FILE_THRESHOLD = 5
TEST_FILE_THRESHOLD = 3

_ORGANIZATION_DIRS = frozenset({"src", "lib", "app"})
_TEST_DIRS = frozenset({"test", "tests", "__tests__"})
_TEST_MARKERS = (".test.", ".spec.")
_LOCK_FILES = frozenset({"package-lock.json", "yarn.lock", "pnpm-lock.yaml"})
_ENV_FILES = frozenset({".env", ".env.example"})
_SCRIPT_EXTENSIONS = frozenset({".js", ".jsx"})


def assess_quality(
    files: Sequence[str],
    tech_stack: TechStack,
    read_file: FileReader,
    logger: logging.Logger | None = None,
) -> List[QualityInsight]:
    """Run every hygiene check in order and collect the resulting insights."""
    logger = logger or get_logger("quality")
    insights: List[QualityInsight] = []
    insights.extend(check_structure(files))
    insights.extend(check_code_issues(files, tech_stack))
    insights.extend(check_best_practices(files, tech_stack, read_file, logger))
    logger.debug("Quality checks produced %d insights", len(insights))
    return insights


def check_structure(files: Sequence[str]) -> List[QualityInsight]:
    insights: List[QualityInsight] = []
    basenames = {_basename(path) for path in files}

    if "readme.md" not in {name.lower() for name in basenames}:
        insights.append(
            QualityInsight(
                type="structure",
                severity="medium",
                message=(
                    "Project is missing a README.md file. Adding documentation helps "
                    "others understand your project."
                ),
            )
        )

    if ".gitignore" not in basenames:
        insights.append(
            QualityInsight(
                type="structure",
                severity="medium",
                message=(
                    "Project is missing a .gitignore file. This helps prevent "
                    "committing unnecessary files."
                ),
            )
        )

    source_files = [path for path in files if "node_modules" not in _directories(path)]
    organized = any(_ORGANIZATION_DIRS.intersection(_directories(path)) for path in source_files)
    if not organized and len(source_files) > ORGANIZED_FILE_THRESHOLD:
        insights.append(
            QualityInsight(
                type="structure",
                severity="low",
                message=(
                    "Consider organizing your code into directories (like src/, lib/, "
                    "or app/) for better maintainability."
                ),
            )
        )

    return insights


def check_code_issues(files: Sequence[str], tech_stack: TechStack) -> List[QualityInsight]:
    insights: List[QualityInsight] = []
    tool_names = {tool.name for tool in tech_stack.tools}

    if not LINT_TOOLS.intersection(tool_names):
        insights.append(
            QualityInsight(
                type="quality",
                severity="medium",
                message="Consider adding a linter like ESLint to enforce code quality standards.",
            )
        )

    if not TEST_FRAMEWORKS.intersection(tool_names):
        insights.append(
            QualityInsight(
                type="quality",
                severity="medium",
                message=(
                    "No testing framework detected. Consider adding tests with Jest, "
                    "Mocha, or another testing library."
                ),
            )
        )

    if not any(_is_test_file(path) for path in files) and len(files) > TEST_FILE_THRESHOLD:
        insights.append(
            QualityInsight(
                type="quality",
                severity="medium",
                message="No test files detected. Adding tests helps ensure your code works as expected.",
            )
        )

    return insights


def check_best_practices(
    files: Sequence[str],
    tech_stack: TechStack,
    read_file: FileReader,
    logger: logging.Logger | None = None,
) -> List[QualityInsight]:
    logger = logger or get_logger("quality")
    insights: List[QualityInsight] = []
    basenames = {_basename(path) for path in files}

    if "package.json" in basenames and not _LOCK_FILES.intersection(basenames):
        insights.append(
            QualityInsight(
                type="best-practice",
                severity="low",
                message=(
                    "No lock file (package-lock.json, yarn.lock, or pnpm-lock.yaml) found. "
                    "Lock files help ensure consistent installations."
                ),
            )
        )

    uses_env_loader = any(tool.name == ENV_LOADER_TOOL for tool in tech_stack.tools)
    if uses_env_loader and not _ENV_FILES.intersection(basenames):
        insights.append(
            QualityInsight(
                type="best-practice",
                severity="low",
                message=(
                    "You're using dotenv but no .env or .env.example file was found. "
                    "Consider adding an example file for documentation."
                ),
            )
        )

    scripts = [path for path in files if file_extension(path) in _SCRIPT_EXTENSIONS]
    for path in scripts[:MAX_LINE_COUNT_FILES]:
        try:
            content = read_file(path)
        except (OSError, ValueError) as exc:
            logger.debug("Skipping unreadable file %s: %s", path, exc)
            continue
        line_count = len(content.splitlines())
        if line_count > LONG_FILE_LINES:
            insights.append(
                QualityInsight(
                    type="best-practice",
                    severity="medium",
                    message=(
                        f"File {path} has {line_count} lines. Consider breaking it into "
                        "smaller modules."
                    ),
                )
            )

    return insights


def _basename(path: str) -> str:
    return PurePosixPath(path).name


def _directories(path: str) -> tuple[str, ...]:
    return PurePosixPath(path).parts[:-1]


def _is_test_file(path: str) -> bool:
    if any(marker in _basename(path) for marker in _TEST_MARKERS):
        return True
    return bool(_TEST_DIRS.intersection(_directories(path)))


__all__ = [
    "FileReader",
    "LONG_FILE_LINES",
    "MAX_LINE_COUNT_FILES",
    "assess_quality",
    "check_best_practices",
    "check_code_issues",
    "check_structure",
]
