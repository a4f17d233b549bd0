"""Plain-language explanations of analyzed projects and individual files."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Sequence

from .analyzers.languages import file_extension
from .analyzers.structure import group_by_directory
from .models import AnalysisResult


class ExplainError(ValueError):
    """Raised when the requested file cannot be explained."""


@dataclass
class Detail:
    title: str
    description: str


@dataclass
class Explanation:
    """Overview, key details, and suggested next steps."""

    overview: str
    details: List[Detail] = field(default_factory=list)
    next_steps: List[str] = field(default_factory=list)


_FILE_TYPES = {
    ".js": "JavaScript",
    ".jsx": "React JSX",
    ".ts": "TypeScript",
    ".tsx": "React TypeScript",
    ".json": "JSON configuration",
    ".html": "HTML",
    ".css": "CSS",
    ".scss": "SASS",
    ".sass": "SASS",
    ".md": "Markdown",
    ".py": "Python",
}
_SCRIPT_TYPES = frozenset({"JavaScript", "React JSX", "TypeScript", "React TypeScript"})
_COMPONENT_FUNCTION = re.compile(r"function\s+[A-Z][A-Za-z0-9_]*\s*\(")

_PROJECT_NEXT_STEPS = [
    "Review the project structure to understand the organization",
    "Look at the main entry points of the application",
    "Understand how different components interact with each other",
    "Check the package.json file to see dependencies and scripts",
]


def explain_project(result: AnalysisResult) -> Explanation:
    stack = result.tech_stack
    primary = stack.languages[0].name if stack.languages else None

    language = f"primarily written in {primary}" if primary else "written in an unrecognized language"
    if stack.frameworks:
        framework = f"using {', '.join(entry.name for entry in stack.frameworks)}"
    else:
        framework = "without a detected framework"
    overview = f"This project is {language} {framework}."
    if stack.tools:
        overview += f" It uses tools like {', '.join(entry.name for entry in stack.tools)}."

    directories = group_by_directory(result.files)
    structure = (
        f"The project contains {len(result.files)} {'file' if len(result.files) == 1 else 'files'} "
        f"across {len(directories)} {'directory' if len(directories) == 1 else 'directories'}."
    )

    severities = Counter(insight.severity or "unrated" for insight in result.code_quality)
    if result.code_quality:
        breakdown = ", ".join(f"{count} {severity}" for severity, count in sorted(severities.items()))
        quality = f"There are {len(result.code_quality)} code quality insights available ({breakdown})."
    else:
        quality = "No code quality issues were detected."

    return Explanation(
        overview=overview,
        details=[Detail("Project Structure", structure), Detail("Code Quality", quality)],
        next_steps=list(_PROJECT_NEXT_STEPS),
    )


def explain_file(path: str, content: str) -> Explanation:
    """Describe a single file from its name, location, and content."""
    name = PurePosixPath(path).name
    file_type = _FILE_TYPES.get(file_extension(path), "generic")

    overview = f'This is a {file_type} file named "{name}". '
    if file_type in _SCRIPT_TYPES:
        overview += _describe_script(content, file_type)

    line_count = len(content.splitlines())
    details = [
        Detail("Purpose", f"This file is likely used for {file_purpose(path, file_type, content)}."),
        Detail("Complexity", f"With {line_count} lines, this file is {complexity_level(line_count)}."),
    ]
    next_steps = [
        f"Read through {name} from top to bottom before changing it",
        "Find where this file is imported or referenced elsewhere in the project",
    ]
    if file_type in _SCRIPT_TYPES:
        next_steps.append("Run the related tests after making changes")
    return Explanation(overview=overview.strip(), details=details, next_steps=next_steps)


def file_purpose(path: str, file_type: str, content: str = "") -> str:
    name = PurePosixPath(path).name
    lowered = path.lower()

    if name == "package.json":
        return "dependency management and project configuration"
    if name.lower() == "readme.md":
        return "documentation"
    if "config" in name.lower():
        return "configuration"
    if "mongoose" in content and ("connect" in content or "Schema" in content):
        return "database integration with MongoDB"
    if "models" in lowered or "schemas" in lowered:
        return "data modeling and schema definition"
    if "React" in file_type or "components" in lowered:
        if name.startswith("App"):
            return "main application component"
        if "components" in lowered:
            return "UI components"
        if "pages" in lowered:
            return "page components"
        if "hooks" in lowered:
            return "custom React hooks"
    if "services" in lowered:
        return "backend services"
    if "utils" in lowered:
        return "utility functions"
    if "test" in lowered or "spec" in lowered:
        return "testing"
    if "styles" in lowered or file_type in {"CSS", "SASS"}:
        return "styling"
    return "application logic"


def explain_project_file(root: str, relative: str, files: Sequence[str]) -> Explanation:
    """Read ``relative`` under ``root`` and explain it.

    Raises ``ExplainError`` naming similarly named scanned files when the file is missing.
    """
    target = Path(root) / relative
    try:
        content = target.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        message = f"Could not read file: {target}"
        similar = find_similar_files(files, relative)
        if similar:
            listing = "\n".join(f"- {path}" for path in similar)
            message += f"\n\nSimilar files found:\n{listing}\n\nTry using one of these paths with the -f flag."
        else:
            message += "\nFile not found. Make sure the path is correct and the file exists."
        raise ExplainError(message) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ExplainError(f"Could not read file: {target}\nError: {exc}") from exc
    return explain_file(Path(relative).as_posix(), content)


def complexity_level(line_count: int) -> str:
    if line_count < 30:
        return "simple in complexity"
    if line_count < 100:
        return "moderately complex"
    if line_count < 300:
        return "fairly complex"
    return "highly complex"


def find_similar_files(files: Iterable[str], name: str) -> List[str]:
    """Return scanned files whose base name contains the base name of ``name``."""
    needle = PurePosixPath(name.replace("\\", "/")).name.lower()
    if not needle:
        return []
    return [path for path in files if needle in PurePosixPath(path).name.lower()]


def _describe_script(content: str, file_type: str) -> str:
    parts: List[str] = []
    if "import " in content or "export " in content:
        parts.append("It uses ES modules (import/export).")
    if "class " in content and "extends" in content:
        parts.append("It contains one or more component classes.")
    elif "class " in content:
        parts.append("It contains one or more classes.")
    if "function " in content or "=>" in content:
        if "React" in file_type and _COMPONENT_FUNCTION.search(content):
            parts.append("It defines one or more React functional components.")
        else:
            parts.append("It defines one or more functions.")
    return " ".join(parts)


__all__ = [
    "Detail",
    "ExplainError",
    "Explanation",
    "complexity_level",
    "explain_file",
    "explain_project",
    "explain_project_file",
    "file_purpose",
    "find_similar_files",
]
