"""Core data models shared across devpath components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

INSIGHT_TYPES = ("structure", "quality", "best-practice", "positive", "suggestion")
SEVERITIES = ("low", "medium", "high")


@dataclass(frozen=True)
class Manifest:
    """Dependency sections parsed from the project's package.json."""

    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)

    def all_dependencies(self) -> Dict[str, str]:
        """Return runtime and dev dependencies merged, dev entries winning on conflict."""
        merged = dict(self.dependencies)
        merged.update(self.dev_dependencies)
        return merged

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dependencies": dict(self.dependencies),
            "devDependencies": dict(self.dev_dependencies),
        }


@dataclass(frozen=True)
class LanguageEntry:
    """A detected language and the number of files carrying its extension."""

    name: str
    extension: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "extension": self.extension, "count": self.count}


@dataclass(frozen=True)
class TechEntry:
    """A detected framework or tool; version is only known for manifest matches."""

    name: str
    version: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name}
        if self.version is not None:
            data["version"] = self.version
        return data


@dataclass
class TechStack:
    """Languages, frameworks, and tools detected for a project."""

    languages: List[LanguageEntry] = field(default_factory=list)
    frameworks: List[TechEntry] = field(default_factory=list)
    tools: List[TechEntry] = field(default_factory=list)

    def names(self) -> List[str]:
        """Return every detected name, languages first, without duplicates."""
        seen: List[str] = []
        for entry in [*self.languages, *self.frameworks, *self.tools]:
            if entry.name not in seen:
                seen.append(entry.name)
        return seen

    def is_empty(self) -> bool:
        return not (self.languages or self.frameworks or self.tools)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "languages": [entry.to_dict() for entry in self.languages],
            "frameworks": [entry.to_dict() for entry in self.frameworks],
            "tools": [entry.to_dict() for entry in self.tools],
        }


@dataclass(frozen=True)
class QualityInsight:
    """Advisory message produced by the quality heuristics."""

    type: str
    message: str
    severity: Optional[str] = None

    def __post_init__(self) -> None:
        if self.type not in INSIGHT_TYPES:
            raise ValueError(f"Unknown insight type: {self.type}")
        if self.severity is not None and self.severity not in SEVERITIES:
            raise ValueError(f"Unknown insight severity: {self.severity}")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type}
        if self.severity is not None:
            data["severity"] = self.severity
        data["message"] = self.message
        return data


@dataclass
class AnalysisResult:
    """Outcome of one analysis pipeline run."""

    root: str
    structure: str
    tech_stack: TechStack
    code_quality: List[QualityInsight] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    manifest: Optional[Manifest] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": self.root,
            "structure": self.structure,
            "techStack": self.tech_stack.to_dict(),
            "codeQuality": [insight.to_dict() for insight in self.code_quality],
            "fileCount": len(self.files),
            "manifest": self.manifest.to_dict() if self.manifest is not None else None,
        }
