"""Learning resource recommendations keyed off detected technologies."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Sequence

import yaml

from .config import RESOURCE_TYPES
from .logging import get_logger
from .models import TechStack

_DEFAULT_CATALOG = Path(__file__).with_name("data") / "resources.yml"
_KEY_CLEANUP = re.compile(r"[^a-z0-9.-]")

_ALIASES = {
    "js": "javascript",
    "node": "nodejs",
    "node.js": "nodejs",
    "reactjs": "react",
    "react.js": "react",
    "expressjs": "express",
    "express.js": "express",
    "vue.js": "vue",
    "vuejs": "vue",
    "py": "python",
    "html5": "html",
    "css3": "css",
    "ts": "typescript",
    "awscdk": "aws-cdk",
}


@dataclass(frozen=True)
class Resource:
    """A single learning resource."""

    title: str
    description: str
    url: str
    difficulty: str = "Not specified"

    def to_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "difficulty": self.difficulty,
        }


ResourceLookup = Callable[[str, str], List[Resource]]


def normalize_tech_key(name: str) -> str:
    """Normalize a technology display name into a catalog key."""
    key = _KEY_CLEANUP.sub("", name.lower())
    return _ALIASES.get(key, key)


class ResourceCatalog:
    """Immutable technology -> resource-type -> resources table."""

    def __init__(self, entries: Mapping[str, Mapping[str, Sequence[Resource]]]) -> None:
        self._entries: Dict[str, Dict[str, tuple[Resource, ...]]] = {
            key: {kind: tuple(resources) for kind, resources in kinds.items()}
            for key, kinds in entries.items()
        }

    @classmethod
    def load(cls, path: Path | None = None) -> "ResourceCatalog":
        """Load a catalog from YAML, defaulting to the bundled resources."""
        catalog_path = path or _DEFAULT_CATALOG
        data = yaml.safe_load(catalog_path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{catalog_path.name} must contain a mapping at the root")

        entries: Dict[str, Dict[str, List[Resource]]] = {}
        for key, kinds in data.items():
            if not isinstance(kinds, dict):
                continue
            entries[str(key)] = {
                str(kind): [_parse_resource(item) for item in items or [] if isinstance(item, dict)]
                for kind, items in kinds.items()
            }
        return cls(entries)

    def technologies(self) -> List[str]:
        return list(self._entries)

    def lookup(self, name: str, kind: str) -> List[Resource]:
        """Return resources of ``kind`` for ``name``, trying exact then partial keys."""
        key = normalize_tech_key(name)
        if not key:
            return []
        if key in self._entries:
            return list(self._entries[key].get(kind, ()))
        for candidate, kinds in self._entries.items():
            if candidate in key and kind in kinds:
                return list(kinds[kind])
        return []


def get_recommendations(
    tech_stack: TechStack,
    lookup: ResourceLookup,
    *,
    types: Iterable[str] = RESOURCE_TYPES,
    limit: int = 5,
    tech: str | None = None,
    logger: logging.Logger | None = None,
) -> Dict[str, List[Resource]]:
    """Collect up to ``limit`` resources per type for the detected technologies."""
    logger = logger or get_logger("recommender")
    kinds = list(types)
    unknown = [kind for kind in kinds if kind not in RESOURCE_TYPES]
    if unknown:
        raise ValueError(f"Unknown resource types requested: {', '.join(unknown)}")
    if limit < 1:
        raise ValueError("limit must be at least 1")

    names = select_technologies(tech_stack, tech)
    logger.debug("Fetching recommendations for %s", ", ".join(names) or "nothing")

    recommendations: Dict[str, List[Resource]] = {kind: [] for kind in kinds}
    for kind in kinds:
        seen: set[str] = set()
        for name in names:
            for resource in lookup(name, kind):
                if resource.url in seen:
                    continue
                seen.add(resource.url)
                recommendations[kind].append(resource)
        recommendations[kind] = recommendations[kind][:limit]
    return recommendations


def select_technologies(tech_stack: TechStack, tech: str | None = None) -> List[str]:
    """Return the technology names to look up, optionally filtered by ``tech``."""
    names = tech_stack.names()
    if not tech:
        return names
    needle = tech.lower()
    matches = [name for name in names if needle in name.lower()]
    return matches or [tech]


def _parse_resource(item: Mapping[str, object]) -> Resource:
    return Resource(
        title=str(item.get("title", "")),
        description=str(item.get("description", "")),
        url=str(item.get("url", "")),
        difficulty=str(item.get("difficulty") or "Not specified"),
    )


__all__ = [
    "Resource",
    "ResourceCatalog",
    "ResourceLookup",
    "get_recommendations",
    "normalize_tech_key",
    "select_technologies",
]
