"""AWS service suggestions derived from a detected tech stack."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, List, Mapping, Sequence, Tuple

import yaml

from .logging import get_logger
from .models import TechStack

AWS_CATEGORIES = (
    "compute",
    "storage",
    "database",
    "networking",
    "devtools",
    "security",
    "integration",
    "analytics",
    "aiml",
    "management",
)
DEPLOY_CATEGORY = "compute"
DEFAULT_SERVICE_LIMIT = 3

_DEFAULT_CATALOG = Path(__file__).with_name("data") / "aws_services.yml"

# Characteristic -> lower-cased framework names that imply it.
_FRAMEWORK_SIGNALS: Dict[str, FrozenSet[str]] = {
    "web-app": frozenset({"react", "vue.js", "angular", "next.js", "gatsby"}),
    "backend-api": frozenset({"express", "nestjs", "koa", "fastify"}),
    "full-stack": frozenset({"next.js", "nuxt.js", "sapper"}),
    "static-site": frozenset({"gatsby", "eleventy", "jekyll"}),
    "infra-as-code": frozenset({"aws cdk", "terraform", "cloudformation"}),
}

# Characteristic -> lower-cased tool names that imply it.
_TOOL_SIGNALS: Dict[str, FrozenSet[str]] = {
    "database": frozenset({"sequelize", "mongoose", "typeorm", "prisma"}),
    "containerized": frozenset({"docker", "kubernetes", "docker-compose"}),
    "ci-cd": frozenset({"jenkins", "travis", "circleci", "github actions"}),
    "authentication": frozenset({"passport", "auth0", "jwt", "oauth"}),
    "file-storage": frozenset({"multer", "aws-sdk", "firebase-storage"}),
    "ai": frozenset({"tensorflow", "pytorch", "scikit-learn", "huggingface"}),
    "devops": frozenset({"terraform", "ansible", "puppet", "chef"}),
}

_SERVERLESS_MARKERS = ("serverless", "lambda", "netlify", "vercel")


@dataclass(frozen=True)
class AwsService:
    """An AWS service and the project characteristics that call for it."""

    name: str
    description: str
    url: str
    use_case: str = "General purpose"
    when: Tuple[str, ...] = ()

    def applies_to(self, characteristics: FrozenSet[str]) -> bool:
        """Services without conditions apply to every project."""
        return not self.when or any(item in characteristics for item in self.when)

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "useCase": self.use_case,
        }


def identify_characteristics(tech_stack: TechStack) -> FrozenSet[str]:
    """Return the deployment-relevant characteristics evidenced by ``tech_stack``."""
    frameworks = {entry.name.lower() for entry in tech_stack.frameworks}
    tools = {entry.name.lower() for entry in tech_stack.tools}

    found = {name for name, signals in _FRAMEWORK_SIGNALS.items() if frameworks & signals}
    found.update(name for name, signals in _TOOL_SIGNALS.items() if tools & signals)
    if any(marker in tool for tool in tools for marker in _SERVERLESS_MARKERS):
        found.add("serverless")
    return frozenset(found)


class AwsCatalog:
    """Category -> ordered AWS services table."""

    def __init__(self, entries: Mapping[str, Sequence[AwsService]]) -> None:
        self._entries: Dict[str, Tuple[AwsService, ...]] = {
            category: tuple(services) for category, services in entries.items()
        }

    @classmethod
    def load(cls, path: Path | None = None) -> "AwsCatalog":
        catalog_path = path or _DEFAULT_CATALOG
        data = yaml.safe_load(catalog_path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{catalog_path.name} must contain a mapping at the root")

        entries: Dict[str, List[AwsService]] = {}
        for category, items in data.items():
            if not isinstance(items, list):
                continue
            entries[str(category)] = [_parse_service(item) for item in items if isinstance(item, dict)]
        return cls(entries)

    def categories(self) -> List[str]:
        return list(self._entries)

    def services(self, category: str) -> List[AwsService]:
        return list(self._entries.get(category, ()))


def recommend_services(
    tech_stack: TechStack,
    catalog: AwsCatalog,
    *,
    category: str | None = None,
    limit: int = DEFAULT_SERVICE_LIMIT,
    logger: logging.Logger | None = None,
) -> Dict[str, List[AwsService]]:
    """Suggest up to ``limit`` services per category, omitting empty categories.

    Raises ``ValueError`` for an unknown ``category`` or a ``limit`` below 1.
    """
    logger = logger or get_logger("aws")
    if category is not None and category not in AWS_CATEGORIES:
        raise ValueError(f"Unknown AWS service category: {category}")
    if limit < 1:
        raise ValueError("limit must be at least 1")

    characteristics = identify_characteristics(tech_stack)
    logger.debug("Project characteristics: %s", ", ".join(sorted(characteristics)) or "none")

    categories = [category] if category else catalog.categories()
    recommendations: Dict[str, List[AwsService]] = {}
    for name in categories:
        matches = [service for service in catalog.services(name) if service.applies_to(characteristics)]
        if matches:
            recommendations[name] = matches[:limit]
    return recommendations


def _parse_service(item: Mapping[str, object]) -> AwsService:
    when = item.get("when") or ()
    if isinstance(when, str):
        when = (when,)
    return AwsService(
        name=str(item.get("name", "")),
        description=str(item.get("description", "")),
        url=str(item.get("url", "")),
        use_case=str(item.get("use_case") or "General purpose"),
        when=tuple(str(value) for value in when),  # type: ignore[union-attr]
    )


__all__ = [
    "AWS_CATEGORIES",
    "AwsCatalog",
    "AwsService",
    "DEFAULT_SERVICE_LIMIT",
    "DEPLOY_CATEGORY",
    "identify_characteristics",
    "recommend_services",
]
