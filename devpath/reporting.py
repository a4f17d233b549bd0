"""Terminal report rendering through Jinja templates."""

from __future__ import annotations

import json
from typing import Dict, List

from jinja2 import Environment, PackageLoader

from .aws import AWS_CATEGORIES, AwsService
from .explainer import Explanation
from .models import AnalysisResult
from .recommender import Resource


class ReportRenderer:
    """Renders analysis, recommendation, and explanation reports as text."""

    def __init__(self, env: Environment | None = None) -> None:
        self._env = env or create_environment()

    def render_analysis(self, result: AnalysisResult) -> str:
        stack = result.tech_stack
        categories = [
            ("Languages", stack.languages),
            ("Frameworks", stack.frameworks),
            ("Tools", stack.tools),
        ]
        return self._render("analysis.j2", result=result, categories=categories)

    def render_recommendations(self, recommendations: Dict[str, List[Resource]]) -> str:
        return self._render("recommendations.j2", recommendations=recommendations)

    def render_services(self, recommendations: Dict[str, List[AwsService]], *, deploy: bool = False) -> str:
        return self._render(
            "services.j2",
            recommendations=recommendations,
            deploy=deploy,
            categories=AWS_CATEGORIES,
        )

    def render_explanation(self, explanation: Explanation, heading: str = "Project Overview:") -> str:
        return self._render("explanation.j2", explanation=explanation, heading=heading)

    def _render(self, template_name: str, **context: object) -> str:
        template = self._env.get_template(template_name)
        return template.render(**context).rstrip() + "\n"


def create_environment() -> Environment:
    return Environment(
        loader=PackageLoader("devpath", "templates"),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_json(result: AnalysisResult) -> str:
    return json.dumps(result.to_dict(), indent=2)


__all__ = ["ReportRenderer", "create_environment", "render_json"]
