"""Developer learning assistant that analyzes a project's tech stack."""

from .models import AnalysisResult, LanguageEntry, Manifest, QualityInsight, TechEntry, TechStack
from .paths import PathNotFoundError
from .pipeline import ProjectAnalyzer, analyze_project

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "LanguageEntry",
    "Manifest",
    "PathNotFoundError",
    "ProjectAnalyzer",
    "QualityInsight",
    "TechEntry",
    "TechStack",
    "analyze_project",
]
