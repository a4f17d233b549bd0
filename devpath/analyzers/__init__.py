"""Tech stack classification, quality heuristics, and structure summaries."""

from __future__ import annotations

from .classifier import classify, detect_entries
from .languages import LANGUAGE_BY_EXTENSION, detect_languages
from .quality import assess_quality
from .structure import summarize

__all__ = [
    "LANGUAGE_BY_EXTENSION",
    "assess_quality",
    "classify",
    "detect_entries",
    "detect_languages",
    "summarize",
]
