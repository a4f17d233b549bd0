"""Tests for devpath.explainer."""

from __future__ import annotations

from pathlib import Path

import pytest

from devpath.explainer import (
    ExplainError,
    complexity_level,
    explain_file,
    explain_project,
    explain_project_file,
    file_purpose,
    find_similar_files,
)
from devpath.models import AnalysisResult, LanguageEntry, QualityInsight, TechEntry, TechStack


def _result(**overrides: object) -> AnalysisResult:
    values = {
        "root": "/tmp/demo",
        "structure": "",
        "tech_stack": TechStack(
            languages=[LanguageEntry("JavaScript", ".js", 2)],
            frameworks=[TechEntry("Express", "4")],
            tools=[TechEntry("Jest"), TechEntry("ESLint")],
        ),
        "code_quality": [],
        "files": ["index.js", "src/app.js", "README.md"],
    }
    values.update(overrides)
    return AnalysisResult(**values)  # type: ignore[arg-type]


def test_explain_project_overview_names_the_stack() -> None:
    explanation = explain_project(_result())

    assert explanation.overview == (
        "This project is primarily written in JavaScript using Express. It uses tools like Jest, ESLint."
    )
    assert len(explanation.next_steps) == 4


def test_explain_project_without_detections() -> None:
    explanation = explain_project(_result(tech_stack=TechStack(), files=[]))

    assert explanation.overview == "This project is written in an unrecognized language without a detected framework."


def test_explain_project_details() -> None:
    insights = [
        QualityInsight("quality", "a", "medium"),
        QualityInsight("structure", "b", "medium"),
        QualityInsight("best-practice", "c", "low"),
    ]

    details = {detail.title: detail.description for detail in explain_project(_result(code_quality=insights)).details}

    assert details["Project Structure"] == "The project contains 3 files across 2 directories."
    assert details["Code Quality"] == "There are 3 code quality insights available (1 low, 2 medium)."


def test_explain_project_clean_quality() -> None:
    details = explain_project(_result(files=["a.js"])).details

    assert details[0].description == "The project contains 1 file across 1 directory."
    assert details[1].description == "No code quality issues were detected."


def test_explain_file_describes_react_component() -> None:
    content = "import React from 'react';\n\nexport default function App() {\n  return null;\n}\n"

    explanation = explain_file("src/App.jsx", content)

    assert explanation.overview.startswith('This is a React JSX file named "App.jsx".')
    assert "ES modules" in explanation.overview
    assert "React functional components" in explanation.overview
    details = {detail.title: detail.description for detail in explanation.details}
    assert details["Purpose"] == "This file is likely used for main application component."
    assert details["Complexity"] == "With 5 lines, this file is simple in complexity."


def test_explain_file_unknown_type() -> None:
    explanation = explain_file("bin/run.sh", "echo hi\n")

    assert explanation.overview == 'This is a generic file named "run.sh".'
    assert len(explanation.next_steps) == 2


@pytest.mark.parametrize(
    ("path", "file_type", "content", "expected"),
    [
        ("package.json", "JSON configuration", "", "dependency management and project configuration"),
        ("docs/readme.md", "Markdown", "", "documentation"),
        ("webpack.config.js", "JavaScript", "", "configuration"),
        ("db.js", "JavaScript", "mongoose.connect(url)", "database integration with MongoDB"),
        ("src/models/user.js", "JavaScript", "", "data modeling and schema definition"),
        ("src/components/Button.jsx", "React JSX", "", "UI components"),
        ("src/utils/format.js", "JavaScript", "", "utility functions"),
        ("src/app.test.js", "JavaScript", "", "testing"),
        ("styles/main.css", "CSS", "", "styling"),
        ("index.js", "JavaScript", "", "application logic"),
    ],
)
def test_file_purpose(path: str, file_type: str, content: str, expected: str) -> None:
    assert file_purpose(path, file_type, content) == expected


@pytest.mark.parametrize(
    ("lines", "expected"),
    [
        (0, "simple in complexity"),
        (29, "simple in complexity"),
        (30, "moderately complex"),
        (99, "moderately complex"),
        (100, "fairly complex"),
        (299, "fairly complex"),
        (300, "highly complex"),
    ],
)
def test_complexity_level(lines: int, expected: str) -> None:
    assert complexity_level(lines) == expected


def test_find_similar_files_matches_base_name() -> None:
    files = ["src/app.js", "test/myapp.js", "README.md"]

    assert find_similar_files(files, "lib/App.js") == ["src/app.js", "test/myapp.js"]
    assert find_similar_files(files, "") == []


def test_explain_project_file_reads_content(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "server.js").write_text("const x = () => 1;\n", encoding="utf-8")

    explanation = explain_project_file(str(tmp_path), "src/server.js", ["src/server.js"])

    assert 'named "server.js"' in explanation.overview
    assert "It defines one or more functions." in explanation.overview


def test_explain_project_file_missing_lists_similar(tmp_path: Path) -> None:
    with pytest.raises(ExplainError) as excinfo:
        explain_project_file(str(tmp_path), "app.js", ["src/app.js"])

    message = str(excinfo.value)
    assert message.startswith("Could not read file:")
    assert "Similar files found:\n- src/app.js" in message


def test_explain_project_file_missing_without_similar(tmp_path: Path) -> None:
    with pytest.raises(ExplainError, match="File not found"):
        explain_project_file(str(tmp_path), "ghost.js", ["index.js"])
