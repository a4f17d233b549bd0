"""CLI parser and command behaviour tests."""

from __future__ import annotations

import json
from typing import Iterator

import pytest

from devpath import paths
from devpath.cli import _build_parser, main
from devpath.logging import reset_logging
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    yield
    reset_logging()


@pytest.fixture
def express_project(project_builder: ProjectBuilder) -> ProjectBuilder:
    project_builder.write_package_json({"dependencies": {"express": "^4.18.0"}})
    project_builder.write(
        {
            "index.js": "const app = require('express')();\napp.listen(3000);\n",
            "src/routes/users.js": "module.exports = [];\n",
            "README.md": "# Demo\n",
        }
    )
    return project_builder


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "analyze"])
    assert args.verbose is True
    assert args.command == "analyze"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["analyze", "-v"])
    assert args.verbose is True
    assert args.command == "analyze"


def test_cli_defaults() -> None:
    args = _build_parser().parse_args(["recommend"])
    assert args.verbose is False
    assert args.path == "."
    assert args.depth is None
    assert args.type is None
    assert args.limit is None
    assert args.log_file is None


def test_cli_parses_recommend_options() -> None:
    args = _build_parser().parse_args(
        ["recommend", "proj", "-t", "documentation", "-l", "2", "--tech", "react", "-d", "1"]
    )
    assert (args.path, args.type, args.limit, args.tech, args.depth) == ("proj", "documentation", 2, "react", 1)


@pytest.mark.parametrize(
    "argv",
    [
        ["analyze", "-d", "-1"],
        ["analyze", "-d", "deep"],
        ["recommend", "-l", "0"],
        ["recommend", "-t", "videos"],
        [],
    ],
)
def test_cli_rejects_invalid_arguments(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _build_parser().parse_args(argv)
    assert excinfo.value.code == 2


def test_analyze_prints_summary(express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    main(["analyze", str(express_project.path())])

    out = capsys.readouterr().out
    assert out.startswith("Project Analysis Summary\n")
    assert "    - Express (^4.18.0)" in out
    assert "src/routes/:" in out


def test_analyze_json_output(express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    main(["analyze", str(express_project.path()), "--json"])

    data = json.loads(capsys.readouterr().out)
    assert data["fileCount"] == 4
    assert data["techStack"]["frameworks"] == [{"name": "Express", "version": "^4.18.0"}]


def test_analyze_respects_depth_option(express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    main(["analyze", str(express_project.path()), "--json", "-d", "0"])

    assert json.loads(capsys.readouterr().out)["fileCount"] == 3


def test_analyze_reads_project_config(express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    express_project.write({".devpath.yml": "scan:\n  skip_dirs: [src]\n"})

    main(["analyze", str(express_project.path()), "--json"])

    assert json.loads(capsys.readouterr().out)["fileCount"] == 4


def test_missing_project_exits_with_guidance(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", str(tmp_path / "missing")])

    assert excinfo.value.code == 1
    assert "Cannot access directory" in capsys.readouterr().err


def test_invalid_config_exits(express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    express_project.write({".devpath.yml": "scan: [oops\n"})

    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", str(express_project.path())])

    assert excinfo.value.code == 1
    assert ".devpath.yml" in capsys.readouterr().err


def test_recommend_filters_by_type(express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    main(["recommend", str(express_project.path()), "-t", "documentation", "-l", "1"])

    out = capsys.readouterr().out
    assert out.startswith("Learning Recommendations\n")
    assert "Documentation:" in out
    assert "Tutorials:" not in out
    assert "  2. " not in out


def test_explain_project(express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    main(["explain", str(express_project.path())])

    out = capsys.readouterr().out
    assert "Project Overview:" in out
    assert "using Express" in out


def test_explain_file(express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    main(["explain", str(express_project.path()), "-f", "index.js"])

    out = capsys.readouterr().out
    assert "File: index.js" in out
    assert 'named "index.js"' in out


def test_explain_missing_file_suggests_alternatives(
    express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["explain", str(express_project.path()), "-f", "users.js"])

    assert excinfo.value.code == 1
    assert "- src/routes/users.js" in capsys.readouterr().err


def test_log_file_option(express_project: ProjectBuilder, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    log_file = tmp_path / "devpath.log"

    main(["--log-file", str(log_file), "analyze", str(express_project.path())])
    reset_logging()

    assert "Analyzing project at" in log_file.read_text(encoding="utf-8")


def test_services_lists_matching_aws_services(
    express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["services", str(express_project.path())])

    out = capsys.readouterr().out
    assert out.startswith("AWS Recommendations\n")
    assert "  1. AWS Elastic Beanstalk" in out
    assert "Networking:" in out
    assert "Management:" in out


def test_services_deploy_focuses_on_compute(
    express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["services", str(express_project.path()), "--deploy"])

    out = capsys.readouterr().out
    assert out.startswith("AWS Deployment Recommendations\n")
    assert "Compute:" in out
    assert "Networking:" not in out


def test_services_reports_empty_category(
    express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["services", str(express_project.path()), "-c", "aiml"])

    assert "No AWS service recommendations found" in capsys.readouterr().out


def test_cli_parses_services_options() -> None:
    args = _build_parser().parse_args(["services", "-c", "database", "-l", "1", "--deploy"])
    assert (args.category, args.limit, args.deploy) == ("database", 1, True)

    defaults = _build_parser().parse_args(["services"])
    assert (defaults.category, defaults.limit, defaults.deploy) == (None, 3, False)


@pytest.mark.parametrize(
    "content",
    [b"scan:\n  max_depth: \xff\xfe\n", None],
    ids=["undecodable", "directory"],
)
def test_unreadable_config_exits(
    express_project: ProjectBuilder, capsys: pytest.CaptureFixture[str], content: bytes | None
) -> None:
    config_path = express_project.path() / ".devpath.yml"
    if content is None:
        config_path.mkdir()
    else:
        config_path.write_bytes(content)

    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", str(express_project.path())])

    assert excinfo.value.code == 1
    assert "Failed to read .devpath.yml" in capsys.readouterr().err


def test_project_path_is_converted_once(
    express_project: ProjectBuilder, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    calls = []
    real_convert = paths.convert_path

    def _counting_convert(path: str, host: str) -> str:
        calls.append(path)
        return real_convert(path, host)

    monkeypatch.setattr(paths, "convert_path", _counting_convert)

    main(["analyze", str(express_project.path()), "--json"])

    assert calls == [str(express_project.path())]
    assert json.loads(capsys.readouterr().out)["fileCount"] == 4
