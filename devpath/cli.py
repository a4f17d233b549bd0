"""CLI entrypoints for devpath commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .aws import AWS_CATEGORIES, DEFAULT_SERVICE_LIMIT, DEPLOY_CATEGORY, AwsCatalog, recommend_services
from .config import RESOURCE_TYPES, ConfigError, DevPathConfig, load_config
from .explainer import ExplainError, explain_project, explain_project_file
from .logging import configure_logging
from .models import AnalysisResult
from .paths import PathNotFoundError, resolve_project_path
from .pipeline import ProjectAnalyzer
from .recommender import ResourceCatalog, get_recommendations
from .reporting import ReportRenderer, render_json


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError("must be zero or greater")
    return number


def _positive_int(value: str) -> int:
    number = _non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _add_project_arguments(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project directory (defaults to current directory).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=_non_negative_int,
        default=None,
        help="Maximum directory depth to scan (defaults to .devpath.yml or 3).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devpath",
        description="A developer learning assistant that analyzes projects and recommends resources.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Scan and summarize the tech stack and structure.",
    )
    _add_project_arguments(analyze_parser)
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the analysis result as JSON.",
    )

    recommend_parser = subparsers.add_parser(
        "recommend",
        help="Suggest tutorials, docs, or articles based on your project.",
    )
    _add_project_arguments(recommend_parser)
    recommend_parser.add_argument(
        "-t",
        "--type",
        choices=[*RESOURCE_TYPES, "all"],
        default=None,
        help="Type of recommendations (defaults to .devpath.yml or all).",
    )
    recommend_parser.add_argument(
        "-l",
        "--limit",
        type=_positive_int,
        default=None,
        help="Maximum number of recommendations per type.",
    )
    recommend_parser.add_argument(
        "--tech",
        default=None,
        help="Specific technology to get recommendations for.",
    )

    explain_parser = subparsers.add_parser(
        "explain",
        help="Break down the project or a single file and explain it simply.",
    )
    _add_project_arguments(explain_parser)
    explain_parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="Specific file to explain, relative to the project path.",
    )

    services_parser = subparsers.add_parser(
        "services",
        help="Recommend AWS services that fit your project.",
    )
    _add_project_arguments(services_parser)
    services_parser.add_argument(
        "-c",
        "--category",
        choices=AWS_CATEGORIES,
        default=None,
        help="Only show services in this category.",
    )
    services_parser.add_argument(
        "-l",
        "--limit",
        type=_positive_int,
        default=DEFAULT_SERVICE_LIMIT,
        help="Maximum number of services per category.",
    )
    services_parser.add_argument(
        "--deploy",
        action="store_true",
        help="Focus on deployment services (compute unless --category is given).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for devpath commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        root = resolve_project_path(args.path)
        config = load_config(Path(root))
    except PathNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    result = _analyze(root, config, args.depth)
    renderer = ReportRenderer()

    if args.command == "analyze":
        if args.json:
            print(render_json(result))
        else:
            print(renderer.render_analysis(result), end="")
    elif args.command == "recommend":
        kinds = config.recommend.types
        if args.type is not None:
            kinds = list(RESOURCE_TYPES) if args.type == "all" else [args.type]
        catalog = ResourceCatalog.load()
        recommendations = get_recommendations(
            result.tech_stack,
            catalog.lookup,
            types=kinds,
            limit=args.limit or config.recommend.limit,
            tech=args.tech,
        )
        print(renderer.render_recommendations(recommendations), end="")
    elif args.command == "explain":
        if args.file:
            try:
                explanation = explain_project_file(root, args.file, result.files)
            except ExplainError as exc:
                parser.exit(1, f"{exc}\n")
            heading = f"File: {args.file}"
        else:
            explanation = explain_project(result)
            heading = "Project Overview:"
        print(renderer.render_explanation(explanation, heading), end="")
    elif args.command == "services":
        category = args.category or (DEPLOY_CATEGORY if args.deploy else None)
        services = recommend_services(
            result.tech_stack,
            AwsCatalog.load(),
            category=category,
            limit=args.limit,
        )
        print(renderer.render_services(services, deploy=args.deploy), end="")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _analyze(root: str, config: DevPathConfig, depth: int | None) -> AnalysisResult:
    max_depth = depth if depth is not None else config.scan.max_depth
    analyzer = ProjectAnalyzer(skip_dirs=config.scan.skip_dirs, resolver=_resolved)
    return analyzer.analyze(root, max_depth)


def _resolved(path: str) -> str:
    return path


if __name__ == "__main__":
    main(sys.argv[1:])
