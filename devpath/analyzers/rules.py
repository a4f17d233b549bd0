"""Static detection tables for frameworks and tools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MATCH_SUFFIX = "suffix"
MATCH_CONTAINS = "contains"


@dataclass(frozen=True)
class DependencyRule:
    """Emit ``name`` when any candidate key appears in the manifest dependencies."""

    name: str
    candidates: Tuple[str, ...]


@dataclass(frozen=True)
class PatternRule:
    """Emit ``name`` when a scanned path matches ``pattern``."""

    pattern: str
    name: str
    match: str = MATCH_SUFFIX

    def matches(self, path: str) -> bool:
        if self.match == MATCH_CONTAINS:
            return self.pattern in path
        return path.endswith(self.pattern)


FRAMEWORK_DEPENDENCIES: Tuple[DependencyRule, ...] = (
    DependencyRule("React", ("react", "react-dom")),
    DependencyRule("Angular", ("@angular/core",)),
    DependencyRule("Vue.js", ("vue",)),
    DependencyRule("Express", ("express",)),
    DependencyRule("Next.js", ("next",)),
    DependencyRule("Gatsby", ("gatsby",)),
    DependencyRule("NestJS", ("@nestjs/core",)),
    DependencyRule("Svelte", ("svelte",)),
    DependencyRule("Electron", ("electron",)),
    DependencyRule("AWS CDK", ("aws-cdk-lib",)),
)

FRAMEWORK_PATTERNS: Tuple[PatternRule, ...] = (
    PatternRule("angular.json", "Angular"),
    PatternRule("vue.config.js", "Vue.js"),
    PatternRule("next.config.js", "Next.js"),
    PatternRule("gatsby-config.js", "Gatsby"),
    PatternRule("svelte.config.js", "Svelte"),
    PatternRule("electron-builder.yml", "Electron"),
    PatternRule("cdk.json", "AWS CDK"),
    PatternRule(".jsx", "React"),
    PatternRule(".tsx", "React"),
)

TOOL_DEPENDENCIES: Tuple[DependencyRule, ...] = (
    DependencyRule("Webpack", ("webpack",)),
    DependencyRule("Babel", ("@babel/core",)),
    DependencyRule("ESLint", ("eslint",)),
    DependencyRule("TSLint", ("tslint",)),
    DependencyRule("Jest", ("jest",)),
    DependencyRule("Mocha", ("mocha",)),
    DependencyRule("Jasmine", ("jasmine", "jasmine-core")),
    DependencyRule("Vitest", ("vitest",)),
    DependencyRule("Chai", ("chai",)),
    DependencyRule("TypeScript", ("typescript",)),
    DependencyRule("Prettier", ("prettier",)),
    DependencyRule("Sass", ("sass", "node-sass")),
    DependencyRule("Lodash", ("lodash",)),
    DependencyRule("Axios", ("axios",)),
    DependencyRule("Redux", ("redux",)),
    DependencyRule("GraphQL", ("graphql",)),
    DependencyRule("Sequelize", ("sequelize",)),
    DependencyRule("Mongoose", ("mongoose",)),
    DependencyRule("Commander.js", ("commander",)),
    DependencyRule("dotenv", ("dotenv",)),
)

TOOL_PATTERNS: Tuple[PatternRule, ...] = (
    PatternRule(".eslintrc", "ESLint", MATCH_CONTAINS),
    PatternRule("eslint.config.js", "ESLint", MATCH_CONTAINS),
    PatternRule("tslint.json", "TSLint", MATCH_CONTAINS),
    PatternRule(".prettierrc", "Prettier", MATCH_CONTAINS),
    PatternRule("webpack.config.js", "Webpack", MATCH_CONTAINS),
    PatternRule("babel.config.js", "Babel", MATCH_CONTAINS),
    PatternRule("jest.config.js", "Jest", MATCH_CONTAINS),
    PatternRule("vitest.config", "Vitest", MATCH_CONTAINS),
    PatternRule("tsconfig.json", "TypeScript", MATCH_CONTAINS),
    PatternRule(".env", "dotenv", MATCH_CONTAINS),
)

LINT_TOOLS = frozenset({"ESLint", "TSLint"})
TEST_FRAMEWORKS = frozenset({"Jest", "Mocha", "Jasmine", "Vitest"})
ENV_LOADER_TOOL = "dotenv"

__all__ = [
    "DependencyRule",
    "ENV_LOADER_TOOL",
    "FRAMEWORK_DEPENDENCIES",
    "FRAMEWORK_PATTERNS",
    "LINT_TOOLS",
    "MATCH_CONTAINS",
    "MATCH_SUFFIX",
    "PatternRule",
    "TEST_FRAMEWORKS",
    "TOOL_DEPENDENCIES",
    "TOOL_PATTERNS",
]
