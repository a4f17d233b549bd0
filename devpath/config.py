"""Configuration loading for devpath (.devpath.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .scanner import DEFAULT_MAX_DEPTH

CONFIG_FILENAME = ".devpath.yml"
RESOURCE_TYPES = ("tutorials", "documentation", "articles")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ScanConfig:
    """Directory scan settings."""

    max_depth: int = DEFAULT_MAX_DEPTH
    skip_dirs: List[str] = field(default_factory=list)


@dataclass
class RecommendConfig:
    """Learning resource recommendation settings."""

    limit: int = 5
    types: List[str] = field(default_factory=lambda: list(RESOURCE_TYPES))


@dataclass
class DevPathConfig:
    """Represents the settings defined in .devpath.yml."""

    root: Path
    scan: ScanConfig = field(default_factory=ScanConfig)
    recommend: RecommendConfig = field(default_factory=RecommendConfig)


def load_config(config_path: Path) -> DevPathConfig:
    """Load configuration from a project directory or config file path."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DevPathConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    scan = ScanConfig()
    scan_data = _as_dict(data.get("scan"))
    if scan_data:
        max_depth = _as_int(scan_data.get("max_depth"))
        if max_depth is not None and max_depth >= 0:
            scan.max_depth = max_depth
        scan.skip_dirs = _as_str_list(scan_data.get("skip_dirs"))

    recommend = RecommendConfig()
    recommend_data = _as_dict(data.get("recommend"))
    if recommend_data:
        limit = _as_int(recommend_data.get("limit"))
        if limit is not None and limit > 0:
            recommend.limit = limit
        types = [kind for kind in _as_str_list(recommend_data.get("types")) if kind in RESOURCE_TYPES]
        if types:
            recommend.types = types

    return DevPathConfig(root=root, scan=scan, recommend=recommend)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float)) and not isinstance(item, bool)]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DevPathConfig",
    "RESOURCE_TYPES",
    "RecommendConfig",
    "ScanConfig",
    "load_config",
]
