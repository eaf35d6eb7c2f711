"""Configuration loading for codegen-artifacts (.codegen.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

ROOT_PACKAGE_NAME = "react-native"
CONFIG_FILENAME = ".codegen.yml"


class ConfigurationError(RuntimeError):
    """Raised when codegen configuration is missing or cannot be parsed."""


@dataclass
class FrameworkConfig:
    """Location of the root framework package."""

    name: str = ROOT_PACKAGE_NAME
    root: Optional[Path] = None


@dataclass
class CodegenConfig:
    """Represents the settings defined in .codegen.yml."""

    root: Path
    framework: FrameworkConfig = field(default_factory=FrameworkConfig)
    dependencies: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    include_project_libraries: bool = False


def load_config(config_path: Path) -> CodegenConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CodegenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    framework = FrameworkConfig()
    framework_data = _as_dict(data.get("framework"))
    if framework_data:
        framework.name = _as_str(framework_data.get("name")) or ROOT_PACKAGE_NAME
        root_str = _as_str(framework_data.get("root"))
        framework.root = Path(os.path.normpath(root / root_str)) if root_str else None

    dependencies: Dict[str, Dict[str, Any]] = {}
    for name, entry in _as_dict(data.get("dependencies")).items():
        if isinstance(entry, dict):
            dependencies[str(name)] = dict(entry)
        elif isinstance(entry, str):
            # shorthand: `name: path/to/root`
            dependencies[str(name)] = {"root": entry}
        else:
            dependencies[str(name)] = {}

    return CodegenConfig(
        root=root,
        framework=framework,
        dependencies=dependencies,
        include_project_libraries=_as_bool(data.get("include_project_libraries")) or False,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None
