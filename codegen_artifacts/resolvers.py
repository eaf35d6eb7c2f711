"""Dependency resolvers mapping declared dependencies to package roots."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping

from .config import load_config
from .utils import load_package_json

DependencyMap = Dict[str, Dict[str, Any]]


class DependencyResolver(ABC):
    """Contract for collaborators that produce a project's dependency map."""

    @abstractmethod
    def resolve(self, project_root: Path) -> DependencyMap:
        """Return `{name: {"root": path}}` in declaration order."""


class ProjectConfigResolver(DependencyResolver):
    """Reads the `dependencies` mapping from the project's .codegen.yml."""

    def resolve(self, project_root: Path) -> DependencyMap:
        return load_config(Path(project_root)).dependencies


class NodeModulesResolver(DependencyResolver):
    """Resolves package.json dependencies to their node_modules directories."""

    def __init__(self, modules_dir: str = "node_modules") -> None:
        self.modules_dir = modules_dir

    def resolve(self, project_root: Path) -> DependencyMap:
        root = Path(project_root)
        declared = load_package_json(root).get("dependencies")
        if not isinstance(declared, dict):
            return {}
        return {
            name: {"root": str(root / self.modules_dir / name)}
            for name in declared
        }


class StaticResolver(DependencyResolver):
    """Returns a fixed dependency map regardless of the project root."""

    def __init__(self, dependencies: Mapping[str, Mapping[str, Any]]) -> None:
        self._dependencies = {name: dict(entry) for name, entry in dependencies.items()}

    def resolve(self, project_root: Path) -> DependencyMap:
        return {name: dict(entry) for name, entry in self._dependencies.items()}


__all__ = [
    "DependencyMap",
    "DependencyResolver",
    "NodeModulesResolver",
    "ProjectConfigResolver",
    "StaticResolver",
]
