"""Discovery of codegen-enabled libraries across a project's dependencies."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

from .config import ROOT_PACKAGE_NAME, ConfigurationError, load_config
from .logging import get_logger
from .models import LibraryDescriptor
from .resolvers import DependencyResolver, ProjectConfigResolver
from .utils import PACKAGE_JSON, load_package_json

logger = get_logger("libraries")


def extract_libraries_from_json(
    config_file: Mapping[str, Any],
    dependency_name: str = ROOT_PACKAGE_NAME,
    dependency_path: str | os.PathLike[str] = ".",
    *,
    root_package_name: str = ROOT_PACKAGE_NAME,
) -> List[LibraryDescriptor]:
    """Return the codegen libraries a single package declares.

    The root framework package must declare ``codegenConfig``; every other
    package may omit it, in which case it contributes nothing. A
    ``codegenConfig`` without ``libraries`` describes one implicit library.
    When ``libraries`` is given, the root package additionally contributes an
    implicit library of its own ahead of the declared ones.

    The input mapping is never mutated; descriptor configs are copies.
    """
    library_path = os.fspath(dependency_path)
    is_root = dependency_name == root_package_name

    codegen_config = config_file.get("codegenConfig")
    if codegen_config is None:
        if is_root:
            raise ConfigurationError(
                f"Could not find codegen config for {dependency_name}"
            )
        return []
    if not isinstance(codegen_config, Mapping):
        raise ConfigurationError(
            f"codegenConfig of {dependency_name} must be a mapping"
        )

    logger.info("Found %s", dependency_name)

    libraries = codegen_config.get("libraries")
    if libraries is None:
        config = _implicit_library_config(dependency_name)
        config.update(codegen_config)
        return [LibraryDescriptor(config=config, library_path=library_path)]

    entries = _library_entries(libraries, dependency_name)
    if not entries:
        return []

    descriptors: List[LibraryDescriptor] = []
    if is_root:
        descriptors.append(
            LibraryDescriptor(
                config=_implicit_library_config(dependency_name),
                library_path=library_path,
            )
        )
    else:
        logger.warning(
            "%s declares codegenConfig.libraries; the libraries array is reserved "
            "for %s and support for it in other packages is deprecated. Declare a "
            "single codegenConfig per package instead.",
            dependency_name,
            root_package_name,
        )
    descriptors.extend(
        LibraryDescriptor(config=dict(entry), library_path=library_path)
        for entry in entries
    )
    return descriptors


def find_codegen_enabled_libraries(
    project_root: str | os.PathLike[str],
    *,
    framework_root: str | os.PathLike[str] | None = None,
    resolver: DependencyResolver | None = None,
    root_package_name: str | None = None,
    include_project_libraries: bool | None = None,
) -> List[LibraryDescriptor]:
    """Collect codegen libraries from the root framework and every dependency.

    Root framework libraries come first, followed by each dependency's
    libraries in the order the resolver declares them. Dependencies whose
    root or package.json is missing, unreadable or malformed are skipped, as
    is a dependency carrying the root framework's own name since the root
    was already collected. Settings not passed explicitly are taken from the
    project's .codegen.yml.
    """
    project_dir = os.path.abspath(os.fspath(project_root))
    config = load_config(Path(project_dir))

    root_name = root_package_name or config.framework.name
    if framework_root is None:
        framework_root = config.framework.root or Path(project_dir) / "node_modules" / root_name
    framework_dir = os.path.abspath(os.fspath(framework_root))
    if include_project_libraries is None:
        include_project_libraries = config.include_project_libraries

    logger.debug("Searching for codegen-enabled libraries in %s", framework_dir)
    libraries = extract_libraries_from_json(
        load_package_json(Path(framework_dir)),
        root_name,
        framework_dir,
        root_package_name=root_name,
    )

    resolver = resolver or ProjectConfigResolver()
    dependencies = resolver.resolve(Path(project_dir))
    logger.debug("Resolved %d dependencies for %s", len(dependencies), project_dir)
    for name, entry in dependencies.items():
        if name == root_name:
            logger.debug("Skipping %s; already collected as the root framework", name)
            continue
        libraries.extend(_dependency_libraries(name, entry, project_dir, root_name))

    if include_project_libraries:
        project_config = load_package_json(Path(project_dir))
        project_name = str(project_config.get("name") or os.path.basename(project_dir))
        if project_name != root_name:
            libraries.extend(
                extract_libraries_from_json(
                    project_config,
                    project_name,
                    project_dir,
                    root_package_name=root_name,
                )
            )

    return libraries


def _dependency_libraries(
    name: str,
    entry: Any,
    project_dir: str,
    root_name: str,
) -> List[LibraryDescriptor]:
    root = entry.get("root") if isinstance(entry, Mapping) else None
    if not root:
        logger.debug("Skipping %s; no root declared", name)
        return []
    if not isinstance(root, (str, os.PathLike)):
        logger.debug("Skipping %s; root %r is not a path", name, root)
        return []

    dependency_dir = os.path.normpath(os.path.join(project_dir, os.fspath(root)))
    if not os.path.isfile(os.path.join(dependency_dir, PACKAGE_JSON)):
        logger.debug("Skipping %s; no %s in %s", name, PACKAGE_JSON, dependency_dir)
        return []

    try:
        return extract_libraries_from_json(
            load_package_json(Path(dependency_dir)),
            name,
            dependency_dir,
            root_package_name=root_name,
        )
    except ConfigurationError as exc:
        logger.debug("Skipping %s; %s", name, exc)
        return []


def _implicit_library_config(name: str) -> Dict[str, Any]:
    return {"name": name, "type": "all", "jsSrcsDir": "."}


def _library_entries(libraries: Any, dependency_name: str) -> List[Mapping[str, Any]]:
    if isinstance(libraries, (str, bytes)) or not isinstance(libraries, Sequence):
        raise ConfigurationError(
            f"codegenConfig.libraries of {dependency_name} must be a list"
        )
    for entry in libraries:
        if not isinstance(entry, Mapping):
            raise ConfigurationError(
                f"codegenConfig.libraries of {dependency_name} must contain mappings"
            )
    return list(libraries)


__all__ = ["extract_libraries_from_json", "find_codegen_enabled_libraries"]
