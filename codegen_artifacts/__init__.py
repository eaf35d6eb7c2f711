"""Discovery of codegen-enabled libraries and cleanup of generated output."""

from .cleanup import cleanup_empty_files_and_folders
from .config import ROOT_PACKAGE_NAME, CodegenConfig, ConfigurationError, load_config
from .libraries import extract_libraries_from_json, find_codegen_enabled_libraries
from .models import LibraryDescriptor
from .resolvers import (
    DependencyResolver,
    NodeModulesResolver,
    ProjectConfigResolver,
    StaticResolver,
)

__all__ = [
    "ROOT_PACKAGE_NAME",
    "CodegenConfig",
    "ConfigurationError",
    "DependencyResolver",
    "LibraryDescriptor",
    "NodeModulesResolver",
    "ProjectConfigResolver",
    "StaticResolver",
    "cleanup_empty_files_and_folders",
    "extract_libraries_from_json",
    "find_codegen_enabled_libraries",
    "load_config",
]
