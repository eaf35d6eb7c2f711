"""CLI entrypoints for codegen-artifacts commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .cleanup import cleanup_empty_files_and_folders
from .config import ConfigurationError
from .libraries import find_codegen_enabled_libraries
from .logging import configure_logging
from .resolvers import NodeModulesResolver, ProjectConfigResolver


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


def _add_log_file_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records (with timestamps) to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codegen-artifacts",
        description="Find codegen-enabled libraries and clean generated output.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    find_parser = subparsers.add_parser(
        "find",
        help="List codegen-enabled libraries of a project as JSON.",
    )
    _add_verbose_option(find_parser, suppress_default=True)
    _add_log_file_option(find_parser)
    find_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    find_parser.add_argument(
        "--framework-root",
        default=None,
        help="Directory of the root framework package (defaults to node_modules/<name>).",
    )
    find_parser.add_argument(
        "--node-modules",
        action="store_true",
        help="Resolve dependencies from package.json and node_modules instead of .codegen.yml.",
    )
    find_parser.add_argument(
        "--include-project",
        action="store_true",
        default=None,
        help="Also report libraries declared by the project's own package.json.",
    )

    cleanup_parser = subparsers.add_parser(
        "cleanup",
        help="Delete empty files and folders under a generated output directory.",
    )
    _add_verbose_option(cleanup_parser, suppress_default=True)
    _add_log_file_option(cleanup_parser)
    cleanup_parser.add_argument("path", help="File or directory to clean up.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for codegen-artifacts commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "find":
        resolver = NodeModulesResolver() if args.node_modules else ProjectConfigResolver()
        try:
            libraries = find_codegen_enabled_libraries(
                args.path,
                framework_root=args.framework_root,
                resolver=resolver,
                include_project_libraries=args.include_project,
            )
        except ConfigurationError as exc:
            parser.exit(1, f"codegen-artifacts find failed: {exc}\n")
        print(json.dumps([library.to_dict() for library in libraries], indent=2))
    elif args.command == "cleanup":
        try:
            cleanup_empty_files_and_folders(args.path)
        except OSError as exc:
            parser.exit(1, f"codegen-artifacts cleanup failed: {exc}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
