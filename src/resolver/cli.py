"""
Command-line entry point.

Usage:
    resolve-imports <root_path> <entry_file> [--include-manifest] [--with-mtimes]

Prints a JSON array of absolute file paths on stdout.  A missing or
unrecognized entry prints `[]`; missing arguments exit non-zero with a
diagnostic on stderr and nothing on stdout.
"""

import argparse
import sys

from dotenv import load_dotenv

from src.resolver.config import ResolverSettings
from src.resolver.emitter import collect_source_files, emit, emit_source_files
from src.resolver.paths import resolve_entry
from src.resolver.walker import GraphWalker
from src.shared.exceptions import ArgumentError, EntryNotFound
from src.shared.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resolve-imports",
        description="List the project files a module or document depends on.",
    )
    parser.add_argument("root_path", help="project root directory")
    parser.add_argument("entry_file", help="entry file, absolute or relative to the root")
    parser.add_argument(
        "--include-manifest",
        action="store_true",
        help="also list <root>/package.json when it exists",
    )
    parser.add_argument(
        "--with-mtimes",
        action="store_true",
        help="emit {path, modified} objects instead of plain paths",
    )
    parser.add_argument("--log-level", default=None, help="override RESOLVER_LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    load_dotenv()
    settings = ResolverSettings()
    logger = setup_logging(settings.tool_name, level=args.log_level or settings.log_level)

    try:
        root, entry = resolve_entry(args.root_path, args.entry_file, settings)
    except ArgumentError as e:
        print(f"Missing arguments: resolve-imports <root> <file> ({e})", file=sys.stderr)
        return 1
    except EntryNotFound as e:
        logger.info("Nothing to resolve: %s", e)
        root, paths = None, set()
    else:
        paths = GraphWalker(root, settings).walk(entry)

    if args.with_mtimes:
        files = collect_source_files(paths, root, args.include_manifest) if root else []
        emit_source_files(files)
    elif args.include_manifest and root:
        emit(f.path for f in collect_source_files(paths, root, include_manifest=True))
    else:
        emit(paths)
    return 0


if __name__ == "__main__":
    sys.exit(main())
