"""
Path Resolver

Normalizes the entry argument to an absolute path and validates it
before any traversal starts.
"""

import logging
import os

from src.resolver.config import ResolverSettings
from src.resolver.models import classify, is_vendored, to_posix
from src.shared.exceptions import ArgumentError, EntryNotFound, UnrecognizedExtension

logger = logging.getLogger("import-resolver.paths")


def resolve_entry(
    root: str,
    entry: str,
    settings: ResolverSettings,
) -> tuple[str, str]:
    """
    Make root and entry absolute and check the entry can be resolved.

    Args:
        root: Project root, absolute or relative to the working directory.
        entry: Entry file, absolute or relative to root.
        settings: Resolver settings (recognized extensions).

    Returns:
        (absolute root, absolute entry) as posix strings.

    Raises:
        ArgumentError: root or entry is empty.
        EntryNotFound: the entry does not exist or lies outside the sources.
        UnrecognizedExtension: the entry is neither a module nor a document.
    """
    if not root or not root.strip():
        raise ArgumentError("Missing root path")
    if not entry or not entry.strip():
        raise ArgumentError("Missing entry file")

    root_abs = to_posix(os.path.abspath(root))
    entry_abs = entry if os.path.isabs(entry) else os.path.join(root_abs, entry)
    entry_abs = to_posix(entry_abs)

    if not os.path.isfile(entry_abs):
        raise EntryNotFound(f"Entry file not found: {entry_abs}")

    rel_entry = os.path.relpath(entry_abs, root_abs).replace("\\", "/")
    if rel_entry.startswith("../") or is_vendored(rel_entry, settings):
        raise EntryNotFound(f"Entry file is outside the project sources: {entry_abs}")

    if classify(entry_abs, settings) is None:
        raise UnrecognizedExtension(f"Unrecognized entry extension: {entry_abs}")

    logger.debug("Resolved entry %s under root %s", entry_abs, root_abs)
    return root_abs, entry_abs
