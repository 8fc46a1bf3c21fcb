"""
Result Emitter

Serializes the dependency set for the build tool: a single line of JSON
on stdout, sorted so identical runs print identical output.
"""

import json
import os
import sys
from datetime import datetime, timezone
from typing import Iterable, TextIO

from src.resolver.models import SourceFile

MANIFEST = "package.json"

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def emit(paths: Iterable[str], stream: TextIO | None = None) -> None:
    """Write the paths as a sorted single-line JSON array."""
    stream = stream or sys.stdout
    stream.write(json.dumps(sorted(set(paths))) + "\n")
    stream.flush()


def collect_source_files(
    paths: Iterable[str],
    root: str,
    include_manifest: bool = False,
) -> list[SourceFile]:
    """
    Attach modification dates to resolved paths for watch lists.

    Args:
        paths: Resolved dependency paths.
        root: Absolute project root.
        include_manifest: Also watch `<root>/package.json` when it exists.

    Returns:
        Source files sorted by path, then by modification date.
    """
    unique = set(paths)
    if include_manifest:
        manifest = os.path.join(root, MANIFEST).replace("\\", "/")
        if os.path.isfile(manifest):
            unique.add(manifest)

    files = []
    for path in unique:
        try:
            modified = datetime.fromtimestamp(os.path.getmtime(path), tz=timezone.utc)
        except OSError:
            modified = EPOCH
        files.append(SourceFile(path=path, modified_date=modified))

    files.sort(key=lambda f: f.path)
    files.sort(key=lambda f: f.modified_date)
    return files


def emit_source_files(files: Iterable[SourceFile], stream: TextIO | None = None) -> None:
    """Write source files as a single-line JSON array of objects."""
    stream = stream or sys.stdout
    payload = [
        {"path": f.path, "modified": f.modified_date.isoformat()}
        for f in files
    ]
    stream.write(json.dumps(payload) + "\n")
    stream.flush()
