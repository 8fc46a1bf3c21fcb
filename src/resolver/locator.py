"""
File Locator

Expands an extension-less import target into the project files that
implement it: either `<target>.<ext>` or `<target>/index.<ext>`.
"""

import logging
import os
from collections import defaultdict

from src.resolver.config import ResolverSettings
from src.resolver.models import is_vendored

logger = logging.getLogger("import-resolver.locator")


class FileLocator:
    """
    Searches the project tree for files matching an import target.

    The tree is indexed by basename on first use and reused for the rest
    of the run.  A file matches a candidate when its root-relative path is
    the candidate or ends with `/<candidate>`, so the same target can
    expand to several files living in different directories.
    """

    def __init__(self, root: str, settings: ResolverSettings):
        self._root = root
        self._settings = settings
        self._index: dict[str, list[str]] | None = None

    def _build_index(self) -> dict[str, list[str]]:
        index: dict[str, list[str]] = defaultdict(list)
        count = 0

        for current, dirs, files in os.walk(self._root):
            dirs[:] = [
                d for d in dirs
                if d not in self._settings.vendor_dirs
                and d not in self._settings.ignored_dirs
            ]
            for filename in files:
                full_path = os.path.join(current, filename)
                rel_path = os.path.relpath(full_path, self._root).replace("\\", "/")
                index[filename].append(rel_path)
                count += 1

        for paths in index.values():
            paths.sort()
        logger.debug("Indexed %d files under %s", count, self._root)
        return index

    def candidates(self, target: str) -> list[str]:
        """Root-relative candidate paths for a target."""
        target = target.rstrip("/")
        extensions = self._settings.source_extensions
        result = []

        if os.path.splitext(target)[1].lower() in extensions:
            result.append(target)
        for ext in extensions:
            result.append(f"{target}/index{ext}")
        for ext in extensions:
            result.append(f"{target}{ext}")
        return result

    def locate(self, target: str) -> list[str]:
        """
        Find every project file implementing a target.

        Args:
            target: Root-relative posix path, normally without extension.

        Returns:
            Absolute paths of the matching files; empty if nothing matches.
        """
        target = target.replace("\\", "/")
        if not target or target == "." or target.startswith("../") or target == "..":
            return []
        if is_vendored(target + "/", self._settings):
            return []

        if self._index is None:
            self._index = self._build_index()

        matches: list[str] = []
        for candidate in self.candidates(target):
            basename = candidate.rsplit("/", 1)[-1]
            for rel_path in self._index.get(basename, []):
                if rel_path == candidate or rel_path.endswith("/" + candidate):
                    full_path = os.path.join(self._root, rel_path).replace("\\", "/")
                    if full_path not in matches:
                        matches.append(full_path)

        if not matches:
            logger.debug("No file found for import target %s", target)
        return matches
