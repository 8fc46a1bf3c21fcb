"""
Graph Walker

Resolves the transitive set of project files an entry depends on, across
modules (analyzed by the module graph adapter) and documents (scanned for
import directives as plain text).

Traversal uses an explicit stack.  A file is claimed IN_PROGRESS in the
same step it is pushed, before anything is read from it, so mutually
importing documents are each processed exactly once.
"""

import logging
import os

from src.resolver.config import ResolverSettings
from src.resolver.document_imports import DocumentImportExtractor
from src.resolver.locator import FileLocator
from src.resolver.models import (
    Artifact,
    ArtifactKind,
    DocumentArtifact,
    ResolutionContext,
    classify,
)
from src.resolver.module_graph import ModuleGraphAdapter
from src.resolver.paths import resolve_entry
from src.shared.exceptions import AdapterFailure, EntryNotFound

logger = logging.getLogger("import-resolver.walker")


class GraphWalker:
    """Walks the cross-format dependency graph of one project root."""

    def __init__(
        self,
        root: str,
        settings: ResolverSettings | None = None,
        locator: FileLocator | None = None,
        adapter: ModuleGraphAdapter | None = None,
        extractor: DocumentImportExtractor | None = None,
    ):
        self.settings = settings or ResolverSettings()
        self.context = ResolutionContext(root=root)
        self.locator = locator or FileLocator(root, self.settings)
        self.adapter = adapter or ModuleGraphAdapter(root, self.settings)
        self.extractor = extractor or DocumentImportExtractor()

    def walk(self, entry: str) -> set[str]:
        """
        Resolve every dependency of an entry file.

        Args:
            entry: Absolute path of a module or document under the root.

        Returns:
            The dependency set, including the entry itself.
        """
        kind = classify(entry, self.settings)
        if kind is None or not self.context.claim(entry):
            return self.context.dependencies

        stack = [Artifact(entry, kind)]
        while stack:
            artifact = stack.pop()
            if artifact.kind is ArtifactKind.DOCUMENT:
                stack.extend(self._visit_document(artifact.path))
            else:
                stack.extend(self._visit_module(artifact.path))

        logger.info(
            "Resolved %d dependencies for %s", len(self.context.dependencies), entry
        )
        return self.context.dependencies

    # ─── Documents ─────────────────────────────────────────

    def _visit_document(self, path: str) -> list[Artifact]:
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                document = DocumentArtifact(path=path, text=f.read())
        except OSError as e:
            logger.warning("Skipping unreadable document %s: %s", path, e)
            return []

        pending: list[Artifact] = []
        for reference in self.extractor.extract(document.text, path):
            target = os.path.normpath(
                os.path.join(document.directory, reference.specifier)
            )
            rel_target = os.path.relpath(target, self.context.root).replace("\\", "/")

            for found in self.locator.locate(rel_target):
                kind = classify(found, self.settings)
                if kind is not None and self.context.claim(found):
                    pending.append(Artifact(found, kind))

        self.context.resolve(path)
        return pending

    # ─── Modules ───────────────────────────────────────────

    def _visit_module(self, path: str) -> list[Artifact]:
        try:
            reachable = self.adapter.reachable(path)
        except AdapterFailure as e:
            logger.warning("Module analysis failed, no dependencies for %s: %s", path, e)
            reachable = set()

        pending: list[Artifact] = []
        for found in sorted(reachable):
            # The analyzer cannot see imports written inside documents.
            # Documents join the set only once they have been read.
            if classify(found, self.settings) is ArtifactKind.DOCUMENT:
                if self.context.claim(found):
                    pending.append(Artifact(found, ArtifactKind.DOCUMENT))
                continue
            self.context.dependencies.add(found)
            if self.context.claim(found):
                self.context.resolve(found)

        self.context.resolve(path)
        return pending


def resolve_imports(
    root: str,
    entry: str,
    settings: ResolverSettings | None = None,
) -> list[str]:
    """
    Resolve an entry file to the sorted list of its project dependencies.

    Missing or unrecognized entries yield an empty list.

    Raises:
        ArgumentError: root or entry is empty.
    """
    settings = settings or ResolverSettings()
    try:
        root_abs, entry_abs = resolve_entry(root, entry, settings)
    except EntryNotFound as e:
        logger.info("Nothing to resolve: %s", e)
        return []

    return sorted(GraphWalker(root_abs, settings).walk(entry_abs))
