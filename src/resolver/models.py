"""
Resolver Models

Data classes shared by the locator, the analyzers and the graph walker.
"""

import os
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from src.resolver.config import ResolverSettings


class ArtifactKind(str, Enum):
    """How a file's dependencies are discovered."""

    MODULE = "module"
    DOCUMENT = "document"


class VisitState(str, Enum):
    """
    Per-file traversal state.

    UNVISITED is never stored: a path absent from the registry is unvisited.
    """

    UNVISITED = "unvisited"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class Artifact:
    """A file waiting on the walker's frontier."""

    path: str
    kind: ArtifactKind


@dataclass(frozen=True)
class DocumentArtifact:
    """A document loaded for scanning."""

    path: str
    text: str

    @property
    def directory(self) -> str:
        return os.path.dirname(self.path)


@dataclass
class ImportReference:
    """A quoted path found in an import directive."""

    specifier: str
    source_path: str
    line: int = 0


@dataclass
class ResolutionContext:
    """
    State owned by a single resolver invocation.

    The registry and the dependency set are the only mutable state of a
    run; both are discarded when the run ends.
    """

    root: str
    registry: dict[str, VisitState] = field(default_factory=dict)
    dependencies: set[str] = field(default_factory=set)

    def claim(self, path: str) -> bool:
        """Mark an unvisited path IN_PROGRESS. Returns False if already seen."""
        if path in self.registry:
            return False
        self.registry[path] = VisitState.IN_PROGRESS
        return True

    def resolve(self, path: str) -> None:
        self.registry[path] = VisitState.RESOLVED
        self.dependencies.add(path)


@dataclass
class SourceFile:
    """A dependency with its modification date, for watch lists."""

    path: str
    modified_date: datetime


def classify(path: str, settings: ResolverSettings) -> ArtifactKind | None:
    """Artifact kind from the file extension, or None if unrecognized."""
    ext = os.path.splitext(path)[1].lower()
    if ext in settings.document_extensions:
        return ArtifactKind.DOCUMENT
    if ext in settings.module_extensions:
        return ArtifactKind.MODULE
    return None


def to_posix(path: str) -> str:
    """Normalize an absolute path to forward slashes."""
    return os.path.normpath(path).replace("\\", "/")


def is_vendored(rel_path: str, settings: ResolverSettings) -> bool:
    """True if a root-relative path crosses a vendor directory."""
    parts = rel_path.replace("\\", "/").split("/")[:-1]
    return any(part in settings.vendor_dirs for part in parts)
