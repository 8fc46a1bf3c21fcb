"""Import resolver: cross-format dependency resolution for modules and documents."""

from src.resolver.walker import GraphWalker, resolve_imports
from src.resolver.module_graph import ModuleGraphAdapter
from src.resolver.locator import FileLocator
from src.resolver.document_imports import DocumentImportExtractor, extract_imports

__all__ = [
    "GraphWalker",
    "resolve_imports",
    "ModuleGraphAdapter",
    "FileLocator",
    "DocumentImportExtractor",
    "extract_imports",
]
