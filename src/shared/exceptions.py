"""
Custom exception hierarchy for the import resolver.

All resolver errors inherit from ResolverError so they can be caught
uniformly at the command-line boundary.  Only ArgumentError is fatal;
every other error is local to one file or one reference.
"""


class ResolverError(Exception):
    """Base exception for all resolver errors."""

    def __init__(self, message: str, component: str = "unknown"):
        self.component = component
        super().__init__(f"[{component}] {message}")


class ArgumentError(ResolverError):
    """Root path or entry file missing from the invocation."""

    def __init__(self, message: str):
        super().__init__(message, component="cli")


class EntryNotFound(ResolverError):
    """The entry file does not exist; the run yields an empty result."""

    def __init__(self, message: str):
        super().__init__(message, component="paths")


class UnrecognizedExtension(EntryNotFound):
    """The entry file exists but is neither a module nor a document."""
    pass


class ParseError(ResolverError):
    """An import directive in a document could not be scanned."""

    def __init__(self, message: str, offset: int = -1):
        self.offset = offset
        super().__init__(message, component="document_imports")


class AdapterFailure(ResolverError):
    """The module analyzer could not process a module."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message, component="module_graph")
