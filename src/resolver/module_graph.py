"""
Module Graph Adapter

Transitive dependency analysis for JavaScript / TypeScript modules.
Sources are parsed with tree-sitter grammars; only the string sources of
import-like constructs are read, so type errors and unknown syntax
extensions never abort the analysis.

Resolution follows require-style semantics for relative specifiers:
exact file, `<spec>.<ext>`, then `<spec>/index.<ext>`.  Bare specifiers
name vendor packages and are ignored.
"""

import logging
import os
from collections import deque

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_language

from src.resolver.config import ResolverSettings
from src.resolver.models import ArtifactKind, classify, is_vendored, to_posix
from src.shared.exceptions import AdapterFailure

logger = logging.getLogger("import-resolver.module_graph")

GRAMMARS = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
}

# Nodes carrying the imported path in their `source` field
SOURCE_NODES = {"import_statement", "export_statement", "import_require_clause"}


class ModuleGraphAdapter:
    """
    Computes the local modules reachable from a module.

    One instance serves one resolver run: parsers and per-file direct
    imports are memoized on the instance and dropped with it.
    """

    def __init__(self, root: str, settings: ResolverSettings):
        self._root = root
        self._settings = settings
        self._parsers: dict[str, Parser] = {}
        self._direct: dict[str, list[str]] = {}
        self._broken_grammars: dict[str, str] = {}

    # ─── Public API ────────────────────────────────────────

    def reachable(self, path: str) -> set[str]:
        """
        Transitive set of local files reachable from a module.

        Args:
            path: Absolute path of a module file.

        Returns:
            Absolute posix paths, excluding the module itself and anything
            under a vendor directory.  Documents and non-source files are
            included as leaves.

        Raises:
            AdapterFailure: the module itself cannot be analyzed.
        """
        path = to_posix(path)
        # Failures on the input module propagate to the caller.
        queue = deque(self.direct_imports(path))
        found: set[str] = set()

        while queue:
            current = queue.popleft()
            if current in found or current == path:
                continue
            found.add(current)

            if classify(current, self._settings) is not ArtifactKind.MODULE:
                continue
            try:
                queue.extend(self.direct_imports(current))
            except AdapterFailure as e:
                logger.warning("Treating %s as a leaf: %s", current, e)

        return found

    def direct_imports(self, path: str) -> list[str]:
        """Local files imported directly by a module, in source order."""
        if path in self._direct:
            return self._direct[path]

        specifiers = self.import_specifiers(path)
        directory = os.path.dirname(path)
        resolved: list[str] = []

        for specifier in specifiers:
            target = self.resolve_specifier(specifier, directory)
            if target is not None and target not in resolved:
                resolved.append(target)

        self._direct[path] = resolved
        return resolved

    def import_specifiers(self, path: str) -> list[str]:
        """Raw import specifiers of a module, in source order."""
        ext = os.path.splitext(path)[1].lower()
        grammar = GRAMMARS.get(ext)
        if grammar is None:
            raise AdapterFailure(f"No grammar for extension {ext!r}", path=path)

        try:
            with open(path, "rb") as f:
                source = f.read()
        except OSError as e:
            raise AdapterFailure(f"Cannot read module: {e}", path=path) from e

        tree = self._get_parser(grammar, path).parse(source)
        if tree.root_node.has_error:
            if self._settings.strict_syntax:
                raise AdapterFailure("Syntax error in module", path=path)
            logger.debug("Syntax errors in %s, using recovered tree", path)

        return _collect_specifiers(tree.root_node)

    # ─── Resolution ────────────────────────────────────────

    def resolve_specifier(self, specifier: str, directory: str) -> str | None:
        """
        Resolve a relative specifier against the importing module's directory.

        Returns an absolute posix path, or None for vendor packages,
        unresolvable paths and files outside the project root.
        """
        if not specifier.startswith(("./", "../")) and specifier not in (".", ".."):
            return None

        specifier = specifier.split("?", 1)[0]
        base = os.path.normpath(os.path.join(directory, specifier))

        for candidate in self._candidates(base):
            if os.path.isfile(candidate):
                return self._accept(to_posix(candidate))
        return None

    def _candidates(self, base: str) -> list[str]:
        candidates = [base]
        stem, ext = os.path.splitext(base)
        # ESM TypeScript imports `./x.js` for a `./x.ts` source
        if ext in (".js", ".jsx", ".mjs", ".cjs"):
            candidates.extend(stem + e for e in (".ts", ".tsx", ".mts", ".cts"))
        extensions = self._settings.source_extensions
        candidates.extend(base + e for e in extensions)
        candidates.extend(os.path.join(base, "index" + e) for e in extensions)
        return candidates

    def _accept(self, path: str) -> str | None:
        rel_path = os.path.relpath(path, self._root).replace("\\", "/")
        if rel_path == ".." or rel_path.startswith("../"):
            return None
        if is_vendored(rel_path, self._settings):
            return None
        return path

    def _get_parser(self, grammar: str, path: str) -> Parser:
        parser = self._parsers.get(grammar)
        if parser is not None:
            return parser

        if grammar in self._broken_grammars:
            raise AdapterFailure(self._broken_grammars[grammar], path=path)
        try:
            parser = Parser(get_language(grammar))
        except Exception as e:
            message = f"Failed to load {grammar} grammar: {e}"
            # Every later module of this language fails the same way.
            logger.error("%s; %s modules will report no dependencies", message, grammar)
            self._broken_grammars[grammar] = message
            raise AdapterFailure(message, path=path) from e
        self._parsers[grammar] = parser
        return parser


# ─── Tree Walking ──────────────────────────────────────────


def _collect_specifiers(root: Node) -> list[str]:
    """Depth-first walk collecting import sources in source order."""
    specifiers: list[str] = []
    stack = [root]

    while stack:
        node = stack.pop()

        if node.type in SOURCE_NODES:
            source = node.child_by_field_name("source")
            value = _string_value(source)
            if value:
                specifiers.append(value)
        elif node.type == "call_expression":
            value = _call_specifier(node)
            if value:
                specifiers.append(value)

        stack.extend(reversed(node.children))

    return specifiers


def _call_specifier(node: Node) -> str | None:
    """Specifier of `require("x")` or `import("x")`."""
    function = node.child_by_field_name("function")
    if function is None:
        return None
    is_require = function.type == "identifier" and function.text == b"require"
    if function.type != "import" and not is_require:
        return None

    arguments = node.child_by_field_name("arguments")
    if arguments is None or not arguments.named_children:
        return None
    return _string_value(arguments.named_children[0])


def _string_value(node: Node | None) -> str | None:
    """Text of a string literal, or of a template literal with no substitutions."""
    if node is None:
        return None
    if node.type == "string":
        return node.text.decode("utf-8", errors="replace")[1:-1]
    if node.type == "template_string":
        if any(child.type == "template_substitution" for child in node.children):
            return None
        return node.text.decode("utf-8", errors="replace")[1:-1]
    return None
