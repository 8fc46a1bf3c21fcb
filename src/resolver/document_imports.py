"""
Document Import Extractor

Scans the raw text of a document for import directives and yields the
quoted path each one references.  Documents are not valid modules, so
instead of a parser this uses a small scanner that follows a directive
keyword to its string literal, across line breaks when the import clause
is split over several lines.
"""

import logging
import re

from src.resolver.models import ImportReference
from src.shared.exceptions import ParseError

logger = logging.getLogger("import-resolver.document_imports")

# Keyword at a word boundary; `foo.import` and `important` do not count.
_KEYWORD = re.compile(r"(?<![\w$.])(import|export)(?![\w$])")
_IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")

QUOTES = ("'", '"')


class DocumentImportExtractor:
    """
    Extracts import references from document text.

    Recognized shapes:
        import "./side-effect"
        import Default, { a, b as c } from "./module"
        import * as ns from './module'
        import("./lazy")
        export { a } from "./module"
    """

    def extract(self, text: str, source_path: str = "") -> list[ImportReference]:
        """
        Find every import directive in a document.

        Args:
            text: Raw document text.
            source_path: Path of the document, recorded on each reference.

        Returns:
            References in textual order.  Duplicates are kept.
        """
        references: list[ImportReference] = []
        pos = 0

        while True:
            match = _KEYWORD.search(text, pos)
            if match is None:
                break

            keyword = match.group(1)
            try:
                found = self._scan_directive(text, match.end(), keyword)
            except ParseError as e:
                logger.debug(
                    "Skipping malformed %s in %s at line %d: %s",
                    keyword, source_path or "<text>", _line_of(text, match.start()), e,
                )
                pos = match.end()
                continue

            if found is None:
                pos = match.end()
                continue

            specifier, end = found
            references.append(ImportReference(
                specifier=specifier,
                source_path=source_path,
                line=_line_of(text, match.start()),
            ))
            pos = end

        return references

    # ─── Directives ────────────────────────────────────────

    def _scan_directive(self, text: str, pos: int, keyword: str) -> tuple[str, int] | None:
        """
        Scan a directive starting right after its keyword.

        Returns (specifier, end offset), or None when the keyword does not
        start an import directive at all (`export const ...`, `import.meta`).
        """
        pos = self._skip_space(text, pos)
        if pos >= len(text):
            return None
        char = text[pos]

        if keyword == "import":
            if char in QUOTES:
                return self._read_string(text, pos)
            if char == "(":
                return self._scan_dynamic(text, pos + 1)
            if char in "{*" or _IDENTIFIER.match(text, pos):
                pos = self._scan_clause(text, pos)
                return self._expect_string(text, pos)
            return None

        # Re-exports only; any other export is ordinary code.
        if char not in "{*":
            return None
        try:
            pos = self._scan_clause(text, pos)
        except ParseError:
            return None
        return self._expect_string(text, pos)

    def _scan_dynamic(self, text: str, pos: int) -> tuple[str, int]:
        pos = self._skip_space(text, pos)
        if pos >= len(text) or text[pos] not in QUOTES:
            raise ParseError("dynamic import without a string literal", pos)
        specifier, end = self._read_string(text, pos)
        end = self._skip_space(text, end)
        if end >= len(text) or text[end] not in "),":
            raise ParseError("unterminated dynamic import", end)
        return specifier, end + 1

    def _scan_clause(self, text: str, pos: int) -> int:
        """
        Walk an import clause up to and including its `from` keyword.

        Returns the offset right after `from`.
        """
        depth = 0
        seen_binding = False

        while pos < len(text):
            pos = self._skip_space(text, pos)
            if pos >= len(text):
                break
            char = text[pos]

            if char == "{":
                depth += 1
                pos += 1
            elif char == "}":
                if depth == 0:
                    raise ParseError("unbalanced brace in import clause", pos)
                depth -= 1
                seen_binding = True
                pos += 1
            elif char in ",*":
                seen_binding = seen_binding or char == "*"
                pos += 1
            elif char in QUOTES and depth > 0:
                # `{ "string name" as alias }`
                _, pos = self._read_string(text, pos)
            else:
                ident = _IDENTIFIER.match(text, pos)
                if ident is None:
                    raise ParseError(f"unexpected {char!r} in import clause", pos)
                pos = ident.end()
                if ident.group() == "from" and depth == 0 and seen_binding:
                    return pos
                seen_binding = True

        raise ParseError("import clause reaches end of text", pos)

    def _expect_string(self, text: str, pos: int) -> tuple[str, int]:
        pos = self._skip_space(text, pos)
        if pos >= len(text) or text[pos] not in QUOTES:
            raise ParseError("expected a quoted path after 'from'", pos)
        return self._read_string(text, pos)

    # ─── Lexing ────────────────────────────────────────────

    @staticmethod
    def _read_string(text: str, pos: int) -> tuple[str, int]:
        """Read a quoted literal on a single line. Returns (value, end offset)."""
        quote = text[pos]
        chars = []
        i = pos + 1

        while i < len(text):
            char = text[i]
            if char == "\\" and i + 1 < len(text):
                chars.append(text[i + 1])
                i += 2
                continue
            if char == quote:
                value = "".join(chars)
                if not value.strip():
                    raise ParseError("empty import path", pos)
                return value, i + 1
            if char == "\n":
                break
            chars.append(char)
            i += 1

        raise ParseError("unterminated string literal", pos)

    @staticmethod
    def _skip_space(text: str, pos: int) -> int:
        """Skip whitespace, line breaks and comments."""
        while pos < len(text):
            if text[pos].isspace():
                pos += 1
            elif text.startswith("//", pos):
                newline = text.find("\n", pos)
                pos = len(text) if newline == -1 else newline + 1
            elif text.startswith("/*", pos):
                close = text.find("*/", pos + 2)
                if close == -1:
                    raise ParseError("unterminated comment", pos)
                pos = close + 2
            else:
                break
        return pos


def _line_of(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def extract_imports(text: str, source_path: str = "") -> list[ImportReference]:
    """Convenience wrapper around DocumentImportExtractor.extract."""
    return DocumentImportExtractor().extract(text, source_path)
