"""
Unit tests for the document import scanner.

Pure text in, references out. No filesystem access.
"""

from src.resolver.document_imports import DocumentImportExtractor, extract_imports


def specifiers(text: str) -> list[str]:
    return [ref.specifier for ref in extract_imports(text)]


# ─── Directive Shapes ────────────────────────────────────────


class TestDirectiveShapes:

    def test_default_import_double_quotes(self):
        assert specifiers('import x from "./b"') == ["./b"]

    def test_default_import_single_quotes(self):
        assert specifiers("import x from './b'") == ["./b"]

    def test_side_effect_import(self):
        assert specifiers('import "./styles"') == ["./styles"]

    def test_namespace_import(self):
        assert specifiers('import * as charts from "../charts"') == ["../charts"]

    def test_default_and_named(self):
        assert specifiers('import React, { useState as state } from "./react-shim"') == [
            "./react-shim"
        ]

    def test_type_only_import(self):
        assert specifiers('import type { Props } from "./types"') == ["./types"]

    def test_dynamic_import(self):
        assert specifiers('const Lazy = lazy(() => import("./lazy"));') == ["./lazy"]

    def test_reexport(self):
        assert specifiers('export { Chart } from "./chart"\nexport * from "./all"') == [
            "./chart",
            "./all",
        ]

    def test_plain_export_is_not_a_directive(self):
        assert specifiers('export const meta = { title: "from here" }') == []

    def test_binding_named_from(self):
        assert specifiers('import { from } from "./keywords"') == ["./keywords"]


# ─── Multi-line Statements ───────────────────────────────────


class TestMultiline:

    def test_named_imports_across_lines(self):
        text = 'import {\n  Alpha,\n  Beta,\n} from "./greek"\n'
        assert specifiers(text) == ["./greek"]

    def test_from_on_its_own_line(self):
        text = "import Widget\n  from\n  './widget'\n"
        assert specifiers(text) == ["./widget"]

    def test_comments_inside_clause(self):
        text = 'import {\n  a, // first\n  /* second */ b,\n} from "./ab"'
        assert specifiers(text) == ["./ab"]

    def test_line_numbers_point_at_keyword(self):
        text = "# Title\n\nimport {\n  a,\n} from './a'\nimport b from './b'\n"
        refs = extract_imports(text, "/proj/doc.mdx")
        assert [(r.specifier, r.line) for r in refs] == [("./a", 3), ("./b", 6)]
        assert all(r.source_path == "/proj/doc.mdx" for r in refs)


# ─── Documents ───────────────────────────────────────────────


SAMPLE_DOCUMENT = """\
import { Chart } from "./components/chart"
import Layout from '../layouts/post'

# Plotting results

It is important to import the data correctly.

<Chart data={data} />

```js
import { helper } from "./helpers"
```

export const meta = {
  title: "Plotting results",
}
"""


class TestDocuments:

    def test_mdx_document_in_textual_order(self):
        assert specifiers(SAMPLE_DOCUMENT) == [
            "./components/chart",
            "../layouts/post",
            "./helpers",
        ]

    def test_duplicates_are_kept(self):
        text = 'import a from "./x"\nimport b from "./x"'
        assert specifiers(text) == ["./x", "./x"]

    def test_keyword_inside_words_is_ignored(self):
        assert specifiers("Important: reimport nothing. foo.import('./x')") == []

    def test_import_meta_is_ignored(self):
        assert specifiers("const url = import.meta.url") == []

    def test_empty_text(self):
        assert DocumentImportExtractor().extract("") == []


# ─── Malformed Directives ────────────────────────────────────


class TestMalformed:

    def test_unquoted_path_is_skipped(self):
        text = 'import x from ./bad\nimport z from "./z"'
        assert specifiers(text) == ["./z"]

    def test_unterminated_string_is_skipped(self):
        text = 'import a from "./a\nimport b from "./b"'
        assert specifiers(text) == ["./b"]

    def test_unbalanced_clause_does_not_stop_scanning(self):
        text = 'import { a, b from "./x"\nimport y from "./y"'
        assert specifiers(text) == ["./y"]

    def test_dynamic_import_of_expression_is_skipped(self):
        assert specifiers("import(`./pages/${name}`)\nimport('./static')") == ["./static"]

    def test_empty_path_is_skipped(self):
        assert specifiers('import x from ""') == []

    def test_keyword_at_end_of_text(self):
        assert specifiers("we import") == []
