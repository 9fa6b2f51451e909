from __future__ import annotations

import io
import json
import unittest

from support import decode_yaml, decode_yaml_all

from transcode import IndentState, MaxDepthExceeded, encode_yaml, encode_yaml_documents, iter_documents


def to_yaml(text: str, width: int = 4) -> str:
    out = io.StringIO()
    encode_yaml_documents(iter_documents(text), out.write, IndentState.of_width(width))
    return out.getvalue()


class IndentStateTests(unittest.TestCase):
    def test_deeper_returns_new_state(self) -> None:
        state = IndentState.of_width(2)
        child = state.deeper().deeper()
        self.assertEqual(state.depth, 0)
        self.assertEqual(child.depth, 2)
        self.assertEqual(child.prefix, "    ")
        self.assertEqual(IndentState().unit, "    ")


class EncodeYamlLayoutTests(unittest.TestCase):
    def test_mapping_with_sequence(self) -> None:
        out = to_yaml('{"a": 1, "b": [true, "yes", null]}')
        self.assertEqual(out, 'a: 1\nb:\n    - true\n    - "yes"\n    - null\n')
        self.assertEqual(decode_yaml(out), {"a": 1, "b": [True, "yes", None]})

    def test_nested_containers(self) -> None:
        out = to_yaml('{"outer": {"inner": {"x": "y"}}, "list": [{"k": 1, "j": [1, 2]}, []]}')
        expected = (
            "outer:\n"
            "    inner:\n"
            "        x: y\n"
            "list:\n"
            "    -\n"
            "        k: 1\n"
            "        j:\n"
            "            - 1\n"
            "            - 2\n"
            "    - []\n"
        )
        self.assertEqual(out, expected)
        self.assertEqual(decode_yaml(out), {"outer": {"inner": {"x": "y"}}, "list": [{"k": 1, "j": [1, 2]}, []]})

    def test_top_level_sequence(self) -> None:
        out = to_yaml('[1, "two", [3, 4]]')
        self.assertEqual(out, "- 1\n- two\n-\n    - 3\n    - 4\n")

    def test_indent_width(self) -> None:
        self.assertEqual(to_yaml('{"a": {"b": [1]}}', width=2), "a:\n  b:\n    - 1\n")
        self.assertEqual(to_yaml('{"a": {"b": [1]}}', width=1), "a:\n b:\n  - 1\n")

    def test_key_order_is_preserved(self) -> None:
        self.assertEqual(to_yaml('{"z": 1, "a": 2, "m": 3}'), "z: 1\na: 2\nm: 3\n")

    def test_top_level_scalars(self) -> None:
        self.assertEqual(to_yaml("null"), "null\n")
        self.assertEqual(to_yaml("true"), "true\n")
        self.assertEqual(to_yaml("1.50"), "1.50\n")
        self.assertEqual(to_yaml('"plain"'), "plain\n")
        self.assertEqual(to_yaml('"123"'), '"123"\n')


class EncodeYamlScalarTests(unittest.TestCase):
    def test_numbers_keep_source_literal(self) -> None:
        out = to_yaml('{"price": 1.50, "big": 1e5, "neg": -0.0, "int": 10}')
        self.assertEqual(out, "price: 1.50\nbig: 1e5\nneg: -0.0\nint: 10\n")
        self.assertEqual(decode_yaml(out), {"price": 1.5, "big": 100000.0, "neg": -0.0, "int": 10})

    def test_ambiguous_strings_are_quoted(self) -> None:
        out = to_yaml('{"n": "123", "t": "true", "y": "yes", "no": "no"}')
        self.assertEqual(out, 'n: "123"\nt: "true"\ny: "yes"\n"no": "no"\n')
        self.assertEqual(decode_yaml(out), {"n": "123", "t": "true", "y": "yes", "no": "no"})

    def test_marked_characters_force_quotes(self) -> None:
        out = to_yaml('["a#b", "tab\\there", "back\\\\slash"]')
        self.assertEqual(out, '- "a#b"\n- "tab\\there"\n- "back\\\\slash"\n')
        self.assertEqual(decode_yaml(out), ["a#b", "tab\there", "back\\slash"])

    def test_strings_that_would_change_meaning_are_quoted(self) -> None:
        values = ["", "null", "~", "on", "0x1F", "2001-01-01", "a: b", "- x", "[x", "&a", "*a", "!t", " lead", "trail "]
        out = to_yaml(json.dumps(values))
        for line in out.splitlines():
            self.assertTrue(line.startswith('- "'), line)
        self.assertEqual(decode_yaml(out), values)

    def test_quoted_keys(self) -> None:
        out = to_yaml('{"": 1, "123": 2, "a: b": 3, "multi\\nline": 4, "plain": 5}')
        self.assertEqual(out, '"": 1\n"123": 2\n"a: b": 3\n"multi\\nline": 4\nplain: 5\n')
        self.assertEqual(decode_yaml(out), {"": 1, "123": 2, "a: b": 3, "multi\nline": 4, "plain": 5})


class LongKeyTests(unittest.TestCase):
    def test_long_key_uses_explicit_form(self) -> None:
        key = "a" * 1100
        out = to_yaml(json.dumps({key: 1, "b": 2}))
        self.assertEqual(out, f'? "{key}"\n: 1\nb: 2\n')
        self.assertEqual(decode_yaml(out), {key: 1, "b": 2})

    def test_long_keys_read_back(self) -> None:
        for key in ["a" * 1100, "1" * 1100, "a: " * 366]:
            with self.subTest(key=key[:8]):
                value = {"outer": {key: {"x": [1, 2]}, "next": "v"}}
                out = to_yaml(json.dumps(value))
                self.assertEqual(decode_yaml(out), value)

    def test_key_at_limit_stays_simple(self) -> None:
        key = "k" * 1024
        self.assertEqual(to_yaml(json.dumps({key: 1})), f"{key}: 1\n")


class BlockLiteralTests(unittest.TestCase):
    def test_without_trailing_newline(self) -> None:
        out = to_yaml('{"text": "line1\\nline2", "next": 1}')
        self.assertEqual(out, "text: |-\n    line1\n    line2\nnext: 1\n")
        self.assertEqual(decode_yaml(out), {"text": "line1\nline2", "next": 1})

    def test_with_trailing_newline(self) -> None:
        out = to_yaml('{"text": "line1\\nline2\\n", "next": 1}')
        self.assertEqual(out, "text: |\n    line1\n    line2\nnext: 1\n")
        self.assertEqual(decode_yaml(out), {"text": "line1\nline2\n", "next": 1})

    def test_with_several_trailing_newlines(self) -> None:
        out = to_yaml('{"text": "a\\n\\n", "next": 1}')
        self.assertEqual(out, "text: |+\n    a\n\nnext: 1\n")
        self.assertEqual(decode_yaml(out), {"text": "a\n\n", "next": 1})

    def test_blank_lines_inside_block(self) -> None:
        out = to_yaml('{"text": "\\nfirst\\n\\n  indented\\nlast"}')
        self.assertEqual(out, "text: |-\n\n    first\n\n      indented\n    last\n")
        self.assertEqual(decode_yaml(out), {"text": "\nfirst\n\n  indented\nlast"})

    def test_in_sequence(self) -> None:
        out = to_yaml('["a\\nb", ["c\\nd\\n"]]')
        self.assertEqual(out, "- |-\n    a\n    b\n-\n    - |\n        c\n        d\n")
        self.assertEqual(decode_yaml(out), ["a\nb", ["c\nd\n"]])

    def test_top_level_block(self) -> None:
        out = to_yaml('"a\\nb"')
        self.assertEqual(out, "|-\n    a\n    b\n")
        self.assertEqual(decode_yaml(out), "a\nb")

    def test_multiline_with_tab_is_quoted(self) -> None:
        out = to_yaml('{"t": "a\\tb\\nc"}')
        self.assertEqual(out, 't: "a\\tb\\nc"\n')

    def test_multiline_with_leading_space_is_quoted(self) -> None:
        out = to_yaml('{"t": "  a\\nb"}')
        self.assertEqual(out, 't: "  a\\nb"\n')
        self.assertEqual(decode_yaml(out), {"t": "  a\nb"})


class EmptyContainerTests(unittest.TestCase):
    def test_empty_containers_render_inline(self) -> None:
        self.assertEqual(to_yaml("{}"), "{}\n")
        self.assertEqual(to_yaml("[]"), "[]\n")
        out = to_yaml('{"a": {}, "b": [], "c": [{}, []]}')
        self.assertEqual(out, "a: {}\nb: []\nc:\n    - {}\n    - []\n")
        self.assertEqual(decode_yaml(out), {"a": {}, "b": [], "c": [{}, []]})


class MultiDocumentTests(unittest.TestCase):
    def test_documents_are_separated(self) -> None:
        out = to_yaml('{"a": 1} [1, 2] "x"')
        self.assertEqual(out, "a: 1\n---\n- 1\n- 2\n---\nx\n")
        self.assertEqual(decode_yaml_all(out), [{"a": 1}, [1, 2], "x"])

    def test_document_count_is_returned(self) -> None:
        out = io.StringIO()
        self.assertEqual(encode_yaml_documents(iter_documents("1 2 3"), out.write), 3)


class DepthTests(unittest.TestCase):
    def test_depth_limit(self) -> None:
        (view,) = list(iter_documents("[" * 250 + "]" * 250))
        with self.assertRaises(MaxDepthExceeded):
            encode_yaml(view, io.StringIO().write)


if __name__ == "__main__":
    unittest.main()
