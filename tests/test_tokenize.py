"""
Tests for header tokenisation and entry splitting.
"""

import types
import unittest
from unittest import mock

from link_header.errors import InternalParserError, MalformedParameterError
from link_header.parser import tokenize
from link_header.parser.tokenize import (
    iter_entries,
    split_entry,
    split_pair,
    strip_syntax,
)


class TestStripSyntax(unittest.TestCase):
    def test_removes_brackets_quotes_and_whitespace(self):
        result = strip_syntax('<https://example.com/a> ;  rel="next"')
        self.assertEqual(result, "https://example.com/a;rel=next")

    def test_removes_tabs_and_newlines(self):
        result = strip_syntax('<https://example.com/a>;\n\trel="next"')
        self.assertEqual(result, "https://example.com/a;rel=next")

    def test_plain_text_untouched(self):
        self.assertEqual(strip_syntax("abc;d=e"), "abc;d=e")

    def test_pattern_compiled_once(self):
        first = tokenize._strip_pattern()
        self.assertIs(tokenize._strip_pattern(), first)

    def test_bad_pattern_is_internal_error(self):
        tokenize._strip_pattern.cache_clear()
        self.addCleanup(tokenize._strip_pattern.cache_clear)
        with mock.patch.object(tokenize, "STRIP_CHARS_RE", "[<>"):
            with self.assertRaises(InternalParserError) as ctx:
                strip_syntax("<a>")
        self.assertEqual(ctx.exception.kind, "internal")


class TestIterEntries(unittest.TestCase):
    def test_is_lazy(self):
        self.assertIsInstance(iter_entries("<a>"), types.GeneratorType)

    def test_splits_on_commas_in_order(self):
        header = '<https://x/1>; rel="next", <https://x/9>; rel="last"'
        self.assertEqual(
            list(iter_entries(header)),
            ["https://x/1;rel=next", "https://x/9;rel=last"],
        )

    def test_empty_header_yields_one_empty_entry(self):
        self.assertEqual(list(iter_entries("")), [""])


class TestSplitPair(unittest.TestCase):
    def test_splits_on_first_equals(self):
        self.assertEqual(split_pair("a=b=c"), ("a", "b=c"))

    def test_empty_value(self):
        self.assertEqual(split_pair("rel="), ("rel", ""))

    def test_missing_equals(self):
        self.assertIsNone(split_pair("rel"))


class TestSplitEntry(unittest.TestCase):
    def test_reference_only(self):
        self.assertEqual(split_entry("https://x/y"), ("https://x/y", []))

    def test_reference_and_params(self):
        reference, params = split_entry("https://x/y;rel=next;title=a=b")
        self.assertEqual(reference, "https://x/y")
        self.assertEqual(params, [("rel", "next"), ("title", "a=b")])

    def test_param_without_equals(self):
        with self.assertRaises(MalformedParameterError) as ctx:
            split_entry("https://x/y;rel=next;crossorigin")
        self.assertEqual(ctx.exception.text, "crossorigin")
        self.assertEqual(ctx.exception.kind, "malformed_parameter")

    def test_trailing_semicolon_is_malformed(self):
        with self.assertRaises(MalformedParameterError):
            split_entry("https://x/y;")


if __name__ == "__main__":
    unittest.main()
