#!/usr/bin/env python3
"""
Test Suite for CSV knowledge overlays

PURPOSE:
    Checks parsing of two-column ``path,value`` CSV files into knowledge trees.

TEST COVERAGE:
    - Header detection
    - Quoted fields, embedded commas and escaped quotes
    - Value coercion (booleans, null, numbers, JSON, raw strings)
    - Dotted path creation and overwrite of scalar intermediates
    - Malformed rows are skipped

USAGE:
    Run from project root: python -m pytest tests/test_csv_overlay.py -v
"""

import unittest

from messe_chat.knowledge.csv_overlay import (
    parse_csv_overlay,
    parse_value,
    set_deep_value,
    split_csv_line,
)


class TestSplitCsvLine(unittest.TestCase):

    def test_plain_fields(self):
        self.assertEqual(split_csv_line("a.b, 1 "), ("a.b", "1"))

    def test_quoted_field_keeps_commas(self):
        self.assertEqual(split_csv_line('note,"has, a comma"'), ("note", "has, a comma"))

    def test_doubled_quote_is_literal(self):
        self.assertEqual(split_csv_line('quote,"say ""hi"""'), ("quote", 'say "hi"'))

    def test_extra_columns_are_ignored(self):
        self.assertEqual(split_csv_line("a,b,c"), ("a", "b"))

    def test_line_without_delimiter(self):
        self.assertIsNone(split_csv_line("just-a-path"))


class TestParseValue(unittest.TestCase):

    def test_booleans_and_null(self):
        self.assertIs(parse_value("true"), True)
        self.assertIs(parse_value("false"), False)
        self.assertIsNone(parse_value("null"))
        self.assertIsNone(parse_value(""))

    def test_numbers(self):
        self.assertEqual(parse_value("1018660"), 1018660)
        self.assertIsInstance(parse_value("42"), int)
        self.assertEqual(parse_value("-3.5"), -3.5)
        self.assertEqual(parse_value("1_000_000"), 1000000)

    def test_embedded_json(self):
        self.assertEqual(parse_value('["a", "b"]'), ["a", "b"])
        self.assertEqual(parse_value('{"x": 1}'), {"x": 1})

    def test_raw_string_fallback(self):
        self.assertEqual(parse_value("hello"), "hello")
        self.assertEqual(parse_value("€1,018,660"), "€1,018,660")
        self.assertEqual(parse_value("1.2.3"), "1.2.3")

    def test_non_json_constants_stay_strings(self):
        self.assertEqual(parse_value("NaN"), "NaN")
        self.assertEqual(parse_value("Infinity"), "Infinity")
        self.assertEqual(parse_value("-Infinity"), "-Infinity")
        self.assertEqual(parse_value("[1, NaN]"), "[1, NaN]")

    def test_only_ascii_digits_are_numbers(self):
        self.assertEqual(parse_value("\u0663\u0664"), "\u0663\u0664")
        self.assertEqual(parse_value("\uff11\uff12"), "\uff11\uff12")


class TestSetDeepValue(unittest.TestCase):

    def test_creates_intermediate_trees(self):
        tree = {}
        set_deep_value(tree, "a.b.c", 1)
        self.assertEqual(tree, {"a": {"b": {"c": 1}}})

    def test_scalar_intermediate_is_overwritten(self):
        tree = {"a": 5}
        set_deep_value(tree, "a.b", 1)
        self.assertEqual(tree, {"a": {"b": 1}})

    def test_empty_segments_are_dropped(self):
        tree = {}
        set_deep_value(tree, ".a..b.", 2)
        self.assertEqual(tree, {"a": {"b": 2}})


class TestParseCsvOverlay(unittest.TestCase):

    def test_rows_build_a_tree(self):
        tree = parse_csv_overlay("a.b,1\na.c,true\na.d,hello\n")
        self.assertEqual(tree, {"a": {"b": 1, "c": True, "d": "hello"}})

    def test_header_is_skipped_case_insensitively(self):
        tree = parse_csv_overlay("Path, Value\r\nevent.dates,\"September 10-11, 2026\"\r\n")
        self.assertEqual(tree, {"event": {"dates": "September 10-11, 2026"}})

    def test_first_line_is_data_without_header(self):
        tree = parse_csv_overlay("financials.revenue.total,1018660")
        self.assertEqual(tree, {"financials": {"revenue": {"total": 1018660}}})

    def test_quoted_value(self):
        self.assertEqual(parse_csv_overlay('note,"has, a comma"'), {"note": "has, a comma"})

    def test_malformed_rows_are_skipped(self):
        text = "path,value\nno-delimiter\n,orphan value\n...,dots only\n\nok,1\n"
        self.assertEqual(parse_csv_overlay(text), {"ok": 1})

    def test_later_rows_win(self):
        tree = parse_csv_overlay("a,1\na.b,2\n")
        self.assertEqual(tree, {"a": {"b": 2}})

    def test_empty_text(self):
        self.assertEqual(parse_csv_overlay(""), {})


if __name__ == "__main__":
    unittest.main()
