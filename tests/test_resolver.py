#!/usr/bin/env python3
"""
Test Suite for path and template resolution

PURPOSE:
    Checks dotted-path lookups and single-pass ``[get:path]`` substitution.

TEST COVERAGE:
    - Primitive, container and list-index lookups
    - NotFound for missing or non-traversable segments
    - Placeholder rendering, JSON output for containers
    - No re-expansion of substituted text

USAGE:
    Run from project root: python -m pytest tests/test_resolver.py -v
"""

import json
import unittest

from messe_chat.knowledge.resolver import NotFound, resolve_path, resolve_template, stringify


class TestResolvePath(unittest.TestCase):

    def setUp(self):
        self.tree = {
            "event": {"dates": "August 7-8, 2026", "days": ["August 7", "August 8"], "open": True},
            "financials": {"revenue": {"total": 1018660}},
        }

    def test_primitive_value(self):
        self.assertEqual(resolve_path("event.dates", self.tree), "August 7-8, 2026")
        self.assertEqual(resolve_path("financials.revenue.total", self.tree), 1018660)

    def test_missing_path(self):
        self.assertEqual(resolve_path("event.venue", self.tree), NotFound("event.venue"))

    def test_cannot_walk_through_scalar(self):
        self.assertIsInstance(resolve_path("event.dates.year", self.tree), NotFound)

    def test_container_value(self):
        self.assertEqual(resolve_path("financials.revenue", self.tree), {"total": 1018660})

    def test_list_index(self):
        self.assertEqual(resolve_path("event.days.1", self.tree), "August 8")
        self.assertIsInstance(resolve_path("event.days.2", self.tree), NotFound)
        self.assertIsInstance(resolve_path("event.days.first", self.tree), NotFound)

    def test_empty_path_is_not_found(self):
        self.assertIsInstance(resolve_path("", self.tree), NotFound)
        self.assertIsInstance(resolve_path("...", self.tree), NotFound)

    def test_empty_segments_are_ignored(self):
        self.assertEqual(resolve_path("event..dates", self.tree), "August 7-8, 2026")

    def test_not_found_keeps_original_path(self):
        self.assertEqual(resolve_path("does.not.exist", self.tree).path, "does.not.exist")


class TestStringify(unittest.TestCase):

    def test_primitives(self):
        self.assertEqual(stringify("x"), "x")
        self.assertEqual(stringify(True), "true")
        self.assertEqual(stringify(False), "false")
        self.assertEqual(stringify(2000), "2000")
        self.assertEqual(stringify(2.0), "2")
        self.assertEqual(stringify(2.5), "2.5")

    def test_null_and_containers_are_json(self):
        self.assertEqual(stringify(None), "null")
        self.assertEqual(stringify({"capacity": 2000}), '{"capacity":2000}')
        self.assertEqual(stringify(["€1", "b"]), '["€1","b"]')

    def test_large_integral_float_keeps_exponent(self):
        self.assertEqual(stringify(1e300), "1e+300")
        self.assertEqual(stringify(1e21), "1e+21")
        self.assertEqual(stringify(1e20), "100000000000000000000")
        self.assertEqual(stringify(-1e300), "-1e+300")

    def test_non_finite_floats(self):
        self.assertEqual(stringify(float("nan")), "NaN")
        self.assertEqual(stringify(float("inf")), "Infinity")
        self.assertEqual(stringify(float("-inf")), "-Infinity")

    def test_floats_inside_containers(self):
        self.assertEqual(stringify({"capacity": 2000.0}), '{"capacity":2000}')
        self.assertEqual(stringify([2.5, 1e300]), "[2.5,1e+300]")
        self.assertEqual(stringify({"x": float("nan")}), '{"x":null}')


class TestResolveTemplate(unittest.TestCase):

    def setUp(self):
        self.tree = {"event": {"dates": "August 7-8, 2026"}}

    def test_found(self):
        self.assertEqual(resolve_template("Dates: [get:event.dates]", self.tree), "Dates: August 7-8, 2026")

    def test_not_found(self):
        self.assertEqual(
            resolve_template("Value: [get:does.not.exist]", self.tree),
            "Value: [Data for does.not.exist not found]",
        )

    def test_non_primitive_is_json(self):
        out = resolve_template("Venue: [get:event.venue]", {"event": {"venue": {"capacity": 2000}}})
        self.assertTrue(out.startswith("Venue: "))
        self.assertEqual(json.loads(out[len("Venue: "):]), {"capacity": 2000})

    def test_multiple_markers(self):
        tree = {"event": {"dates": "Dec 1-2"}, "contact": {"email": "overlay@paguyuban-messe.com"}}
        out = resolve_template("Dates: [get:event.dates], Email: [get:contact.email]", tree)
        self.assertEqual(out, "Dates: Dec 1-2, Email: overlay@paguyuban-messe.com")

    def test_single_pass_only(self):
        tree = {"a": "[get:b]", "b": "secret"}
        self.assertEqual(resolve_template("[get:a]", tree), "[get:b]")

    def test_path_may_contain_any_non_bracket_characters(self):
        tree = {"sponsor tiers": {"gold-level": "€40,000"}}
        self.assertEqual(resolve_template("[get:sponsor tiers.gold-level]", tree), "€40,000")

    def test_text_without_markers_is_unchanged(self):
        text = "No markers [here] or [get] or [get:"
        self.assertEqual(resolve_template(text, self.tree), text)

    def test_inputs_are_not_mutated(self):
        tree = {"event": {"venue": {"capacity": 2000}}}
        resolve_template("[get:event.venue]", tree)
        self.assertEqual(tree, {"event": {"venue": {"capacity": 2000}}})


if __name__ == "__main__":
    unittest.main()
