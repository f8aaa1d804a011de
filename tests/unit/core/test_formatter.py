"""
Test cases for the structural formatter.

Tests cover the Pretty, Minify and Smart layouts and the order-then-format composition.
"""

import json
import re
import unittest

from jsonsmith.core.constants import SMART_INLINE_LIMIT
from jsonsmith.core.formatter import (
    StructuralFormatter,
    format_value,
    minify,
    pretty,
    smart,
)
from jsonsmith.core.ordering import order_keys
from jsonsmith.core.parser import parse
from jsonsmith.security.exceptions import SecurityError
from jsonsmith.utils.config import FormatMode, FormatOptions, ParseLimits, SortOrder

SAMPLE = {
    "name": "jsonsmith",
    "version": 1.5,
    "enabled": True,
    "owner": None,
    "tags": ["a", "b"],
    "nested": {"empty_obj": {}, "empty_arr": [], "deep": [{"x": 1}, [2, [3]]]},
}


class TestPretty(unittest.TestCase):
    """Test the fully expanded layout."""

    def test_matches_standard_indented_output(self):
        """Pretty output is what json.dumps produces with an indent."""
        self.assertEqual(pretty(SAMPLE), json.dumps(SAMPLE, indent=2, ensure_ascii=False))

    def test_indent_width_four(self):
        options = FormatOptions(indent_width=4)
        self.assertEqual(
            pretty(SAMPLE, options), json.dumps(SAMPLE, indent=4, ensure_ascii=False)
        )

    def test_small_containers_are_expanded(self):
        self.assertEqual(pretty({"a": [1]}), '{\n  "a": [\n    1\n  ]\n}')

    def test_empty_containers(self):
        self.assertEqual(pretty({}), "{}")
        self.assertEqual(pretty([]), "[]")
        self.assertEqual(pretty({"a": {}, "b": []}), '{\n  "a": {},\n  "b": []\n}')

    def test_no_trailing_comma(self):
        self.assertIsNone(re.search(r",\s*[}\]]", pretty(SAMPLE)))

    def test_scalars(self):
        self.assertEqual(pretty("text"), '"text"')
        self.assertEqual(pretty(3), "3")
        self.assertEqual(pretty(None), "null")


class TestMinify(unittest.TestCase):
    """Test the compact layout."""

    def test_no_insignificant_whitespace(self):
        self.assertEqual(
            minify({"a": [1, 2], "b": "x y"}), '{"a":[1,2],"b":"x y"}'
        )

    def test_idempotent(self):
        once = minify(SAMPLE)
        self.assertEqual(minify(json.loads(once)), once)

    def test_non_ascii_kept_by_default(self):
        self.assertEqual(minify({"k": "é"}), '{"k":"é"}')
        self.assertEqual(
            minify({"k": "é"}, FormatOptions(ensure_ascii=True)), '{"k":"\\u00e9"}'
        )

    def test_empty_containers(self):
        self.assertEqual(minify({}), "{}")
        self.assertEqual(minify([]), "[]")


class TestSmart(unittest.TestCase):
    """Test the size-adaptive layout."""

    def test_short_subtree_inline_with_key_spacing(self):
        self.assertEqual(smart({"a": 1, "b": [1, 2]}), '{"a": 1,"b": [1,2]}')

    def test_colon_inside_string_untouched(self):
        self.assertEqual(smart({"t": "12:30"}), '{"t": "12:30"}')

    def test_long_subtree_expands_one_level(self):
        value = {"name": "x" * 30, "tags": ["a" * 30, "b" * 30]}
        expected = (
            '{\n  "name": "' + "x" * 30 + '",\n'
            '  "tags": ["' + "a" * 30 + '","' + "b" * 30 + '"]\n}'
        )
        self.assertEqual(smart(value), expected)

    def test_recursive_expansion(self):
        value = {"outer": {"inner": ["z" * 50, "y" * 50]}}
        expected = (
            "{\n"
            '  "outer": {\n'
            '    "inner": [\n'
            '      "' + "z" * 50 + '",\n'
            '      "' + "y" * 50 + '"\n'
            "    ]\n"
            "  }\n"
            "}"
        )
        self.assertEqual(smart(value), expected)

    def test_threshold_is_inclusive(self):
        fits = ["s" * (SMART_INLINE_LIMIT - 4)]
        too_long = ["s" * (SMART_INLINE_LIMIT - 3)]
        self.assertEqual(len(minify(fits)), SMART_INLINE_LIMIT)

        self.assertEqual(smart(fits), minify(fits))
        self.assertEqual(smart(too_long), '[\n  "' + "s" * 77 + '"\n]')

    def test_scalar_always_inline(self):
        long_text = "x" * 200
        self.assertEqual(smart(long_text), json.dumps(long_text))

    def test_indent_width_four(self):
        value = {"outer": ["q" * 45, "r" * 45]}
        result = smart(value, FormatOptions(indent_width=4))
        self.assertEqual(
            result,
            '{\n    "outer": [\n        "' + "q" * 45 + '",\n        "'
            + "r" * 45 + '"\n    ]\n}',
        )

    def test_empty_containers(self):
        self.assertEqual(smart({}), "{}")
        self.assertEqual(smart([]), "[]")

    def test_deterministic(self):
        self.assertEqual(smart(SAMPLE), smart(SAMPLE))


class TestFormatValue(unittest.TestCase):
    """Test the order-then-format composition."""

    def test_default_is_pretty(self):
        self.assertEqual(format_value(SAMPLE), pretty(SAMPLE))

    def test_mode_dispatch(self):
        value = {"b": 1, "a": 2}
        self.assertEqual(
            format_value(value, FormatOptions(mode=FormatMode.MINIFY)), '{"b":1,"a":2}'
        )
        self.assertEqual(
            format_value(value, FormatOptions(mode=FormatMode.SMART)), '{"b": 1,"a": 2}'
        )

    def test_ordering_applied_before_formatting(self):
        options = FormatOptions(sort_order=SortOrder.ASC, mode=FormatMode.MINIFY)
        self.assertEqual(format_value({"b": 1, "a": {"d": 0, "c": 0}}, options),
                         '{"a":{"c":0,"d":0},"b":1}')

    def test_descending_pretty(self):
        options = FormatOptions(sort_order=SortOrder.DESC)
        self.assertEqual(format_value({"a": 1, "b": 2}, options), '{\n  "b": 2,\n  "a": 1\n}')

    def test_formatter_does_not_mutate_input(self):
        value = {"b": 1, "a": 2}
        StructuralFormatter(FormatOptions(sort_order=SortOrder.ASC)).format(value)
        self.assertEqual(list(value), ["b", "a"])


class TestDepth(unittest.TestCase):
    """Test rendering at and beyond the nesting limit."""

    def _nested(self, depth):
        return "[" * depth + "]" * depth

    def test_default_limit_is_renderable(self):
        """Every depth the default limits accept can be formatted."""
        depth = ParseLimits().max_nesting_depth
        value = parse(self._nested(depth))

        for mode in FormatMode:
            for order in SortOrder:
                with self.subTest(mode=mode, order=order):
                    options = FormatOptions(mode=mode, sort_order=order)
                    self.assertEqual(parse(format_value(value, options)), value)

    def test_one_past_default_limit_rejected_by_parse(self):
        depth = ParseLimits().max_nesting_depth + 1
        with self.assertRaises(SecurityError):
            parse(self._nested(depth))

    def test_unrenderable_depth_raises_security_error(self):
        value = []
        for _ in range(5000):
            value = [value]

        for render in (pretty, minify, smart):
            with self.subTest(render=render.__name__):
                with self.assertRaises(SecurityError):
                    render(value)
        with self.assertRaises(SecurityError):
            format_value(value, FormatOptions(sort_order=SortOrder.ASC))
        with self.assertRaises(SecurityError):
            order_keys(value, SortOrder.DESC)


class TestNonFiniteNumbers(unittest.TestCase):
    """Out-of-range number literals parse to infinities."""

    def test_written_as_null(self):
        value = parse("[1e400, -1e400, 1.5]")
        self.assertEqual(minify(value), "[null,null,1.5]")
        self.assertEqual(smart(value), "[null,null,1.5]")
        self.assertEqual(pretty({"big": value[0]}), '{\n  "big": null\n}')

    def test_input_not_mutated(self):
        value = [float("inf")]
        minify(value)
        self.assertEqual(value, [float("inf")])


if __name__ == "__main__":
    unittest.main()
