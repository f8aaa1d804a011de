"""
Test cases for configuration dataclasses.
"""

import unittest

from jsonsmith.utils.config import (
    FormatMode,
    FormatOptions,
    RepairConfig,
    SortOrder,
    ToolConfig,
)


class TestFormatOptions(unittest.TestCase):
    """Test formatting options."""

    def test_defaults(self):
        options = FormatOptions()
        self.assertEqual(options.indent_width, 2)
        self.assertEqual(options.sort_order, SortOrder.NONE)
        self.assertEqual(options.mode, FormatMode.PRETTY)
        self.assertFalse(options.ensure_ascii)

    def test_indent_width_restricted(self):
        FormatOptions(indent_width=4)
        for width in (0, 1, 3, 8):
            with self.subTest(width=width):
                with self.assertRaises(ValueError):
                    FormatOptions(indent_width=width)

    def test_string_enum_values_coerced(self):
        options = FormatOptions(sort_order="asc", mode="smart")
        self.assertEqual(options.sort_order, SortOrder.ASC)
        self.assertEqual(options.mode, FormatMode.SMART)

    def test_unknown_enum_value(self):
        with self.assertRaises(ValueError):
            FormatOptions(sort_order="random")


class TestRepairConfig(unittest.TestCase):
    """Test repair step switches."""

    def test_all_steps_enabled_by_default(self):
        config = RepairConfig()
        self.assertTrue(config.strip_comments)
        self.assertTrue(config.remove_trailing_commas)
        self.assertTrue(config.normalize_quotes)
        self.assertTrue(config.normalize_booleans)
        self.assertTrue(config.close_strings)
        self.assertTrue(config.close_structures)
        self.assertFalse(config.string_aware)

    def test_string_safe(self):
        config = RepairConfig.string_safe()
        self.assertTrue(config.string_aware)
        self.assertTrue(config.strip_comments)

    def test_from_features(self):
        config = RepairConfig.from_features({"close_strings", "close_structures"})
        self.assertTrue(config.close_strings)
        self.assertTrue(config.close_structures)
        self.assertFalse(config.strip_comments)
        self.assertFalse(config.normalize_quotes)

    def test_from_features_unknown_name(self):
        with self.assertRaises(ValueError):
            RepairConfig.from_features({"fix_everything"})


class TestToolConfig(unittest.TestCase):
    """Test tool session settings."""

    def test_defaults(self):
        config = ToolConfig()
        self.assertEqual(config.debounce_delay, 0.5)
        self.assertEqual(config.language, "en")
        self.assertEqual(config.limits.max_nesting_depth, 100)
        self.assertTrue(config.repair.close_structures)

    def test_independent_defaults(self):
        first, second = ToolConfig(), ToolConfig()
        first.repair.string_aware = True
        self.assertFalse(second.repair.string_aware)

    def test_negative_delay(self):
        with self.assertRaises(ValueError):
            ToolConfig(debounce_delay=-0.1)


if __name__ == "__main__":
    unittest.main()
