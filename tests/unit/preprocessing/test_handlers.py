"""
Test cases for the comment removal step.
"""

import unittest

from jsonsmith.preprocessing.handlers import CommentHandler, strip_comments
from jsonsmith.utils.config import RepairConfig


class TestCommentHandler(unittest.TestCase):
    """Test CommentHandler as a pipeline step."""

    def setUp(self):
        self.handler = CommentHandler()

    def test_name(self):
        self.assertEqual(self.handler.name, "strip_comments")

    def test_should_apply_follows_config(self):
        self.assertTrue(self.handler.should_apply(RepairConfig()))
        self.assertFalse(self.handler.should_apply(RepairConfig(strip_comments=False)))

    def test_process_removes_both_comment_kinds(self):
        text = '{\n  // header\n  "a": 1 /* inline */\n}'
        self.assertEqual(
            self.handler.process(text, RepairConfig()), '{\n  \n  "a": 1 \n}'
        )

    def test_process_pattern_mode_cuts_urls(self):
        text = '{"link": "https://example.com"}'
        self.assertEqual(self.handler.process(text, RepairConfig()), '{"link": "https:')

    def test_process_string_aware_mode(self):
        text = '{"link": "https://example.com"} // trailing'
        self.assertEqual(
            self.handler.process(text, RepairConfig.string_safe()),
            '{"link": "https://example.com"} ',
        )


class TestRemoveCommentsOutsideStrings(unittest.TestCase):
    """Test the string-literal aware scanner."""

    def test_keeps_newline_after_line_comment(self):
        self.assertEqual(
            CommentHandler.remove_comments_outside_strings("1 // x\r\n2"), "1 \r\n2"
        )

    def test_block_comment_markers_inside_string(self):
        text = '{"a": "/* not a comment */"}'
        self.assertEqual(CommentHandler.remove_comments_outside_strings(text), text)

    def test_unterminated_block_comment_kept(self):
        text = "[1, /* open"
        self.assertEqual(CommentHandler.remove_comments_outside_strings(text), text)

    def test_escaped_backslash_before_quote(self):
        text = '["a\\\\" // gone\n]'
        self.assertEqual(
            CommentHandler.remove_comments_outside_strings(text), '["a\\\\" \n]'
        )


class TestStripCommentsPatternMode(unittest.TestCase):
    """Test the pattern-based comment preprocessor."""

    def test_no_comments(self):
        self.assertEqual(strip_comments("[1, 2]"), "[1, 2]")

    def test_adjacent_block_comments_are_minimal(self):
        """Block comments match non-greedily."""
        self.assertEqual(strip_comments("/*a*/1/*b*/"), "1")

    def test_unterminated_block_comment_kept(self):
        self.assertEqual(strip_comments("[1, /* open"), "[1, /* open")


if __name__ == "__main__":
    unittest.main()
