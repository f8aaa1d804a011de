"""
Test cases for the repair pipeline.
"""

import unittest

from jsonsmith.preprocessing.base import RepairStepBase
from jsonsmith.preprocessing.pipeline import RepairPipeline
from jsonsmith.utils.config import RepairConfig


class UppercaseStep(RepairStepBase):
    """Test step that upper-cases the text."""

    name = "uppercase"

    def process(self, text, _config):
        return text.upper()


class TestRepairPipeline(unittest.TestCase):
    """Test step ordering, switching and reporting."""

    def setUp(self):
        self.pipeline = RepairPipeline.create_default_pipeline()

    def test_default_step_order(self):
        self.assertEqual(
            [step.name for step in self.pipeline.steps],
            [
                "strip_comments",
                "remove_trailing_commas",
                "normalize_quotes",
                "normalize_booleans",
                "close_strings",
                "close_structures",
            ],
        )

    def test_run_reports_changing_steps(self):
        text, applied = self.pipeline.run("{'a': [1, 2,], 'b': True // note")
        self.assertEqual(text, '{"a": [1, 2], "b": true }')
        self.assertEqual(
            applied,
            [
                "strip_comments",
                "remove_trailing_commas",
                "normalize_quotes",
                "normalize_booleans",
                "close_structures",
            ],
        )

    def test_unchanged_text(self):
        text, applied = self.pipeline.run('{"a": 1}')
        self.assertEqual(text, '{"a": 1}')
        self.assertEqual(applied, [])

    def test_disabled_steps_skipped(self):
        config = RepairConfig.from_features({"close_structures"})
        text, applied = self.pipeline.run("[1, 2, // x", config)
        self.assertEqual(text, "[1, 2, // x]")
        self.assertEqual(applied, ["close_structures"])

    def test_custom_step(self):
        pipeline = RepairPipeline()
        pipeline.add_step(UppercaseStep())
        self.assertEqual(pipeline.run("abc"), ("ABC", ["uppercase"]))

    def test_empty_pipeline(self):
        self.assertEqual(RepairPipeline().run("x"), ("x", []))

    def test_debug_log_per_step(self):
        with self.assertLogs("jsonsmith.preprocessing.pipeline", level="DEBUG") as cm:
            self.pipeline.run("[1,]")
        self.assertTrue(any("remove_trailing_commas" in line for line in cm.output))


class TestRepairStepBase(unittest.TestCase):
    """Test the step base class defaults."""

    def test_always_applies(self):
        self.assertTrue(RepairStepBase().should_apply(RepairConfig()))

    def test_process_not_implemented(self):
        with self.assertRaises(NotImplementedError):
            RepairStepBase().process("x", RepairConfig())


if __name__ == "__main__":
    unittest.main()
