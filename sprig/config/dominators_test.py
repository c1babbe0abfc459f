"""
dominators_test provides tests for DominatorsConfig.
"""
from __future__ import annotations

import unittest

from sprig.config import U32_MAX
from sprig.config.dominators import DominatorsConfig
from sprig.config.output import OutputFormat, StdoutDestination
from sprig.errors import MalformedArgument


class DominatorsConfigTest(unittest.TestCase):
    """
    DominatorsConfigTest provides tests for the DominatorsConfig class.
    """

    def test_new_has_documented_defaults(self) -> None:
        """
        test that both limits start unset and read as unbounded.
        """
        config = DominatorsConfig.new()
        self.assertIsNone(config.input)
        self.assertEqual(config.output_destination, StdoutDestination())
        self.assertIs(config.output_format, OutputFormat.TEXT)
        self.assertIsNone(config.max_depth)
        self.assertIsNone(config.max_rows)
        self.assertEqual(config.effective_max_depth, U32_MAX)
        self.assertEqual(config.effective_max_rows, U32_MAX)

    def test_limits_are_independent(self) -> None:
        """
        test that setting one limit leaves the other unbounded.
        """
        config = DominatorsConfig.new()
        config.set_max_depth(3)
        self.assertEqual(config.effective_max_depth, 3)
        self.assertEqual(config.effective_max_rows, U32_MAX)

        config.set_max_rows(0)
        self.assertEqual(config.effective_max_rows, 0)

    def test_rejects_negative(self) -> None:
        """
        test that negative limits are malformed.
        """
        config = DominatorsConfig.new()
        with self.assertRaises(MalformedArgument):
            config.set_max_rows(-2)

    def test_summary(self) -> None:
        """
        test the display strings for set and unset limits.
        """
        config = DominatorsConfig.new()
        config.set_max_depth(7)
        summary = config.summary()
        self.assertEqual(summary["max depth"], "7")
        self.assertEqual(summary["max rows"], "unbounded")


if __name__ == "__main__":
    unittest.main()
