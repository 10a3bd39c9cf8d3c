"""
Test cases for processing limits and error types.
"""

import unittest

from jsonsift.security.exceptions import (
    ErrorContextBuilder,
    NoJsonFoundError,
    ParseError,
    SecurityError,
)
from jsonsift.security.limits import LimitValidator
from jsonsift.utils.config import ScanLimits


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator functionality."""

    def setUp(self):
        self.validator = LimitValidator(ScanLimits(max_input_size=100, max_fragments=3))

    def test_input_size_validation_pass(self):
        self.validator.validate_input_size("x" * 100)  # Should not raise

    def test_input_size_validation_fail(self):
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_input_size("x" * 101)
        self.assertIn("Input size 101 exceeds limit 100", str(cm.exception))

    def test_fragment_counting(self):
        self.assertTrue(self.validator.count_fragment())
        self.assertTrue(self.validator.count_fragment())
        self.assertFalse(self.validator.count_fragment())

    def test_reset(self):
        self.validator.count_fragment()
        self.validator.reset()
        self.assertEqual(self.validator.fragment_count, 0)


class TestErrors(unittest.TestCase):
    """Test error context and messages."""

    def test_build_context(self):
        ctx = ErrorContextBuilder.build_context(9, "line one\nline two")
        self.assertEqual((ctx.line, ctx.column), (2, 1))
        self.assertIn("line two", ctx.context_text)

    def test_build_context_empty_text(self):
        ctx = ErrorContextBuilder.build_context(0, "")
        self.assertEqual((ctx.line, ctx.column, ctx.context_text), (1, 1, ""))

    def test_parse_error_message(self):
        error = ParseError("Invalid JSON", 3, 7)
        self.assertEqual(str(error), "Invalid JSON at line 3, column 7")
        self.assertEqual((error.line, error.column), (3, 7))

    def test_parse_error_at_position(self):
        error = ParseError.at_position("Bad", 4, '{"a" 1}')
        self.assertEqual((error.line, error.column), (1, 5))
        self.assertIn('{"a" 1}', str(error))

    def test_no_json_found_is_parse_error(self):
        error = NoJsonFoundError()
        self.assertIsInstance(error, ParseError)
        self.assertEqual(str(error), "No JSON found")


if __name__ == "__main__":
    unittest.main()
