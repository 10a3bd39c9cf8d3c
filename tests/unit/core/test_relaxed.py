"""
Test cases for the relaxed value parser.

Tests cover the three parsing strategies and the single-quote heuristics.
"""

import unittest

from jsonsift.core.relaxed import (
    ParseAttempt,
    RelaxedValueParser,
    substitute_quotes,
    transliterate_quotes,
)


class TestRelaxedValueParser(unittest.TestCase):
    """Test the strict -> substitution -> transliteration ladder."""

    def setUp(self):
        self.parser = RelaxedValueParser()

    def test_strict_json(self):
        """Standard JSON is accepted by the first strategy."""
        attempt, value = self.parser.parse_with_attempt('{"a": 1, "b": [true, null]}')
        self.assertEqual(attempt, ParseAttempt.STRICT)
        self.assertEqual(value, {"a": 1, "b": [True, None]})

    def test_input_is_trimmed(self):
        self.assertEqual(self.parser.parse("  \n [1, 2]\t "), [1, 2])

    def test_quote_equivalence(self):
        """Single and double quoted documents parse to the same value."""
        self.assertEqual(
            self.parser.parse("{'a': 'b'}"), self.parser.parse('{"a": "b"}')
        )

    def test_single_quoted_document_uses_substitution(self):
        attempt, value = self.parser.parse_with_attempt("{'a': ['x', 'y']}")
        self.assertEqual(attempt, ParseAttempt.NAIVE_SUBSTITUTION)
        self.assertEqual(value, {"a": ["x", "y"]})

    def test_escaped_apostrophe(self):
        """A backslash-escaped apostrophe becomes a literal apostrophe."""
        attempt, value = self.parser.parse_with_attempt("{'name': 'O\\'Brien'}")
        self.assertEqual(attempt, ParseAttempt.TRANSLITERATION)
        self.assertEqual(value, {"name": "O'Brien"})

    def test_unescaped_apostrophe_inside_word(self):
        """An apostrophe followed by a letter does not close the string."""
        self.assertEqual(self.parser.parse("{'a': 'cat's toy'}"), {"a": "cat's toy"})

    def test_mixed_quote_styles(self):
        value = self.parser.parse("""{"a": "it's", 'b': 1}""")
        self.assertEqual(value, {"a": "it's", "b": 1})

    def test_double_quote_inside_single_quoted_string(self):
        value = self.parser.parse("""{'q': 'say "hi"'}""")
        self.assertEqual(value, {"q": 'say "hi"'})

    def test_apostrophe_before_space_closes_string(self):
        """Known limit: an apostrophe followed by whitespace always closes."""
        self.assertIsNone(self.parser.parse("{'a': 'rock 'n' roll'}"))

    def test_not_json(self):
        self.assertEqual(self.parser.try_parse("hello world"), (False, None))
        self.assertEqual(self.parser.try_parse("it's"), (False, None))

    def test_null_is_distinguished_from_failure(self):
        self.assertEqual(self.parser.try_parse("null"), (True, None))

    def test_empty_input(self):
        self.assertEqual(self.parser.try_parse(""), (False, None))
        self.assertEqual(self.parser.try_parse("   "), (False, None))

    def test_non_standard_constants_rejected(self):
        self.assertIsNone(self.parser.parse("[NaN]"))
        self.assertIsNone(self.parser.parse('{"a": Infinity}'))

    def test_trailing_comma_rejected(self):
        self.assertIsNone(self.parser.parse('{"a": 1,}'))
        self.assertIsNone(self.parser.parse("['a', 'b',]"))

    def test_duplicate_keys_last_write_wins_in_first_position(self):
        value = self.parser.parse('{"b": 1, "a": 2, "b": 3}')
        self.assertEqual(list(value), ["b", "a"])
        self.assertEqual(value["b"], 3)

    def test_scalars(self):
        self.assertEqual(self.parser.parse("42"), 42)
        self.assertEqual(self.parser.parse("'text'"), "text")
        self.assertIs(self.parser.parse("true"), True)


class TestQuoteRewriting(unittest.TestCase):
    """Test the text rewrites used by strategies two and three."""

    def test_substitute_quotes(self):
        self.assertEqual(substitute_quotes("{'a': 'b'}"), '{"a": "b"}')

    def test_substitute_quotes_keeps_escaped_apostrophe(self):
        self.assertEqual(substitute_quotes("'O\\'B'"), "\"O\\'B\"")

    def test_transliterate_simple(self):
        self.assertEqual(transliterate_quotes("{'a': 'b'}"), '{"a": "b"}')

    def test_transliterate_keeps_inner_apostrophe(self):
        self.assertEqual(transliterate_quotes("['it's']"), '["it\'s"]')

    def test_transliterate_escaped_apostrophe(self):
        self.assertEqual(transliterate_quotes("'O\\'Brien'"), "\"O'Brien\"")

    def test_transliterate_escapes_double_quote(self):
        self.assertEqual(transliterate_quotes("'a\"b'"), '"a\\"b"')

    def test_transliterate_leaves_double_quoted_strings(self):
        text = '{"a": "it\'s"}'
        self.assertEqual(transliterate_quotes(text), text)

    def test_transliterate_copies_other_escapes(self):
        self.assertEqual(transliterate_quotes("'a\\nb'"), '"a\\nb"')

    def test_transliterate_apostrophe_at_end_of_input_closes(self):
        self.assertEqual(transliterate_quotes("'abc'"), '"abc"')


if __name__ == "__main__":
    unittest.main()
