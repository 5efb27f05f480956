"""Tests for tokenizer.py - splitting lines into lowercase words."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'ngramstats'))

from tokenizer import tokenize, tokenize_lines


class TestTokenize:
    """Tests for tokenize."""

    def test_punctuation_splits(self):
        assert list(tokenize("The quick, quick fox.")) == ['the', 'quick', 'quick', 'fox']

    def test_apostrophe_splits(self):
        """An apostrophe separates words like any other non-letter."""
        assert list(tokenize("don't")) == ['don', 't']

    def test_digits_split(self):
        assert list(tokenize("abc123def 4")) == ['abc', 'def']

    def test_lowercased(self):
        assert list(tokenize("HeLLo WORLD")) == ['hello', 'world']

    def test_non_ascii_letters_split(self):
        """Only a-z and A-Z form words."""
        assert list(tokenize("café naïve")) == ['caf', 'na', 've']

    def test_empty_line(self):
        assert list(tokenize("")) == []
        assert list(tokenize("  ... 42 !\n")) == []

    def test_no_empty_tokens(self):
        tokens = list(tokenize("--a--b--\t\tc"))
        assert tokens == ['a', 'b', 'c']
        assert all(tokens)

    def test_is_lazy_and_restartable(self):
        line = "one two"
        it = tokenize(line)
        assert next(it) == 'one'
        assert list(tokenize(line)) == ['one', 'two']
        assert list(it) == ['two']


class TestTokenizeLines:

    def test_lines_in_order(self):
        lines = ["Hello there\n", "\n", "general Kenobi\n"]
        assert list(tokenize_lines(lines)) == ['hello', 'there', 'general', 'kenobi']
