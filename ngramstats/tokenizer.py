"""Split lines of text into lowercase word tokens.

A token is a maximal run of ASCII letters. Everything else (digits,
punctuation, whitespace, apostrophes) separates tokens and is dropped,
so "don't" gives "don" and "t".
"""

import re

WORD_PATTERN = re.compile(r'[a-zA-Z]+')


def tokenize(line):
    """Yield the tokens of a line, lowercased, left to right."""
    for match in WORD_PATTERN.finditer(line):
        yield match.group(0).lower()


def tokenize_lines(lines):
    """Yield the tokens of each line in turn."""
    for line in lines:
        yield from tokenize(line)
