#letter_histogram.py

import string

import numpy as np

ALPHABET = string.ascii_lowercase


class LetterHistogram:
	"""
	Occurrence counts of the 26 letters over all tokens seen.

	Index 0 is 'a', index 25 is 'z'. Tokens are assumed to be lowercase
	ASCII letters only, as produced by the tokenizer.
	"""

	def __init__(self):
		self.letter_counts = np.zeros(len(ALPHABET), dtype=np.int64)

	def record(self, token):
		## one increment per letter, not per token
		idx = np.frombuffer(token.encode('ascii'), dtype=np.uint8) - ord('a')
		self.letter_counts += np.bincount(idx, minlength=len(ALPHABET))

	def counts(self):
		return self.letter_counts.copy()

	def items(self):
		return [(a, int(n)) for a, n in zip(ALPHABET, self.letter_counts)]

	def total(self):
		return int(np.sum(self.letter_counts))
