#corpus.py

# Discover the text files under a directory and run them through the
# tokenizer, letter histogram and n-gram accumulator in a single pass.

import logging
import os

import tokenizer
from letter_histogram import LetterHistogram
from ngram_accumulator import NgramAccumulator


class CorpusReadError(Exception):
	"""An input directory or file could not be read."""

	def __init__(self, filename, reason):
		super().__init__(f'File {filename} could not be read: {reason}')
		self.filename = filename


def discover_files(root, suffix='.txt'):
	"""
	Return the paths of all files under root whose name ends with suffix.

	Depth first, with entries of each directory visited in sorted name order
	and subdirectories descended into where they are met.
	"""
	if not os.path.isdir(root):
		raise CorpusReadError(root, 'not a directory')
	paths = []
	seen = set()
	stack = [os.fspath(root)]
	while stack:
		path = stack.pop()
		if os.path.isdir(path):
			## symlinked directories can form cycles
			real = os.path.realpath(path)
			if real in seen:
				continue
			seen.add(real)
			try:
				names = sorted(os.listdir(path))
			except OSError as e:
				raise CorpusReadError(path, e.strerror or e) from e
			## reversed so the first name is popped first
			stack.extend(os.path.join(path, name) for name in reversed(names))
		elif path.endswith(suffix):
			paths.append(path)
	return paths


def _read_lines(inf, path):
	try:
		yield from inf
	except (OSError, UnicodeDecodeError) as e:
		raise CorpusReadError(path, e) from e


class CorpusStatistics:

	def __init__(self):
		self.accumulator = NgramAccumulator()
		self.histogram = LetterHistogram()
		self.number_files = 0

		# Set options here.
		self.suffix = '.txt'
		self.encoding = 'utf-8'
		# If True, files that cannot be opened are logged and left out.
		# This changes the statistics, so the default is to fail.
		self.skip_unreadable = False

	def process_file(self, path, word_out=None):
		"""
		Feed every token of one file to the histogram and accumulator.
		If word_out is given each token is also written to it, one per line.

		A file that cannot be opened is skipped when skip_unreadable is set.
		A failure part way through a file is always fatal, since its earlier
		tokens have already been counted.
		"""
		try:
			inf = open(path, encoding=self.encoding)
		except OSError as e:
			if not self.skip_unreadable:
				raise CorpusReadError(path, e.strerror or e) from e
			logging.warning("Skipping unreadable file %s: %s", path, e.strerror or e)
			return False
		with inf:
			for line in _read_lines(inf, path):
				for token in tokenizer.tokenize(line):
					if word_out is not None:
						word_out.write(token + '\n')
					self.histogram.record(token)
					self.accumulator.ingest(token)
		self.number_files += 1
		return True

	def process(self, paths, word_out=None):
		for path in paths:
			self.process_file(path, word_out)
			logging.debug("Processed %s", path)

	def process_directory(self, root, word_out=None):
		paths = discover_files(root, self.suffix)
		logging.info("Found %d input files under %s", len(paths), root)
		self.process(paths, word_out)
		return paths

	def summary(self):
		unigrams, bigrams, trigrams = self.accumulator.tables()
		return {
			'n_files': self.number_files,
			'n_tokens': self.accumulator.number_tokens,
			'n_types': len(unigrams),
			'n_bigram_types': len(bigrams),
			'n_trigram_types': len(trigrams),
			'n_letters': self.histogram.total(),
		}
