"""Write and read the report files produced by a corpus run.

Frequency reports (one entry per line, keys in lexicographic order):
  key left-justified to a fixed width, then the count and a space.
  Unigrams are padded to 20 columns, bigrams to 25, trigrams to 35.
  Longer keys are written in full.

Letter report (26 lines, a..z):
  letter \\t count

Word transcript: one token per line in the order met.

Filenames ending in .gz are read and written gzip-compressed.
"""

import gzip
import json
import re
from collections import Counter

from letter_histogram import ALPHABET
from ngram_accumulator import sorted_items

UNIGRAM_WIDTH = 20
BIGRAM_WIDTH = 25
TRIGRAM_WIDTH = 35

# Keys are letters and spaces only, so the count starts at the first digit.
FREQUENCY_LINE = re.compile(r'^([a-z ]*?) *(\d+) *$')


class ReportWriteError(Exception):
    """An output file could not be opened for writing."""

    def __init__(self, filename, reason):
        super().__init__(f'Unable to open {filename} for writing: {reason}')
        self.filename = filename


def _opener(filename):
    return gzip.open if str(filename).endswith('.gz') else open


def open_report(filename, mode='wt'):
    """Open a report file for writing, raising ReportWriteError on failure."""
    try:
        return _opener(filename)(filename, mode, encoding='utf-8')
    except OSError as e:
        raise ReportWriteError(filename, e.strerror or e) from e


def write_frequency_table(table, f, width):
    """Write a frequency table to an open file."""
    for key, count in sorted_items(table):
        f.write(f'{key:<{width}}{count} \n')


def save_frequency_table(table, filename, width):
    with open_report(filename) as f:
        write_frequency_table(table, f, width)


def save_ngram_reports(accumulator, unigram_file, bigram_file, trigram_file):
    """Save the three frequency tables of an accumulator."""
    unigrams, bigrams, trigrams = accumulator.tables()
    save_frequency_table(unigrams, unigram_file, UNIGRAM_WIDTH)
    save_frequency_table(bigrams, bigram_file, BIGRAM_WIDTH)
    save_frequency_table(trigrams, trigram_file, TRIGRAM_WIDTH)


def save_letter_counts(histogram, filename):
    with open_report(filename) as f:
        for a, n in histogram.items():
            f.write(f'{a}\t{n}\n')


def save_summary(summary, filename):
    with open_report(filename) as f:
        json.dump(summary, f, indent=2, sort_keys=True)
        f.write('\n')


def load_frequency_table(filename):
    """Load a frequency report (plain or gzipped).

    Returns:
        Counter mapping key string -> int count.
    """
    counts = Counter()
    with _opener(filename)(filename, 'rt', encoding='utf-8') as f:
        for lineno, line in enumerate(f, 1):
            if not line.strip():
                continue
            m = FREQUENCY_LINE.match(line.rstrip('\n'))
            if m is None:
                raise ValueError(f'{filename}:{lineno}: not a frequency line: {line!r}')
            counts[m.group(1)] = int(m.group(2))
    return counts


def load_letter_counts(filename):
    """Load a letter report, returning 26 counts in alphabetical order."""
    counts = dict.fromkeys(ALPHABET, 0)
    with _opener(filename)(filename, 'rt', encoding='utf-8') as f:
        for line in f:
            if not line.strip():
                continue
            a, n = line.rstrip('\n').split('\t')
            if a not in counts:
                raise ValueError(f'{filename}: unknown letter {a!r}')
            counts[a] = int(n)
    return [counts[a] for a in ALPHABET]
