"""Streaming unigram, bigram and trigram counts over a token sequence.

Tokens are fed one at a time in corpus order. Only the previous two tokens
are kept, so memory grows with the vocabulary and not with the corpus.
The lookback window is never reset: n-grams span line and file boundaries.

Keys are space-joined strings:
  Unigrams:  'w1'
  Bigrams:   'w1 w2'
  Trigrams:  'w1 w2 w3'

Usage:
    acc = NgramAccumulator()
    for token in tokens:
        acc.ingest(token)
    unigrams, bigrams, trigrams = acc.tables()
"""

from collections import Counter


class NgramAccumulator:

    def __init__(self):
        self.unigrams = Counter()
        self.bigrams = Counter()
        self.trigrams = Counter()
        # Lookback window: previous token and the one before it.
        self.prev1 = ''
        self.prev2 = ''
        # Number of tokens ingested so far.
        self.position = 0

    def ingest(self, token):
        """Count one token and the bigram/trigram it completes.

        The trigram key is built from the token two back and the bigram
        key just formed, so both share the same join.
        """
        self.unigrams[token] += 1

        if self.position >= 1:
            bigram = self.prev1 + ' ' + token
            self.bigrams[bigram] += 1

            if self.position >= 2:
                self.trigrams[self.prev2 + ' ' + bigram] += 1

        self.prev2 = self.prev1
        self.prev1 = token
        self.position += 1

    @property
    def number_tokens(self):
        return self.position

    def tables(self):
        """Return the (unigrams, bigrams, trigrams) Counters."""
        return self.unigrams, self.bigrams, self.trigrams


def sorted_items(table):
    """(key, count) pairs in lexicographic key order."""
    return sorted(table.items())
