#!/usr/bin/env python3
"""Word, n-gram and letter frequencies for the text files under a directory."""

import argparse
import codecs
import logging
import sys

import reports
from corpus import CorpusStatistics, CorpusReadError, discover_files
from reports import ReportWriteError


def build_parser():
    parser = argparse.ArgumentParser(
        description='Extract the words of all text files under a directory and count '
                    'unigrams, bigrams, trigrams and letters.')
    parser.add_argument('input', type=str, help='directory searched recursively for input files')
    parser.add_argument('words', type=str, help='filename of output word list (one word per line)')
    parser.add_argument('letters', type=str, help='filename of output letter counts')

    parser.add_argument('--unigrams', default='wordFreq.txt', help='filename of output unigram counts (default wordFreq.txt)')
    parser.add_argument('--bigrams', default='bigramFreq.txt', help='filename of output bigram counts (default bigramFreq.txt)')
    parser.add_argument('--trigrams', default='trigramFreq.txt', help='filename of output trigram counts (default trigramFreq.txt)')
    parser.add_argument('--suffix', default='.txt', help='only read files whose name ends with this (default .txt)')
    parser.add_argument('--encoding', default='utf-8', help='encoding of the input files (default utf-8)')
    parser.add_argument('--skip-unreadable', action='store_true',
                        help='warn about input files that cannot be opened and leave them out, instead of stopping')
    parser.add_argument('--summary', help='save a JSON summary of the run in this file')
    parser.add_argument('--verbose', action='store_true', help='Print out progress information')
    return parser


def run(args):
    logging.info("Input files directory path name is: %s", args.input)

    stats = CorpusStatistics()
    stats.suffix = args.suffix
    stats.encoding = args.encoding
    stats.skip_unreadable = args.skip_unreadable

    paths = discover_files(args.input, stats.suffix)
    logging.info("Found %d input files", len(paths))

    with reports.open_report(args.words) as word_out:
        logging.info("%s successfully opened for writing words", args.words)
        stats.process(paths, word_out)

    reports.save_letter_counts(stats.histogram, args.letters)
    logging.info("Letter counts written to %s", args.letters)
    reports.save_ngram_reports(stats.accumulator, args.unigrams, args.bigrams, args.trigrams)

    summary = stats.summary()
    if args.summary:
        reports.save_summary(summary, args.summary)
    return summary


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        codecs.lookup(args.encoding)
    except LookupError:
        parser.error(f'unknown encoding: {args.encoding}')
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')
    try:
        summary = run(args)
    except (CorpusReadError, ReportWriteError) as e:
        logging.error("%s. Program terminated.", e)
        return 1

    print(f"{summary['n_files']} files, {summary['n_tokens']} tokens, "
          f"{summary['n_types']} types, {summary['n_bigram_types']} bigram types, "
          f"{summary['n_trigram_types']} trigram types")
    return 0


if __name__ == '__main__':
    sys.exit(main())
