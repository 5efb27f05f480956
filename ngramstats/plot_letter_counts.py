#!/usr/bin/env python3
"""Plot a saved letter count report as a bar chart."""
import argparse
import sys

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from letter_histogram import ALPHABET
from reports import load_letter_counts


def plot_letter_counts(counts, out_path, title='Letter frequencies', relative=False):
    values = np.asarray(counts, dtype=float)
    if relative and values.sum() > 0:
        values = values / values.sum()

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.bar(range(len(ALPHABET)), values, color='steelblue')
    ax.set_xticks(range(len(ALPHABET)))
    ax.set_xticklabels(list(ALPHABET))
    ax.set_xlabel('letter')
    ax.set_ylabel('relative frequency' if relative else 'count')
    ax.set_title(title)

    plt.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Plot letter counts saved by run_ngrams.py')
    parser.add_argument('input', type=str, help='filename of letter count report')
    parser.add_argument('output', type=str, help='filename of output image (e.g. letters.png)')
    parser.add_argument('--relative', action='store_true', help='Plot proportions instead of raw counts')
    parser.add_argument('--title', default='Letter frequencies', help='Title of the plot')
    args = parser.parse_args(argv)

    counts = load_letter_counts(args.input)
    plot_letter_counts(counts, args.output, title=args.title, relative=args.relative)
    print(f'Plot saved to {args.output}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
