"""Shared fixtures for the ngramstats test suite."""

import os
import sys
import pytest

# Add ngramstats to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'ngramstats'))


def write_corpus(root, files):
    """Create text files under root from a {relative path: text} dict."""
    for name, text in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')
    return root


@pytest.fixture
def empty_corpus(tmp_path):
    """An input directory with no files in it."""
    root = tmp_path / 'corpus'
    root.mkdir()
    return root


@pytest.fixture
def two_file_corpus(tmp_path):
    """
    Two files read in order: a.txt ends with 'end', b.txt starts with 'start'.
    """
    return write_corpus(tmp_path / 'corpus', {
        'a.txt': 'The quick, quick fox.\nThe end\n',
        'b.txt': 'Start again. The fox!\n',
    })


@pytest.fixture
def nested_corpus(tmp_path):
    """A small tree with subdirectories and files that are not .txt."""
    return write_corpus(tmp_path / 'corpus', {
        'b.txt': 'beta\n',
        'a/z.txt': 'zeta\n',
        'a/deeper/y.txt': 'upsilon\n',
        'a/notes.md': 'ignored\n',
        'c.txt.bak': 'ignored\n',
        'd/e.txt': 'epsilon\n',
    })
