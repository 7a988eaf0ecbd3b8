"""
Configuration for pytest to set up the proper import paths and shared fixtures.
"""

import sys
from collections import deque
from pathlib import Path
import pytest


# Add the project root to Python path so the itermap package imports without installing
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir))


class CallCounter:
    """Wraps a function and records every argument it was called with."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = []

    def __call__(self, arg):
        self.calls.append(arg)
        return self.fn(arg)

    @property
    def count(self):
        return len(self.calls)


class Flaky:
    """
    An iterator that is not fused: a ``None`` entry raises StopIteration once,
    after which pulling resumes with the next entry.
    """

    def __init__(self, entries):
        self._entries = deque(entries)

    def __iter__(self):
        return self

    def __next__(self):
        if not self._entries:
            raise StopIteration
        entry = self._entries.popleft()
        if entry is None:
            raise StopIteration
        return entry


class DequePairs:
    """A foreign double-ended, exact-size iterator (no itermap base classes)."""

    def __init__(self, pairs):
        self._pairs = deque(pairs)

    def __iter__(self):
        return self

    def __next__(self):
        if not self._pairs:
            raise StopIteration
        return self._pairs.popleft()

    def next_back(self):
        if not self._pairs:
            raise StopIteration
        return self._pairs.pop()

    def __len__(self):
        return len(self._pairs)


class HintedPairs:
    """A foreign iterator that reports its bounds as a plain tuple."""

    def __init__(self, pairs, hint):
        self._it = iter(pairs)
        self._hint = hint

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._it)

    def size_hint(self):
        return self._hint


@pytest.fixture
def letter_pairs():
    """Upper-case keys with their lower-case values, A through E."""
    return [("A", "a"), ("B", "b"), ("C", "c"), ("D", "d"), ("E", "e")]


@pytest.fixture
def lower_upper():
    """Lower-case keys with their upper-case values."""
    return [("a", "A"), ("b", "B"), ("c", "C")]


@pytest.fixture
def inventory():
    """A small dict with some zero counts."""
    return {"apple": 3, "banana": 0, "cherry": 7, "date": 0, "elderberry": 1}


@pytest.fixture
def counter():
    """Factory for call-counting wrappers."""
    return CallCounter


@pytest.fixture
def flaky():
    return Flaky


@pytest.fixture
def deque_pairs():
    return DequePairs


@pytest.fixture
def hinted_pairs():
    return HintedPairs
