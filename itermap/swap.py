"""Pair-swap adaptor."""

from typing import Iterator

from itermap.lazy import OneToOne
from itermap.utils import split_pair


class Swap(OneToOne):
    """
    Turns every ``(k, v)`` into ``(v, k)``.

    Never drops an element, so length, back-pulling and fusing all carry over
    from the inner iterator unchanged.
    """

    def __init__(self, inner: Iterator):
        self._inner = inner

    def __next__(self):
        key, value = split_pair(next(self._inner))
        return value, key

    def _next_back(self):
        key, value = split_pair(self._inner.next_back())
        return value, key
