"""
Entry points: lifting a caller's iterable of pairs into an ``IterMap`` and
the free-function form of every adaptor.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Reversible, Sized
from typing import Any, Callable

from itermap.filter import FilterKeys, FilterValues
from itermap.lazy import ALL_CAPABILITIES, IterMap, OneToOne
from itermap.map import MapKeys, MapValues
from itermap.models import SizeHint
from itermap.swap import Swap

logger = logging.getLogger(__name__)


class CollectionSource(IterMap):
    """
    Walks a sized, reversible collection from both ends.

    Front and back each get their own iterator over the collection; the
    count of elements not yet taken from either end decides when they meet.
    The collection must not change size while this source is in use.
    """

    grants = ALL_CAPABILITIES

    def __init__(self, collection):
        self._inner = collection
        self._remaining = len(collection)
        self._front = iter(collection)
        self._back = None

    def __next__(self):
        if not self._remaining:
            raise StopIteration
        item = next(self._front)
        self._remaining -= 1
        return item

    def _next_back(self):
        if not self._remaining:
            raise StopIteration
        if self._back is None:
            self._back = reversed(self._inner)
        item = next(self._back)
        self._remaining -= 1
        return item

    def size_hint(self) -> SizeHint:
        return SizeHint.exact(self._remaining)


class IteratorSource(OneToOne):
    """Gives a foreign iterator the chainable methods, keeping its capabilities."""

    def __init__(self, inner: Iterator):
        self._inner = inner

    def __next__(self):
        return next(self._inner)

    def _next_back(self):
        return self._inner.next_back()


def itermap(iterable: Iterable) -> IterMap:
    """
    Lift an iterable of pairs into a chainable ``IterMap``.

    A mapping contributes its items. Sized, reversible collections (lists,
    tuples, dict views) can then be pulled from both ends and report their
    length; any other iterable is iterated as is.

    >>> itermap({"a": 1, "b": 2}).map_values(str).filter_keys(lambda k: k > "a").to_list()
    [('b', '2')]
    """
    if isinstance(iterable, IterMap):
        return iterable
    if isinstance(iterable, Mapping):
        iterable = iterable.items()
    if isinstance(iterable, Iterator):
        return IteratorSource(iterable)
    if isinstance(iterable, Sized) and isinstance(iterable, Reversible):
        return CollectionSource(iterable)
    logger.debug(f"{type(iterable).__name__} is not reversible, iterating it front to back only")
    return IteratorSource(iter(iterable))


def _as_iterator(iterable: Iterable) -> Iterator:
    # Iterators are wrapped as they are; anything else goes through itermap().
    if isinstance(iterable, Iterator):
        return iterable
    return itermap(iterable)


def map_keys(iterable: Iterable, fn: Callable[[Any], Any]) -> MapKeys:
    """Map the first element of every pair in ``iterable``."""
    return MapKeys(_as_iterator(iterable), fn)


def map_values(iterable: Iterable, fn: Callable[[Any], Any]) -> MapValues:
    """Map the second element of every pair in ``iterable``."""
    return MapValues(_as_iterator(iterable), fn)


def filter_keys(iterable: Iterable, pred: Callable[[Any], Any]) -> FilterKeys:
    """Keep the pairs of ``iterable`` whose first element satisfies ``pred``."""
    return FilterKeys(_as_iterator(iterable), pred)


def filter_values(iterable: Iterable, pred: Callable[[Any], Any]) -> FilterValues:
    """Keep the pairs of ``iterable`` whose second element satisfies ``pred``."""
    return FilterValues(_as_iterator(iterable), pred)


def swap(iterable: Iterable) -> Swap:
    """Swap the two elements of every pair in ``iterable``."""
    return Swap(_as_iterator(iterable))
