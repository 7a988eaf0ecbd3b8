"""Adaptors keeping only the pairs whose key (or value) passes a predicate."""

from typing import Any, Callable, Iterator, Tuple

from itermap.carrier import Carrier
from itermap.lazy import IterMap
from itermap.models import Capability, SizeHint
from itermap.utils import size_hint_of, split_pair


class _FilterPair(IterMap):
    """
    Shared scan loop of the two filters.

    A pull keeps taking elements from the inner iterator until one passes or
    the inner iterator is exhausted. Rejected elements are gone for good.
    The count left can't be known without scanning, so filters are never
    exact-size.
    """

    propagates = frozenset({Capability.DOUBLE_ENDED, Capability.FUSED})

    # Position inside the pair the predicate looks at.
    _position = 0

    def __init__(self, inner: Iterator, predicate: Callable[[Any], Any]):
        self._carrier = Carrier(inner, predicate)

    @property
    def _inner(self):
        return self._carrier.iterator

    def __next__(self):
        return self._scan(self._carrier.iterator.__next__)

    def _next_back(self):
        return self._scan(self._carrier.iterator.next_back)

    def _scan(self, pull) -> Tuple[Any, Any]:
        predicate = self._carrier
        while True:
            pair = split_pair(pull())
            if predicate(pair[self._position]):
                return pair

    def size_hint(self) -> SizeHint:
        return size_hint_of(self._carrier.iterator).without_lower()

    def __repr__(self):
        return f"{type(self).__name__}({self._carrier!r})"


class FilterKeys(_FilterPair):
    """
    Filters on keys, or the first element of a two-element pair.

    >>> list(FilterKeys(iter([("a", 1), ("b", 2)]), lambda k: k != "a"))
    [('b', 2)]
    """

    _position = 0


class FilterValues(_FilterPair):
    """
    Filters on values, or the second element of a two-element pair.

    >>> list(FilterValues(iter([("a", 1), ("b", 2)]), lambda v: v > 1))
    [('b', 2)]
    """

    _position = 1
