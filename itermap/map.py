"""Adaptors mapping one element of every pair."""

from abc import abstractmethod
from typing import Any, Callable, Iterator, Tuple

from itermap.carrier import Carrier
from itermap.lazy import OneToOne
from itermap.utils import split_pair


class _MapPair(OneToOne):
    """Shared plumbing: one inner pull, one call of the operation, one pair out."""

    def __init__(self, inner: Iterator, op: Callable[[Any], Any]):
        self._carrier = Carrier(inner, op)

    @property
    def _inner(self):
        return self._carrier.iterator

    def __next__(self):
        return self._apply(next(self._carrier.iterator))

    def _next_back(self):
        return self._apply(self._carrier.iterator.next_back())

    @abstractmethod
    def _apply(self, item) -> Tuple[Any, Any]:
        """Turn one inner element into the output pair."""

    def __repr__(self):
        return f"{type(self).__name__}({self._carrier!r})"


class MapKeys(_MapPair):
    """
    Maps keys, or the first element of a two-element pair, leaving the
    second element intact.

    >>> dict(MapKeys(iter({"a": 1}.items()), str.upper))
    {'A': 1}
    """

    def _apply(self, item):
        key, value = split_pair(item)
        return self._carrier(key), value


class MapValues(_MapPair):
    """
    Maps values, or the second element of a two-element pair, leaving the
    first element intact.

    >>> dict(MapValues(iter({"a": 1}.items()), lambda v: v * 10))
    {'a': 10}
    """

    def _apply(self, item):
        key, value = split_pair(item)
        return key, self._carrier(value)
