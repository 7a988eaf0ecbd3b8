"""
Chainable, lazy iterator adaptors over key/value pairs.

Every adaptor is an ``IterMap``: calling one of the chainable methods wraps
the current adaptor in a new one and returns it. Nothing is pulled from the
underlying iterator until you iterate.
"""

import logging
import operator
from abc import abstractmethod
from collections.abc import Iterator
from typing import Any, Callable, Dict, FrozenSet, List, Tuple

from itermap.capabilities import Fused, DoubleEnded, capabilities_of, variant
from itermap.models import Capability, SizeHint
from itermap.utils import size_hint_of

logger = logging.getLogger(__name__)

ALL_CAPABILITIES: FrozenSet[Capability] = frozenset(Capability)


class IterMap(Iterator):
    """
    Base of every adaptor in this package.

    Subclasses declare which capabilities they pass through from their inner
    iterator (``propagates``) and which they hold no matter what (``grants``);
    construction returns the matching variant of the subclass.
    """

    propagates: FrozenSet[Capability] = frozenset()
    grants: FrozenSet[Capability] = frozenset()
    capabilities: FrozenSet[Capability] = frozenset()

    def __new__(cls, inner, *args, **kwargs):
        held = (capabilities_of(inner) & cls.propagates) | cls.grants
        chosen = variant(cls, frozenset(held)) if held else cls
        logger.debug(
            f"Built {cls.__name__} over {type(inner).__name__} "
            f"with capabilities {sorted(c.value for c in held)}"
        )
        return super().__new__(chosen)

    # --------- chainable operators (lazy) ----------
    def map_keys(self, fn: Callable[[Any], Any]) -> "IterMap":
        """Map the first element of every pair, leaving the second untouched."""
        from itermap.map import MapKeys
        return MapKeys(self, fn)

    def map_values(self, fn: Callable[[Any], Any]) -> "IterMap":
        """Map the second element of every pair, leaving the first untouched."""
        from itermap.map import MapValues
        return MapValues(self, fn)

    def filter_keys(self, pred: Callable[[Any], Any]) -> "IterMap":
        """Keep only the pairs whose first element satisfies ``pred``."""
        from itermap.filter import FilterKeys
        return FilterKeys(self, pred)

    def filter_values(self, pred: Callable[[Any], Any]) -> "IterMap":
        """Keep only the pairs whose second element satisfies ``pred``."""
        from itermap.filter import FilterValues
        return FilterValues(self, pred)

    def swap(self) -> "IterMap":
        """Turn every ``(k, v)`` into ``(v, k)``."""
        from itermap.swap import Swap
        return Swap(self)

    def fuse(self) -> "IterMap":
        """Guarantee nothing is yielded after the first StopIteration."""
        if isinstance(self, Fused):
            return self
        return Fuse(self)

    # --------- size ----------
    @abstractmethod
    def size_hint(self) -> SizeHint:
        """Bounds on the number of elements left."""

    def __length_hint__(self):
        return self.size_hint().lower

    # --------- forcing evaluation ----------
    def to_list(self) -> List[Tuple[Any, Any]]:
        return list(self)

    def to_dict(self) -> Dict[Any, Any]:
        return dict(self)

    # --------- helpers ----------
    @abstractmethod
    def _next_back(self):
        """Pull from the back; public as ``next_back`` on double-ended variants."""

    def __repr__(self):
        return f"{type(self).__name__}({self._inner!r})"


class OneToOne(IterMap):
    """Adaptors that yield exactly one element per inner element."""

    propagates = ALL_CAPABILITIES

    def size_hint(self) -> SizeHint:
        return size_hint_of(self._inner)

    def __length_hint__(self):
        return operator.length_hint(self._inner)


class Rev(OneToOne):
    """Pulls its inner iterator from the back when pulled from the front, and vice versa."""

    def __init__(self, inner: DoubleEnded):
        if not isinstance(inner, DoubleEnded):
            raise TypeError(f"{type(inner).__name__} cannot be pulled from the back")
        self._inner = inner

    def __next__(self):
        return self._inner.next_back()

    def _next_back(self):
        return next(self._inner)

    def rev(self):
        return self._inner


class Fuse(OneToOne):
    """Stays exhausted once its inner iterator has raised StopIteration."""

    propagates = frozenset({Capability.DOUBLE_ENDED, Capability.EXACT_SIZE})
    grants = frozenset({Capability.FUSED})

    def __init__(self, inner: Iterator):
        self._inner = inner
        self._done = False

    def __next__(self):
        return self._pull(self._inner.__next__)

    def _next_back(self):
        return self._pull(self._inner.next_back)

    def _pull(self, pull):
        if self._done:
            raise StopIteration
        try:
            return pull()
        except StopIteration:
            self._done = True
            raise

    def size_hint(self) -> SizeHint:
        if self._done:
            return SizeHint.exact(0)
        return super().size_hint()

    def __length_hint__(self):
        if self._done:
            return 0
        return super().__length_hint__()
