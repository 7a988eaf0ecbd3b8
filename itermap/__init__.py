"""
itermap - lazy adaptors for iterators over key/value pairs.

Lift any iterable of two-element pairs (for example a dict) with
``itermap()`` and chain ``map_keys``, ``map_values``, ``filter_keys``,
``filter_values`` and ``swap`` on it. Each call wraps the previous iterator;
nothing runs until you iterate.
"""

from itermap.capabilities import DoubleEnded, ExactSize, Fused
from itermap.carrier import Carrier
from itermap.filter import FilterKeys, FilterValues
from itermap.lazy import Fuse, IterMap, Rev
from itermap.map import MapKeys, MapValues
from itermap.models import Capability, SizeHint
from itermap.swap import Swap
from itermap.utils import NotAPairError

# Last, so the free function ``swap`` wins over the ``itermap.swap`` module.
from itermap.sources import (
    CollectionSource,
    IteratorSource,
    filter_keys,
    filter_values,
    itermap,
    map_keys,
    map_values,
    swap,
)

__all__ = [
    "Capability",
    "Carrier",
    "CollectionSource",
    "DoubleEnded",
    "ExactSize",
    "FilterKeys",
    "FilterValues",
    "Fuse",
    "Fused",
    "IterMap",
    "IteratorSource",
    "MapKeys",
    "MapValues",
    "NotAPairError",
    "Rev",
    "SizeHint",
    "Swap",
    "filter_keys",
    "filter_values",
    "itermap",
    "map_keys",
    "map_values",
    "swap",
]
