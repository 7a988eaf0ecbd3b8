"""
Optional iterator capabilities and the capability-gated adaptor variants.

A plain iterator can only be pulled from the front. Some can do more:

* ``DoubleEnded``: ``next_back()`` pulls from the back.
* ``ExactSize``: ``len()`` is the exact number of elements left.
* ``Fused``: once ``StopIteration`` is raised it is raised forever.

The first two are recognised structurally, like the ``collections.abc``
one-trick ponies. ``Fused`` is a promise that cannot be seen from the
outside, so types opt in with ``Fused.register``.

An adaptor only offers a capability when it can honour it over its inner
iterator. Rather than checking on every call, construction picks a subclass
of the adaptor (a *variant*) that carries exactly the capabilities it has,
so ``isinstance(adaptor, DoubleEnded)`` and ``hasattr(adaptor, "next_back")``
agree.
"""

import functools
import types
from abc import abstractmethod
from collections.abc import Iterator
from typing import FrozenSet

from itermap.models import Capability


def _has_methods(C, *methods):
    mro = C.__mro__
    for method in methods:
        for B in mro:
            if method in B.__dict__:
                if B.__dict__[method] is None:
                    return NotImplemented
                break
        else:
            return NotImplemented
    return True


class DoubleEnded(Iterator):
    """An iterator that can also be pulled from the back."""

    @abstractmethod
    def next_back(self):
        """Remove and return the last remaining element."""
        raise StopIteration

    @classmethod
    def __subclasshook__(cls, C):
        if cls is DoubleEnded:
            return _has_methods(C, "__next__", "next_back")
        return NotImplemented


class ExactSize(Iterator):
    """An iterator that knows exactly how many elements it has left."""

    @abstractmethod
    def __len__(self):
        return 0

    @classmethod
    def __subclasshook__(cls, C):
        if cls is ExactSize:
            return _has_methods(C, "__next__", "__len__")
        return NotImplemented


class Fused(Iterator):
    """An iterator that never yields again after its first StopIteration."""


# Generators and the builtin container iterators stay exhausted. The builtin
# map, filter, zip and enumerate pull their inputs again and are not fused.
Fused.register(types.GeneratorType)
for _builtin in (
    type(iter([])),
    type(iter(())),
    type(iter(range(0))),
    type(iter("")),
    type(iter(set())),
    type(iter({})),
    type(iter({}.values())),
    type(iter({}.items())),
    type(reversed([])),
    type(reversed({})),
    type(reversed({}.items())),
):
    Fused.register(_builtin)
del _builtin


class _PullBack(DoubleEnded):
    """Public back-pull surface of a double-ended variant."""

    def next_back(self):
        return self._next_back()

    def rev(self):
        """Reverse view: pulling from the front pulls this adaptor from the back."""
        from itermap.lazy import Rev
        return Rev(self)

    def __reversed__(self):
        return self.rev()


class _KnownLength(ExactSize):
    """Length of an exact-size variant, read off its size hint."""

    def __len__(self):
        return self.size_hint().lower


_MIXINS = {
    Capability.DOUBLE_ENDED: _PullBack,
    Capability.EXACT_SIZE: _KnownLength,
    Capability.FUSED: Fused,
}


def capabilities_of(iterator) -> FrozenSet[Capability]:
    """Capabilities an arbitrary iterator advertises."""
    held = getattr(type(iterator), "capabilities", None)
    if isinstance(held, frozenset):
        return held
    found = set()
    if isinstance(iterator, DoubleEnded):
        found.add(Capability.DOUBLE_ENDED)
    if isinstance(iterator, ExactSize):
        found.add(Capability.EXACT_SIZE)
    if isinstance(iterator, Fused):
        found.add(Capability.FUSED)
    return frozenset(found)


@functools.lru_cache(maxsize=None)
def variant(base: type, capabilities: FrozenSet[Capability]) -> type:
    """Subclass of ``base`` carrying exactly ``capabilities``.

    Variants are cached, so every ``MapKeys`` over a double-ended, exact-size
    iterator shares one class.
    """
    mixins = tuple(_MIXINS[c] for c in Capability if c in capabilities)
    namespace = {
        "__module__": base.__module__,
        "__qualname__": base.__qualname__,
        "__doc__": base.__doc__,
        "capabilities": capabilities,
    }
    return type(base)(base.__name__, (base,) + mixins, namespace)
