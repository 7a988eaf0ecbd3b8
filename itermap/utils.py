"""Helpers shared by the adaptors: pair splitting and probing foreign iterators."""

import logging
from typing import Any, Iterator, Tuple

from itermap.models import SizeHint

logger = logging.getLogger(__name__)


class NotAPairError(TypeError):
    """Raised when an element does not unpack into exactly two values."""

    def __init__(self, item: Any):
        self.item = item
        super().__init__(f"expected a two-element pair, got {item!r}")


def split_pair(item: Any) -> Tuple[Any, Any]:
    """Unpack ``item`` into ``(first, second)`` or raise NotAPairError."""
    try:
        first, second = item
    except (TypeError, ValueError) as e:
        raise NotAPairError(item) from e
    return first, second


def size_hint_of(iterator: Iterator) -> SizeHint:
    """Best known bounds for an iterator we did not build ourselves.

    Adaptors and anything else exposing ``size_hint()`` are asked directly;
    a plain tuple ``(lower, upper)`` is accepted too. Iterators with
    ``__len__`` are exact. Everything else is unknown: ``__length_hint__``
    is only an estimate and cannot serve as a bound.
    """
    probe = getattr(iterator, "size_hint", None)
    if probe is not None:
        hint = probe()
        if isinstance(hint, SizeHint):
            return hint
        lower, upper = hint
        return SizeHint(lower=lower, upper=upper)
    if hasattr(iterator, "__len__"):
        return SizeHint.exact(len(iterator))
    return SizeHint.unknown()
