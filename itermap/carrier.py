"""Internal holder shared by the map and filter adaptors."""

from typing import Any, Callable, Iterator


class Carrier:
    """
    Pairs an inner iterator with the operation applied to each of its elements.

    The carrier owns both: the iterator is advanced only through the adaptor
    holding this carrier, and the operation may keep whatever state it closed
    over.
    """

    def __init__(self, iterator: Iterator, op: Callable[[Any], Any]):
        if not callable(op):
            raise TypeError(f"expected a callable, got {type(op).__name__}")
        self.iterator = iterator
        self.op = op

    def __call__(self, arg: Any) -> Any:
        """Apply the operation to one element.

        A StopIteration escaping the operation would read as the end of the
        sequence to whoever is pulling, so it is turned into a RuntimeError,
        as generators do.
        """
        try:
            return self.op(arg)
        except StopIteration as exc:
            raise RuntimeError("operation raised StopIteration") from exc

    def __repr__(self):
        # The operation is usually a lambda; its repr says nothing useful.
        return f"Carrier(iterator={self.iterator!r}, ...)"
