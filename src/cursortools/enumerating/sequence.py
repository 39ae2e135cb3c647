"""Enumerate: pairs a counter with the elements of a wrapped sequence."""

import logging

import numpy as np

from cursortools.contracts import get_config
from cursortools.core import CursorSequence, IteratorCategory, category_of, clone, cursors_for, distance
from cursortools.core.integral import infer_dtype, to_int
from cursortools.enumerating.iterator import EnumerateIterator

logger = logging.getLogger(__name__)


class Enumerate(CursorSequence):
    """Lazy sequence of ``(index, element)`` pairs.

    The index starts at ``start`` and grows by exactly one per step
    regardless of how the wrapped sequence steps.

    ``begin()`` and ``end()`` each take fresh cursors from the wrapped
    sequence. A generator is consumed by the first call, so over single-pass
    iterables use ``bounds()`` (as iteration does) to build both together.

    Parameters
    ----------
    sequence : sequence or iterable
        Anything with ``begin()``/``end()``, a Python sequence, or an iterable.
    start : int, default 0
        Index of the first element.
    dtype : numpy dtype, optional
        Integral type of the index; defaults to ``enumerate.index_dtype``.

    Examples
    --------
    >>> list(Enumerate(["a", "b", "c"], 10))
    [(10, 'a'), (11, 'b'), (12, 'c')]
    """

    def __init__(self, sequence, start=0, dtype=None):
        if dtype is None:
            dtype = get_config().enumerate.index_dtype
        self._dtype = infer_dtype(default=dtype)
        self._sequence = sequence
        self._start = to_int(start, self._dtype)

    @property
    def sequence(self):
        return self._sequence

    @property
    def start(self) -> int:
        return self._start

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def begin(self) -> EnumerateIterator:
        first, _ = cursors_for(self._sequence)
        return EnumerateIterator(self._start, first, self._dtype)

    def end(self) -> EnumerateIterator:
        return self.bounds()[1]

    def bounds(self):
        """``begin()`` and ``end()`` built from one pair of wrapped cursors."""
        first, last = cursors_for(self._sequence)
        return EnumerateIterator(self._start, clone(first), self._dtype), self._end(first, last)

    def _end(self, first, last) -> EnumerateIterator:
        if not category_of(last).supports(IteratorCategory.BIDIRECTIONAL):
            # a forward-only end cursor is never retreated from
            return EnumerateIterator(None, last, self._dtype)
        if not category_of(last).supports(IteratorCategory.RANDOM_ACCESS):
            logger.debug("Measuring bidirectional sequence by traversal")
        return EnumerateIterator(self._start + distance(first, last), last, self._dtype)

    def __repr__(self):
        return f"Enumerate({self._sequence!r}, start={self._start})"


def make_enumerate(sequence, start=0, dtype=None) -> Enumerate:
    """Create an enumeration of ``sequence`` starting at ``start``."""
    return Enumerate(sequence, start, dtype)
