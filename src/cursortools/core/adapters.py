"""Cursors over plain Python containers and iterables.

Adaptors accept any sequence exposing ``begin()`` / ``end()``. Everything
else is adapted here:

- ``collections.abc.Sequence`` and ``numpy.ndarray`` → :class:`IndexCursor`
  (random access, writable when the container is)
- any other iterable → :class:`IterableCursor` (forward only)
"""

import itertools
from collections.abc import Iterable, MutableSequence, Sequence

import numpy as np

from cursortools.contracts import require, require_static
from cursortools.core.categories import IteratorCategory
from cursortools.core.cursor import Cursor
from cursortools.core.integral import to_int

_EXHAUSTED = object()


def _element_type(container):
    if isinstance(container, np.ndarray):
        return container.dtype.type
    if isinstance(container, str):
        return str
    if isinstance(container, (bytes, bytearray)):
        return int
    return object


class IndexCursor(Cursor):
    """Random-access cursor addressing ``container[index]``."""

    category = IteratorCategory.RANDOM_ACCESS

    def __init__(self, container, index: int = 0):
        self._container = container
        self._index = to_int(index)

    @property
    def container(self):
        return self._container

    @property
    def index(self) -> int:
        return self._index

    @property
    def value_type(self):
        return _element_type(self._container)

    @property
    def mutable(self) -> bool:
        if isinstance(self._container, np.ndarray):
            return bool(self._container.flags.writeable)
        return isinstance(self._container, MutableSequence)

    def deref(self):
        return self._container[self._index]

    def set(self, value) -> None:
        require_static(self.mutable, f"{type(self._container).__name__} elements are assignable")
        self._container[self._index] = value

    def advance(self):
        self._index += 1
        return self

    def retreat(self):
        self._index -= 1
        return self

    def jump(self, n):
        self._index += to_int(n)
        return self

    def _require_same_container(self, other) -> None:
        require(self._container is other._container, "cursors address the same container")

    def distance_from(self, other):
        self._require_same_container(other)
        return self.difference_type.type(self._index - other._index)

    def __eq__(self, other):
        if not isinstance(other, IndexCursor):
            return NotImplemented
        self._require_same_container(other)
        return self._index == other._index

    def __lt__(self, other):
        if not isinstance(other, IndexCursor):
            return NotImplemented
        self._require_same_container(other)
        return self._index < other._index

    def __repr__(self):
        return f"IndexCursor({type(self._container).__name__}, index={self._index})"


class IterableCursor(Cursor):
    """Forward cursor over an arbitrary iterable.

    The current element is looked ahead and cached. Copies split the
    underlying iterator with ``itertools.tee`` so they advance
    independently. The end position is a sentinel cursor that compares
    equal to any exhausted cursor.

    Cursors are identified by the iterable they were built from. A
    single-pass iterable (a generator) supports one traversal only; take
    both cursors from one ``cursors_for`` call.
    """

    category = IteratorCategory.FORWARD

    def __init__(self, iterable: Iterable):
        self._source = iterable
        self._iterator = iter(iterable)
        self._position = 0
        self._current = next(self._iterator, _EXHAUSTED)

    @classmethod
    def sentinel(cls) -> "IterableCursor":
        """End cursor for any iterable."""
        cursor = cls.__new__(cls)
        cursor._source = None
        cursor._iterator = None
        cursor._position = None
        cursor._current = _EXHAUSTED
        return cursor

    @property
    def position(self):
        """Steps taken since the first element, ``None`` for the sentinel."""
        return self._position

    @property
    def exhausted(self) -> bool:
        return self._current is _EXHAUSTED

    def deref(self):
        require(not self.exhausted, "cursor is dereferenceable")
        return self._current

    def advance(self):
        require(not self.exhausted, "cursor is advanceable")
        self._current = next(self._iterator, _EXHAUSTED)
        self._position += 1
        return self

    def copy(self):
        if self._position is None:
            return self.sentinel()
        duplicate = type(self).__new__(type(self))
        self._iterator, duplicate._iterator = itertools.tee(self._iterator)
        duplicate._source = self._source
        duplicate._position = self._position
        duplicate._current = self._current
        return duplicate

    def __eq__(self, other):
        if not isinstance(other, IterableCursor):
            return NotImplemented
        if self._position is None or other._position is None:
            return self.exhausted and other.exhausted
        require(self._source is other._source, "cursors traverse the same iterable")
        return self._position == other._position

    def __repr__(self):
        if self._position is None:
            return "IterableCursor(<end>)"
        return f"IterableCursor(position={self._position})"


def cursors_for(sequence):
    """Return fresh ``(begin, end)`` cursors for ``sequence``."""
    if callable(getattr(sequence, "bounds", None)):
        return sequence.bounds()
    if callable(getattr(sequence, "begin", None)) and callable(getattr(sequence, "end", None)):
        return sequence.begin(), sequence.end()
    if isinstance(sequence, (Sequence, np.ndarray)):
        return IndexCursor(sequence, 0), IndexCursor(sequence, len(sequence))
    require_static(isinstance(sequence, Iterable), f"{type(sequence).__name__} is iterable")
    return IterableCursor(sequence), IterableCursor.sentinel()
