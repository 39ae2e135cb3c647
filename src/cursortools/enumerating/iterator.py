"""EnumerateIterator: pairs a running index with a wrapped cursor."""

from typing import Optional

import numpy as np

from cursortools.contracts import check, require
from cursortools.core import Cursor, CursorTraits, IteratorCategory, Reference, category_of, clone, traits_of
from cursortools.core.integral import fits, integral_dtype, to_int


class EnumerateIterator(Cursor):
    """Cursor yielding ``(index, element)`` pairs.

    Equality and ordering are decided by the wrapped cursor alone; the index
    is derived state. Equal cursors must nevertheless carry equal indices,
    which is verified as an intermediate check. An index of ``None`` marks
    an end cursor whose index is unknown (forward-only sequences) and is
    exempt from that check.

    The category is exactly the wrapped cursor's.
    """

    def __init__(self, index: Optional[int], cursor, dtype=np.int64):
        self._dtype = integral_dtype(dtype)
        self._index = None if index is None else to_int(index)
        self._cursor = cursor

    # Accessors

    @property
    def index(self) -> Optional[int]:
        return self._index

    @property
    def cursor(self):
        """The wrapped cursor."""
        return self._cursor

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def category(self) -> IteratorCategory:
        return category_of(self._cursor)

    @property
    def difference_type(self) -> np.dtype:
        return traits_of(self._cursor).difference_type

    @property
    def mutable(self) -> bool:
        return traits_of(self._cursor).reference.mutable

    @property
    def traits(self) -> CursorTraits:
        wrapped = traits_of(self._cursor)
        index_type = self._dtype.type
        return CursorTraits(
            difference_type=wrapped.difference_type,
            reference=(Reference(index_type), wrapped.reference),
            pointer=(index_type, wrapped.pointer),
            value_type=(index_type, wrapped.value_type),
            iterator_category=wrapped.iterator_category,
        )

    # Primitives

    def deref(self):
        require(fits(self._index, self._dtype), "index is representable in the index dtype")
        return self._dtype.type(self._index), self._cursor.deref()

    def set(self, value) -> None:
        """Assign the wrapped element; the index is not assignable."""
        self._cursor.set(value)

    def advance(self):
        self._cursor.advance()
        if self._index is not None:
            self._index += 1
        return self

    def retreat(self):
        self.require_category(IteratorCategory.BIDIRECTIONAL, "retreat")
        self._cursor.retreat()
        if self._index is not None:
            self._index -= 1
        return self

    def jump(self, n):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "jump")
        n = to_int(n)
        self._cursor += n
        if self._index is not None:
            self._index += n
        return self

    def distance_from(self, other):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "distance")
        return self._cursor - other._cursor

    def _check_indices(self, other) -> None:
        check(
            lambda: self._index is None or other._index is None or self._index == other._index,
            "equal enumerate cursors carry equal indices",
        )

    def __eq__(self, other):
        if not isinstance(other, EnumerateIterator):
            return NotImplemented
        result = self._cursor == other._cursor
        if result:
            self._check_indices(other)
        return result

    def __lt__(self, other):
        if not isinstance(other, EnumerateIterator):
            return NotImplemented
        self.require_category(IteratorCategory.RANDOM_ACCESS, "ordering")
        return self._cursor < other._cursor

    def copy(self):
        return EnumerateIterator(self._index, clone(self._cursor), self._dtype)

    def __repr__(self):
        return f"EnumerateIterator(index={self._index}, cursor={self._cursor!r})"
