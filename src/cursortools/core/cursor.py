"""Cursor and sequence base classes.

A cursor is a mutable position in a sequence. The capability set mirrors
the iterator categories:

- every cursor: ``deref()``, ``advance()``, ``==``, ``copy()``
- bidirectional: ``retreat()``
- random access: ``+=``, ``-=``, ``cursor + n``, ``n + cursor``,
  ``cursor - n``, ``cursor - cursor``, ``cursor[n]``, ``<``, ``<=``, ``>``, ``>=``

Subclasses implement the primitive operations (``deref``, ``advance``,
``retreat``, ``jump``, ``distance_from``, ``__eq__``, ``__lt__``); the
operators here are derived from them and reject operations the cursor's
category does not offer.
"""

import copy
from abc import ABC, abstractmethod

import numpy as np

from cursortools.contracts import not_implemented, require_static
from cursortools.core.categories import IteratorCategory
from cursortools.core.integral import is_integral, to_int
from cursortools.core.traits import CursorTraits, Reference


class Cursor(ABC):
    """Base class for every cursor produced by ``cursortools``."""

    category = IteratorCategory.FORWARD
    difference_type = np.dtype(np.int64)
    value_type = object
    mutable = False

    # Cursors are mutable values
    __hash__ = None

    # Primitives

    @abstractmethod
    def deref(self):
        """Return the element at the current position."""

    @abstractmethod
    def advance(self):
        """Move one step forward; returns ``self``."""

    @abstractmethod
    def __eq__(self, other):
        ...

    def set(self, value) -> None:
        """Write ``value`` to the element at the current position."""
        require_static(self.mutable, f"{type(self).__name__} supports assignment")
        not_implemented(f"{type(self).__name__}.set")

    def retreat(self):
        """Move one step backward; returns ``self``."""
        self.require_category(IteratorCategory.BIDIRECTIONAL, "retreat")
        not_implemented(f"{type(self).__name__}.retreat")

    def jump(self, n):
        """Move ``n`` steps (negative moves backward); returns ``self``."""
        self.require_category(IteratorCategory.RANDOM_ACCESS, "jump")
        not_implemented(f"{type(self).__name__}.jump")

    def distance_from(self, other):
        """Number of steps from ``other`` to ``self``."""
        self.require_category(IteratorCategory.RANDOM_ACCESS, "distance")
        not_implemented(f"{type(self).__name__}.distance_from")

    def __lt__(self, other):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "ordering")
        return not_implemented(f"{type(self).__name__}.__lt__")

    def copy(self):
        """Return an independent cursor at the same position."""
        return copy.copy(self)

    # Derived

    def require_category(self, required: IteratorCategory, operation: str) -> None:
        require_static(
            self.category.supports(required),
            f"{operation} requires a {required.name.lower()} cursor, "
            f"{type(self).__name__} is {self.category.name.lower()}",
        )

    @property
    def traits(self) -> CursorTraits:
        return CursorTraits(
            difference_type=self.difference_type,
            reference=Reference(self.value_type, self.mutable),
            pointer=type(self),
            value_type=self.value_type,
            iterator_category=self.category,
        )

    def __iadd__(self, n):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "+=")
        return self.jump(n)

    def __isub__(self, n):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "-=")
        # negate as a Python int; unsigned numpy scalars wrap around
        return self.jump(-to_int(n))

    def __add__(self, n):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "+")
        result = self.copy()
        result += n
        return result

    def __radd__(self, n):
        return self.__add__(n)

    def __sub__(self, other):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "-")
        if is_integral(other) or not hasattr(other, "deref"):
            result = self.copy()
            result -= other
            return result
        return self.distance_from(other)

    def __getitem__(self, n):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "indexing")
        return (self + n).deref()

    def __le__(self, other):
        return self < other or self == other

    def __gt__(self, other):
        return not self <= other

    def __ge__(self, other):
        return not self < other


class CursorSequence(ABC):
    """Anything exposing ``begin()`` / ``end()`` cursors.

    Iterating a sequence walks a fresh ``begin()`` cursor until it equals
    ``end()``, so every traversal is independent.
    """

    @abstractmethod
    def begin(self) -> Cursor:
        ...

    @abstractmethod
    def end(self) -> Cursor:
        ...

    def bounds(self):
        """Fresh ``(begin(), end())`` pair built together."""
        return self.begin(), self.end()

    def __iter__(self):
        cursor, last = self.bounds()
        while cursor != last:
            yield cursor.deref()
            cursor.advance()
