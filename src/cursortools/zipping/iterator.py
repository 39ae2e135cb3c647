"""ZipIterator: advances N cursors in lock-step."""

import numpy as np

from cursortools.contracts import check, require, require_static
from cursortools.core import Cursor, IteratorCategory, clone
from cursortools.core.integral import to_int
from cursortools.zipping.traits import ZipIteratorTraits


class ZipIterator(Cursor):
    """Cursor over a tuple of member cursors.

    Members are copied on construction and owned by the zip cursor. Every
    movement is applied to each member in turn; members belong to
    independent sequences so the order does not matter.

    Distance, equality and ordering are decided by the **first** member
    alone. Since all members move uniformly they must agree; that agreement
    is verified as an intermediate check when contracts are enabled, which
    catches members that were moved independently through :meth:`get`.

    The category is the weakest member category. Operations beyond it are
    rejected with a precondition ``ContractViolation``.
    """

    def __init__(self, *cursors):
        require_static(len(cursors) >= 1, "a zip cursor has at least one member")
        self._cursors = tuple(clone(cursor) for cursor in cursors)
        self._traits = ZipIteratorTraits.from_cursors(*self._cursors)

    # Accessors

    @property
    def traits(self) -> ZipIteratorTraits:
        return self._traits

    @property
    def category(self) -> IteratorCategory:
        return self._traits.iterator_category

    @property
    def difference_type(self) -> np.dtype:
        return self._traits.difference_type

    @property
    def value_type(self):
        return self._traits.value_type

    @property
    def arity(self) -> int:
        return len(self._cursors)

    @property
    def mutable(self) -> bool:
        return all(
            getattr(cursor, "mutable", callable(getattr(cursor, "set", None)))
            for cursor in self._cursors
        )

    @property
    def cursors(self) -> tuple:
        """The member cursors, in order."""
        return self._cursors

    def get(self, i: int):
        """Return the ``i``-th member cursor (the live object, not a copy)."""
        require(0 <= i < self.arity, f"member {i} exists in a zip of {self.arity}")
        return self._cursors[i]

    # Helpers

    def _for_each(self, op) -> None:
        self._cursors = tuple(op(cursor) for cursor in self._cursors)

    def _collect(self, op):
        values = tuple(op(cursor) for cursor in self._cursors)
        return values[0] if self.arity == 1 else values

    def _require_same_arity(self, other) -> None:
        require_static(self.arity == other.arity, "zip cursors of equal arity")

    def _all_members(self, other, op) -> bool:
        return all(op(mine, theirs) for mine, theirs in zip(self._cursors, other._cursors))

    # Primitives

    def deref(self):
        """Tuple of member elements; the bare element for a single member."""
        return self._collect(lambda cursor: cursor.deref())

    def set(self, value) -> None:
        require_static(self.mutable, "every zipped element is assignable")
        if self.arity == 1:
            self._cursors[0].set(value)
            return
        require(len(value) == self.arity, f"one value per member of a zip of {self.arity}")
        for cursor, element in zip(self._cursors, value):
            cursor.set(element)

    def advance(self):
        self._for_each(lambda cursor: cursor.advance())
        return self

    def retreat(self):
        self.require_category(IteratorCategory.BIDIRECTIONAL, "retreat")
        self._for_each(lambda cursor: cursor.retreat())
        return self

    def jump(self, n):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "jump")
        n = to_int(n)

        def _jump(cursor):
            cursor += n
            return cursor

        self._for_each(_jump)
        return self

    def __getitem__(self, n):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "indexing")
        n = to_int(n)
        return self._collect(lambda cursor: cursor[n])

    def distance_from(self, other):
        self.require_category(IteratorCategory.RANDOM_ACCESS, "distance")
        self._require_same_arity(other)
        result = self._cursors[0] - other._cursors[0]
        check(
            lambda: all((mine - theirs) == result for mine, theirs in zip(self._cursors, other._cursors)),
            "every member agrees with the first member's distance",
        )
        return self.difference_type.type(result)

    def __eq__(self, other):
        if not isinstance(other, ZipIterator):
            return NotImplemented
        self._require_same_arity(other)
        result = self._cursors[0] == other._cursors[0]
        check(
            lambda: self._all_members(other, lambda a, b: (a == b) == result),
            "every member agrees with the first member's equality",
        )
        return result

    def __lt__(self, other):
        if not isinstance(other, ZipIterator):
            return NotImplemented
        self.require_category(IteratorCategory.RANDOM_ACCESS, "ordering")
        self._require_same_arity(other)
        result = self._cursors[0] < other._cursors[0]
        check(
            lambda: self._all_members(other, lambda a, b: (a < b) == result),
            "every member agrees with the first member's ordering",
        )
        return result

    def copy(self):
        return ZipIterator(*self._cursors)

    def __repr__(self):
        members = ", ".join(repr(cursor) for cursor in self._cursors)
        return f"ZipIterator({members})"


def make_zip_iterator(*cursors) -> ZipIterator:
    """Create a zip cursor over copies of ``cursors``."""
    return ZipIterator(*cursors)
