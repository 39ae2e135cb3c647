"""RangeIterator: cursor over an arithmetic sequence.

The cursor holds its current value and step as Python ints together with
the numpy dtype they belong to; values are materialized as that dtype only
when dereferenced.
"""

import numpy as np

from cursortools.contracts import require
from cursortools.core import Cursor, IteratorCategory
from cursortools.core.integral import (
    difference_dtype,
    fits,
    integral_dtype,
    is_finite,
    is_signed,
    to_int,
    trunc_div,
)


class RangeIterator(Cursor):
    """Random-access cursor at ``value`` moving by ``step``.

    Two cursors are equal only when both value and step match, so a cursor
    built with a different step never silently terminates a traversal.
    Ordering, distance and cursor sums require equal steps.

    Parameters
    ----------
    value : int
        Current position.
    step : int
        Increment applied by ``advance``.
    dtype : numpy dtype, default int64
        Integral type shared by value and step.
    """

    category = IteratorCategory.RANDOM_ACCESS

    def __init__(self, value, step, dtype=np.int64):
        require(is_finite(value))
        require(is_finite(step))
        self._dtype = integral_dtype(dtype)
        self._value = to_int(value)
        self._step = to_int(step)

    # Accessors

    @property
    def value(self) -> int:
        return self._value

    @property
    def step(self) -> int:
        return self._step

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def value_type(self):
        return self._dtype.type

    @property
    def difference_type(self) -> np.dtype:
        return difference_dtype(self._dtype)

    @property
    def signed(self) -> bool:
        return is_signed(self._dtype)

    # Primitives

    def deref(self):
        require(fits(self._value, self._dtype), "value is representable in the range dtype")
        return self._dtype.type(self._value)

    def advance(self):
        self._value += self._step
        return self

    def retreat(self):
        # unsigned values cannot go below zero
        require(self.signed or self._value >= self._step)
        self._value -= self._step
        return self

    def jump(self, n):
        require(is_finite(n))
        n = to_int(n)
        require(self.signed or self._value + n * self._step >= 0, "jump does not underflow an unsigned range")
        self._value += n * self._step
        return self

    def _require_same_step(self, other) -> None:
        require(self._step == other._step)

    def distance_from(self, other):
        self._require_same_step(other)
        require(self._step != 0, "distance is defined for a nonzero step")
        result = trunc_div(self._value - other._value, self._step)
        # a full uint64 span does not fit int64
        require(fits(result, self.difference_type), "distance is representable in the difference type")
        return self.difference_type.type(result)

    def __eq__(self, other):
        if not isinstance(other, RangeIterator):
            return NotImplemented
        return self._value == other._value and self._step == other._step

    def __lt__(self, other):
        if not isinstance(other, RangeIterator):
            return NotImplemented
        self._require_same_step(other)
        return self._value < other._value

    def __le__(self, other):
        if not isinstance(other, RangeIterator):
            return NotImplemented
        self._require_same_step(other)
        return self._value <= other._value

    def __gt__(self, other):
        if not isinstance(other, RangeIterator):
            return NotImplemented
        self._require_same_step(other)
        return self._value > other._value

    def __ge__(self, other):
        if not isinstance(other, RangeIterator):
            return NotImplemented
        self._require_same_step(other)
        return self._value >= other._value

    def __add__(self, other):
        if isinstance(other, RangeIterator):
            # Sum of two cursors: value sum, shared step
            self._require_same_step(other)
            return RangeIterator(self._value + other._value, self._step, self._dtype)
        return super().__add__(other)

    def __getitem__(self, n):
        require(is_finite(n))
        value = self._value + self._step * to_int(n)
        require(fits(value, self._dtype), "value is representable in the range dtype")
        return self._dtype.type(value)

    def copy(self):
        return RangeIterator(self._value, self._step, self._dtype)

    def __repr__(self):
        return f"RangeIterator(value={self._value}, step={self._step}, dtype={self._dtype})"


def make_range_iterator(value, step, dtype=np.int64) -> RangeIterator:
    """Create a range cursor at ``value`` moving by ``step``."""
    return RangeIterator(value, step, dtype)
