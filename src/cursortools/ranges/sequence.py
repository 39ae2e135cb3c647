"""Range: lazy arithmetic sequence ``begin, begin+step, ...`` up to ``end``."""

import logging

import numpy as np

from cursortools.contracts import get_config, require
from cursortools.core import CursorSequence
from cursortools.core.integral import ceil_div, infer_dtype, to_int
from cursortools.ranges.iterator import RangeIterator

logger = logging.getLogger(__name__)


class Range(CursorSequence):
    """Immutable, restartable arithmetic sequence.

    ``Range(end)`` is ``Range(0, end, 1)``. The sequence stops on reaching
    ``end``: when the span is not a multiple of ``step`` the last value is
    the final lattice point before ``end`` and ``end()`` sits on the first
    lattice point past it.

    Parameters
    ----------
    begin : int
        First value (or the end, when it is the only argument).
    end : int, optional
        Bound that is never produced.
    step : int, default 1
        Increment; must point from ``begin`` toward ``end``.
    dtype : numpy dtype, optional
        Integral type of the values. Defaults to the dtype of numpy scalar
        arguments, else ``ranges.default_dtype`` from the configuration.

    Raises
    ------
    ContractViolation
        If ``step`` is zero or points away from ``end`` while
        ``begin != end``, or if a value does not fit ``dtype``.

    Examples
    --------
    >>> list(Range(5, 2, -1))
    [5, 4, 3]
    >>> len(Range(0, 10, 3))
    4
    """

    __slots__ = ("_begin", "_end", "_step", "_dtype", "_count")

    def __init__(self, begin, end=None, step=1, dtype=None):
        if end is None:
            begin, end = 0, begin
        if dtype is None:
            dtype = infer_dtype(begin, end, step, default=get_config().ranges.default_dtype)
        else:
            dtype = infer_dtype(default=dtype)

        self._dtype = dtype
        self._begin = to_int(begin, dtype)
        self._end = to_int(end, dtype)
        self._step = to_int(step, dtype)

        span = self._end - self._begin
        if span == 0:
            # empty range: any step, including zero, is accepted
            self._count = 0
        else:
            require(self._step != 0)
            require((span > 0) == (self._step > 0), "sign(end - begin) == sign(step)")
            self._count = ceil_div(span, self._step)
        logger.debug("Created %r with %d values", self, self._count)

    # Accessors

    @property
    def begin_value(self) -> int:
        return self._begin

    @property
    def end_value(self) -> int:
        return self._end

    @property
    def step(self) -> int:
        return self._step

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    # Cursors

    def begin(self) -> RangeIterator:
        return RangeIterator(self._begin, self._step, self._dtype)

    def end(self) -> RangeIterator:
        return RangeIterator(self._begin + self._count * self._step, self._step, self._dtype)

    # Sequence protocol

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, k):
        k = to_int(k)
        require(0 <= k < self._count, f"index {k} within range of length {self._count}")
        return self.begin()[k]

    def __eq__(self, other):
        if not isinstance(other, Range):
            return NotImplemented
        return (self._begin, self._end, self._step, self._dtype) == (
            other._begin, other._end, other._step, other._dtype
        )

    def __hash__(self):
        return hash((self._begin, self._end, self._step, self._dtype))

    def __repr__(self):
        return f"Range({self._begin}, {self._end}, {self._step}, dtype={self._dtype})"


def make_range(begin, end=None, step=1, dtype=None) -> Range:
    """Create a range spanning ``begin ... end`` (or ``0 ... begin``)."""
    return Range(begin, end, step, dtype)
