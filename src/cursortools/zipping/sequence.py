"""Zip: iterates N sequences in lock-step, stopping at the shortest."""

import logging

from cursortools.contracts import require_static
from cursortools.core import CursorSequence, IteratorCategory, advanced, category_of, clone, cursors_for, distance
from cursortools.zipping.iterator import ZipIterator

logger = logging.getLogger(__name__)


class Zip(CursorSequence):
    """Lazy sequence of tuples drawn from N wrapped sequences.

    Sequences may have different lengths; the zip ends with the shortest.
    ``end()`` places every member at that common length so all members of
    the end cursor agree.

    Lengths of random-access members are computed by subtraction. The
    remaining members are walked together on copies of their cursors until
    the first of them ends, bounded by the shortest random-access length
    when there is one. Only a zip whose members are all unbounded never
    finishes ``end()``.

    ``begin()`` and ``end()`` each take fresh cursors from every member. A
    generator member is consumed by the first call, so over single-pass
    iterables use ``bounds()`` (as iteration does) to build both together.

    Examples
    --------
    >>> list(Zip([1, 2, 3, 4], ["x", "y"]))
    [(1, 'x'), (2, 'y')]
    """

    def __init__(self, *sequences):
        require_static(len(sequences) >= 1, "Zip wraps at least one sequence")
        self._sequences = sequences

    @property
    def sequences(self) -> tuple:
        return self._sequences

    @property
    def arity(self) -> int:
        return len(self._sequences)

    def begin(self) -> ZipIterator:
        return ZipIterator(*(cursors_for(sequence)[0] for sequence in self._sequences))

    def end(self) -> ZipIterator:
        return self.bounds()[1]

    def bounds(self):
        """``begin()`` and ``end()`` built from one set of member cursors."""
        bounds = [cursors_for(sequence) for sequence in self._sequences]
        length = self._shortest(bounds)
        first = ZipIterator(*(first for first, _ in bounds))
        last = ZipIterator(*(advanced(first, length) for first, _ in bounds))
        return first, last

    def _shortest(self, bounds) -> int:
        shortest = None
        walked = []
        for first, last in bounds:
            if category_of(first).supports(IteratorCategory.RANDOM_ACCESS):
                length = distance(first, last)
                shortest = length if shortest is None else min(shortest, length)
            else:
                walked.append((clone(first), last))
        if not walked:
            return shortest

        logger.debug("Measuring %d forward-only member(s) of %d by traversal", len(walked), len(bounds))
        steps = 0
        while shortest is None or steps < shortest:
            if any(cursor == last for cursor, last in walked):
                return steps
            for cursor, _ in walked:
                cursor.advance()
            steps += 1
        return shortest

    def __repr__(self):
        return f"Zip({', '.join(repr(sequence) for sequence in self._sequences)})"


def make_zip(*sequences) -> Zip:
    """Create a zip over ``sequences``."""
    return Zip(*sequences)
