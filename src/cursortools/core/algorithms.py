"""Generic cursor algorithms working across categories."""

import copy
from typing import Optional

from cursortools.contracts import require
from cursortools.core.categories import IteratorCategory, category_of


def clone(cursor):
    """Independent copy of any cursor."""
    duplicate = getattr(cursor, "copy", None)
    if callable(duplicate):
        return duplicate()
    return copy.copy(cursor)


def advanced(cursor, n: int):
    """Copy of ``cursor`` moved ``n`` steps forward.

    Random-access cursors jump in O(1); others step one at a time.
    """
    require(n >= 0 or category_of(cursor).supports(IteratorCategory.BIDIRECTIONAL))
    result = clone(cursor)
    if category_of(result).supports(IteratorCategory.RANDOM_ACCESS):
        result += n
        return result
    for _ in range(abs(n)):
        if n > 0:
            result.advance()
        else:
            result.retreat()
    return result


def distance(first, last, limit: Optional[int] = None) -> int:
    """Steps needed to walk from ``first`` to ``last``.

    Random-access cursors subtract in O(1). Other cursors are walked on a
    copy; when ``limit`` is given the walk stops after ``limit`` steps and
    returns ``limit``.
    """
    if category_of(first).supports(IteratorCategory.RANDOM_ACCESS):
        result = int(last - first)
        return result if limit is None else min(result, limit)
    cursor = clone(first)
    steps = 0
    while cursor != last:
        if limit is not None and steps >= limit:
            break
        cursor.advance()
        steps += 1
    return steps
