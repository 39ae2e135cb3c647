"""Iterator categories and the weakest-category rule."""

from enum import IntEnum


class IteratorCategory(IntEnum):
    """Capability tier of a cursor, ordered weakest first.

    INPUT: single pass, ``advance`` only
    FORWARD: multi pass, ``advance`` only
    BIDIRECTIONAL: adds ``retreat``
    RANDOM_ACCESS: adds jumps, indexing, distance and ordering
    """
    INPUT = 0
    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3

    def supports(self, required: "IteratorCategory") -> bool:
        """True when this category offers every capability of ``required``."""
        return self >= required


def weakest_category(first: IteratorCategory, second: IteratorCategory) -> IteratorCategory:
    """Combine two categories; a composite can only ever be downgraded."""
    return IteratorCategory(min(first, second))


def category_of(cursor) -> IteratorCategory:
    """Category declared by ``cursor``, or inferred from the methods it offers."""
    declared = getattr(cursor, "category", None)
    if declared is not None:
        return IteratorCategory(declared)
    if not hasattr(cursor, "retreat"):
        return IteratorCategory.FORWARD
    if all(hasattr(cursor, name) for name in ("__iadd__", "__isub__", "__lt__", "__getitem__")):
        return IteratorCategory.RANDOM_ACCESS
    return IteratorCategory.BIDIRECTIONAL
