"""Per-cursor type properties.

Every cursor describes itself with a :class:`CursorTraits` record. Composite
cursors (zip, enumerate) build their own records from their members'.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from cursortools.core.categories import IteratorCategory, category_of


@dataclass(frozen=True)
class Reference:
    """What dereferencing a cursor hands out.

    ``mutable`` is True when ``cursor.set(value)`` writes through to the
    underlying element.
    """
    value_type: Any
    mutable: bool = False


@dataclass(frozen=True)
class CursorTraits:
    """Type properties of a single cursor.

    Attributes
    ----------
    difference_type : numpy.dtype
        Signed integer dtype of cursor distances.
    reference : Reference
        Result of a dereference.
    pointer : type
        The cursor type itself; a cursor is how elements are addressed.
    value_type : type
        Type of the elements.
    iterator_category : IteratorCategory
        Capability tier.
    """
    difference_type: np.dtype
    reference: Any
    pointer: Any
    value_type: Any
    iterator_category: IteratorCategory


def traits_of(cursor) -> CursorTraits:
    """Traits of any cursor, including duck-typed ones from other libraries."""
    traits = getattr(cursor, "traits", None)
    if traits is not None:
        return traits
    value_type = getattr(cursor, "value_type", object)
    return CursorTraits(
        difference_type=np.dtype(getattr(cursor, "difference_type", np.int64)),
        reference=Reference(value_type, callable(getattr(cursor, "set", None))),
        pointer=type(cursor),
        value_type=value_type,
        iterator_category=category_of(cursor),
    )
