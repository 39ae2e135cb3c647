"""ZipIteratorTraits: composed type properties of N wrapped cursors.

The composition is a left-to-right pairwise reduction over the members'
:class:`~cursortools.core.CursorTraits`:

- difference_type: widened with :func:`common_difference_type`
- reference, pointer, value_type: tuple-concatenated with :func:`concat_types`
- iterator_category: downgraded with :func:`weakest_category`

A single member passes through unchanged, with no one-element tuple
wrapping.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Any, Sequence

import numpy as np

from cursortools.contracts import require_static
from cursortools.core import CursorTraits, IteratorCategory, traits_of, weakest_category
from cursortools.core.integral import common_difference_type


def concat_types(left: tuple, right: tuple) -> tuple:
    """Tuple concatenation used to build composed reference/pointer/value types."""
    return left + right


@dataclass(frozen=True)
class ZipIteratorTraits:
    """Type properties of a zip cursor.

    Field names match :class:`~cursortools.core.CursorTraits`, so a zip
    cursor can itself be zipped.
    """
    difference_type: np.dtype
    reference: Any
    pointer: Any
    value_type: Any
    iterator_category: IteratorCategory
    arity: int

    @classmethod
    def from_traits(cls, traits: Sequence[CursorTraits]) -> "ZipIteratorTraits":
        require_static(len(traits) >= 1, "a zip has at least one member")
        if len(traits) == 1:
            (only,) = traits
            return cls(
                difference_type=only.difference_type,
                reference=only.reference,
                pointer=only.pointer,
                value_type=only.value_type,
                iterator_category=only.iterator_category,
                arity=1,
            )
        return cls(
            difference_type=reduce(common_difference_type, (t.difference_type for t in traits)),
            reference=reduce(concat_types, ((t.reference,) for t in traits)),
            pointer=reduce(concat_types, ((t.pointer,) for t in traits)),
            value_type=reduce(concat_types, ((t.value_type,) for t in traits)),
            iterator_category=reduce(weakest_category, (t.iterator_category for t in traits)),
            arity=len(traits),
        )

    @classmethod
    def from_cursors(cls, *cursors) -> "ZipIteratorTraits":
        return cls.from_traits([traits_of(cursor) for cursor in cursors])

    @property
    def is_bidirectional(self) -> bool:
        return self.iterator_category.supports(IteratorCategory.BIDIRECTIONAL)

    @property
    def is_random_access(self) -> bool:
        return self.iterator_category.supports(IteratorCategory.RANDOM_ACCESS)
