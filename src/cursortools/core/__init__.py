"""Cursor infrastructure shared by the Range, Enumerate and Zip adaptors.

This module provides the cursor base classes, iterator categories, per-cursor
traits, adapters for plain Python containers and generic cursor algorithms.
"""

from cursortools.core.categories import IteratorCategory, category_of, weakest_category
from cursortools.core.traits import CursorTraits, Reference, traits_of
from cursortools.core.cursor import Cursor, CursorSequence
from cursortools.core.adapters import IndexCursor, IterableCursor, cursors_for
from cursortools.core.algorithms import advanced, clone, distance

__all__ = [
    'Cursor',
    'CursorSequence',
    'CursorTraits',
    'IndexCursor',
    'IterableCursor',
    'IteratorCategory',
    'Reference',
    'advanced',
    'category_of',
    'clone',
    'cursors_for',
    'distance',
    'traits_of',
    'weakest_category',
]
