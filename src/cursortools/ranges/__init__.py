"""Numeric ranges: ``Range`` sequences and their ``RangeIterator`` cursors."""

from cursortools.ranges.iterator import RangeIterator, make_range_iterator
from cursortools.ranges.sequence import Range, make_range

__all__ = ['Range', 'RangeIterator', 'make_range', 'make_range_iterator']
