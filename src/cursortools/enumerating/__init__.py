"""Index pairing: ``Enumerate`` sequences and their ``EnumerateIterator`` cursors."""

from cursortools.enumerating.iterator import EnumerateIterator
from cursortools.enumerating.sequence import Enumerate, make_enumerate

__all__ = ['Enumerate', 'EnumerateIterator', 'make_enumerate']
