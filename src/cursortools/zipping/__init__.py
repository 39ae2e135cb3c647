"""Lock-step iteration: ``Zip`` sequences, ``ZipIterator`` cursors and their traits."""

from cursortools.zipping.traits import ZipIteratorTraits, concat_types
from cursortools.zipping.iterator import ZipIterator, make_zip_iterator
from cursortools.zipping.sequence import Zip, make_zip

__all__ = [
    'Zip',
    'ZipIterator',
    'ZipIteratorTraits',
    'concat_types',
    'make_zip',
    'make_zip_iterator',
]
