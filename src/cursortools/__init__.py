"""`cursortools` - composable cursor adaptors with design-by-contract checks.

Subpackages:
- contracts: require/check/ensure and the violation records they raise
- schemas: layered configuration (defaults < user < environment)
- core: cursor base classes, categories, traits, container adapters
- ranges: Range / RangeIterator
- enumerating: Enumerate / EnumerateIterator
- zipping: Zip / ZipIterator / ZipIteratorTraits
"""

import logging

from cursortools.contracts import ContractViolation, configure
from cursortools.enumerating import Enumerate, EnumerateIterator, make_enumerate
from cursortools.ranges import Range, RangeIterator, make_range
from cursortools.zipping import Zip, ZipIterator, ZipIteratorTraits, make_zip, make_zip_iterator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'ContractViolation',
    'Enumerate',
    'EnumerateIterator',
    'Range',
    'RangeIterator',
    'Zip',
    'ZipIterator',
    'ZipIteratorTraits',
    'configure',
    'make_enumerate',
    'make_range',
    'make_zip',
    'make_zip_iterator',
]
