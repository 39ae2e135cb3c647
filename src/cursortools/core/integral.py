"""Numpy integral-type helpers shared by the adaptors.

Ranges and enumerate indices carry a numpy integer dtype. Arithmetic is done
on Python ints (no wraparound) and values are only materialized as the dtype
when dereferenced.
"""

import numbers
from typing import Optional

import numpy as np

from cursortools.contracts import require, require_static

_WIDER_SIGNED = {
    np.dtype(np.uint8): np.dtype(np.int16),
    np.dtype(np.uint16): np.dtype(np.int32),
    np.dtype(np.uint32): np.dtype(np.int64),
    # no wider native type exists
    np.dtype(np.uint64): np.dtype(np.int64),
}


def is_integral(value) -> bool:
    return isinstance(value, (numbers.Integral, np.integer)) and not isinstance(value, bool)


def is_finite(value) -> bool:
    """Finite test that also accepts Python ints beyond the float range."""
    if is_integral(value):
        return True
    return bool(np.isfinite(value))


def integral_dtype(dtype) -> np.dtype:
    """Normalize ``dtype`` and reject anything that is not an integer type."""
    dtype = np.dtype(dtype)
    require_static(np.issubdtype(dtype, np.integer), f"{dtype} is an integral dtype")
    return dtype


def infer_dtype(*values, default) -> np.dtype:
    """Dtype shared by numpy scalars among ``values``, else ``default``."""
    typed = [v.dtype for v in values if isinstance(v, np.integer)]
    if not typed:
        return integral_dtype(default)
    return integral_dtype(np.result_type(*typed))


def is_signed(dtype) -> bool:
    return np.issubdtype(np.dtype(dtype), np.signedinteger)


def fits(value: int, dtype) -> bool:
    info = np.iinfo(np.dtype(dtype))
    return info.min <= value <= info.max


def to_int(value, dtype: Optional[np.dtype] = None) -> int:
    """Convert an integral argument to a Python int, checking it fits ``dtype``."""
    require_static(is_integral(value), f"{value!r} is integral")
    result = int(value)
    if dtype is not None:
        require(fits(result, dtype), f"{result} is representable as {np.dtype(dtype)}")
    return result


def difference_dtype(dtype) -> np.dtype:
    """Signed dtype wide enough to hold the distance between two values."""
    dtype = np.dtype(dtype)
    if is_signed(dtype):
        return dtype
    return _WIDER_SIGNED[dtype]


def common_difference_type(first, second) -> np.dtype:
    """Widen two difference types to a common signed integer dtype.

    ``numpy.promote_types`` picks the widest compatible type; a mix that only
    a float could hold (int64 with uint64) collapses to int64.
    """
    promoted = np.promote_types(first, second)
    if not np.issubdtype(promoted, np.signedinteger):
        return np.dtype(np.int64)
    return promoted


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def ceil_div(numerator: int, denominator: int) -> int:
    return -((-numerator) // denominator)
