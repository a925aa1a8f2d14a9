"""
Digit counting for zero-padded integer output.

``neededDigits`` answers "how wide must a zero-padded field be to hold
every number up to N", which callers use to pre-size file numbering and
diagnostic columns. ``calcIntLength`` gives the printed width of a signed
integer, sign included.

Scalars are handled in plain Python; arrays go through Numba kernels that
use integer division only, so values next to a power of ten are never
mis-rounded the way ``floor(log10(x)) + 1`` can be.
"""
from typing import Union

from numba import njit
import numpy as np


@njit(cache=True)
def _countDigitsNumba(arr):
    n = np.empty(arr.size, dtype=np.int64)
    for idx in range(arr.size):
        val = arr[idx]
        digits = 1
        while val >= 10:
            val //= 10
            digits += 1
        n[idx] = digits
    return n


@njit(cache=True)
def _countDigitsUnsignedNumba(arr):
    ten = np.uint64(10)
    n = np.empty(arr.size, dtype=np.int64)
    for idx in range(arr.size):
        val = arr[idx]
        digits = 1
        while val >= ten:
            val //= ten
            digits += 1
        n[idx] = digits
    return n


@njit(cache=True)
def _calcIntLengthNumba(arr):
    n = np.empty(arr.size, dtype=np.int64)
    for idx in range(arr.size):
        val = arr[idx]
        digits = 1
        if val < 0:
            digits += 1
            # stay negative so the int64 minimum does not overflow;
            # floor division rounds down, step back up to truncate
            while val <= -10:
                rem = val % 10
                val //= 10
                if rem != 0:
                    val += 1
                digits += 1
        else:
            while val >= 10:
                val //= 10
                digits += 1
        n[idx] = digits
    return n


def _countDigits(i: int) -> int:
    return len(str(abs(int(i))))


def _asIntArray(i) -> np.ndarray:
    arr = np.asarray(i)
    if arr.dtype.kind not in "iu":
        raise TypeError(f"integer input required, got dtype {arr.dtype}")
    # unsigned values up to 2**64 - 1 do not fit int64
    dtype = np.uint64 if arr.dtype.kind == "u" else np.int64
    return np.ascontiguousarray(arr, dtype=dtype).ravel()


def neededDigits(maxNumber: Union[int, np.ndarray]) -> Union[int, np.ndarray]:
    """
    Number of decimal digits needed to print numbers up to ``maxNumber``.

    Parameters
    ----------
    maxNumber : int or np.ndarray
        Largest non-negative value that has to fit.

    Returns
    -------
    int or np.ndarray
        ``1`` for ``0`` through ``9``, ``2`` for ``10`` through ``99``, and so
        on. Arrays give an ``int64`` array of the same shape.

    Raises
    ------
    ValueError
        If any value is negative.
    """
    if np.isscalar(maxNumber):
        if isinstance(maxNumber, bool) or not isinstance(maxNumber, (int, np.integer)):
            raise TypeError(f"neededDigits: integer required, got {maxNumber!r}")
        if maxNumber < 0:
            raise ValueError(f"neededDigits: value must be non-negative, got {maxNumber}")
        return _countDigits(maxNumber)

    shape = np.shape(maxNumber)
    arr = _asIntArray(maxNumber)
    if arr.dtype == np.uint64:
        return _countDigitsUnsignedNumba(arr).reshape(shape)
    if arr.size and arr.min() < 0:
        raise ValueError("neededDigits: values must be non-negative")
    return _countDigitsNumba(arr).reshape(shape)


def calcIntLength(i: Union[int, np.ndarray]) -> Union[int, np.ndarray]:
    """
    Number of characters needed to print an integer, including a leading ``-``.

    Parameters
    ----------
    i : int or np.ndarray
        The integer or array of integers to evaluate.

    Returns
    -------
    int or np.ndarray
        Printed width(s).
    """
    if np.isscalar(i):
        if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
            raise TypeError(f"calcIntLength: integer required, got {i!r}")
        return _countDigits(i) + (1 if i < 0 else 0)

    shape = np.shape(i)
    arr = _asIntArray(i)
    if arr.dtype == np.uint64:
        return _countDigitsUnsignedNumba(arr).reshape(shape)
    return _calcIntLengthNumba(arr).reshape(shape)
