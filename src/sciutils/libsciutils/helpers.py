"""
Helper functions module.

Small numerical helpers that did not fit anywhere else.
"""

from typing import Union

import numpy as np
from numba import njit


@njit(cache=True)
def _fixedPowerNumba(arr, n):
    out = arr.copy()
    for idx in range(arr.size):
        base = arr[idx]
        result = base
        for _ in range(1, n):
            result *= base
        out[idx] = result
    return out


def fixedPower(t: Union[int, float, complex, np.ndarray], n: int):
    """
    Raise ``t`` to a fixed positive integer power by repeated multiplication.

    Unlike ``t ** n`` with a float exponent this never leaves the input's
    number type: integers stay integers and arrays keep their dtype.

    Parameters
    ----------
    t : int, float, complex or ndarray
        Base value(s).
    n : int
        Exponent, at least 1.

    Returns
    -------
    same type as ``t``
        ``t * t * ... * t`` (``n`` factors), element-wise for arrays.

    Raises
    ------
    ValueError
        If ``n < 1``.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"fixedPower: exponent must be an integer, got {n!r}")
    if n < 1:
        raise ValueError(f"fixedPower: exponent must be positive, got {n}")

    if isinstance(t, np.ndarray):
        if t.dtype.kind not in "iufc":
            raise TypeError(f"fixedPower: numeric array required, got dtype {t.dtype}")
        flat = np.ascontiguousarray(t).ravel()
        return _fixedPowerNumba(flat, int(n)).reshape(t.shape)

    if n == 1:
        return t
    if n == 2:
        return t * t
    if n == 3:
        return t * t * t
    result = t
    for _ in range(1, n):
        result *= t
    return result
