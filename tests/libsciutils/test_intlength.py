"""
Unit tests for intlength using pytest.
Covers scalar, array, and edge cases for digit counts and printed widths.
"""
import numpy as np
import pytest

from sciutils.libsciutils.intlength import calcIntLength, neededDigits


# ---------------------------------------------------------------------------
# neededDigits
# ---------------------------------------------------------------------------

def testNeededDigitsScalar():
    assert neededDigits(0) == 1
    assert neededDigits(9) == 1
    assert neededDigits(10) == 2
    assert neededDigits(99) == 2
    assert neededDigits(100) == 3
    assert neededDigits(999999) == 6
    assert neededDigits(1000000) == 7


def testNeededDigitsPowersOfTen():
    """Values on either side of 10**k, where log10 rounding goes wrong."""
    for k in range(1, 19):
        assert neededDigits(10**k - 1) == k
        assert neededDigits(10**k) == k + 1


def testNeededDigitsBeyondInt64():
    assert neededDigits(10**40) == 41


def testNeededDigitsMonotonic():
    values = list(range(0, 2000)) + [10**k + d for k in range(3, 12) for d in (-1, 0, 1)]
    values.sort()
    counts = [neededDigits(v) for v in values]
    assert all(a <= b for a, b in zip(counts, counts[1:]))


def testNeededDigitsNumpyScalar():
    assert neededDigits(np.int32(12345)) == 5
    assert isinstance(neededDigits(np.int64(7)), int)


def testNeededDigitsArray():
    arr = np.array([0, 9, 10, 99, 100, 123456, 9223372036854775807])
    expected = np.array([1, 1, 2, 2, 3, 6, 19])
    np.testing.assert_array_equal(neededDigits(arr), expected)


def testNeededDigitsArrayMatchesScalar():
    arr = np.arange(0, 5000, 7, dtype=np.int64).reshape(-1, 1)
    result = neededDigits(arr)
    assert result.shape == arr.shape
    assert result.dtype == np.int64
    np.testing.assert_array_equal(result.ravel(), [neededDigits(int(v)) for v in arr.ravel()])


def testNeededDigitsList():
    np.testing.assert_array_equal(neededDigits([5, 50, 500]), [1, 2, 3])


def testNeededDigitsEmptyArray():
    result = neededDigits(np.array([], dtype=np.int64))
    assert result.size == 0


def testNeededDigitsNegative():
    with pytest.raises(ValueError):
        neededDigits(-1)
    with pytest.raises(ValueError):
        neededDigits(np.array([3, -4]))


def testNeededDigitsWrongType():
    with pytest.raises(TypeError):
        neededDigits(1.5)
    with pytest.raises(TypeError):
        neededDigits(np.array([1.0, 2.0]))


# ---------------------------------------------------------------------------
# calcIntLength
# ---------------------------------------------------------------------------

def testCalcIntLengthScalar():
    assert calcIntLength(0) == 1
    assert calcIntLength(5) == 1
    assert calcIntLength(-5) == 2
    assert calcIntLength(12345) == 5
    assert calcIntLength(-12345) == 6
    assert calcIntLength(999999999) == 9
    assert calcIntLength(-999999999) == 10


def testCalcIntLengthArray():
    arr = np.array([0, 1, -10, 123456, -999999, -15, -20])
    expected = np.array([1, 1, 3, 6, 7, 3, 3])
    np.testing.assert_array_equal(calcIntLength(arr), expected)


def testCalcIntLengthInt64Extremes():
    arr = np.array([np.iinfo(np.int64).min, np.iinfo(np.int64).max])
    expected = np.array([len(str(v)) for v in arr.tolist()])
    np.testing.assert_array_equal(calcIntLength(arr), expected)


def testCalcIntLengthMatchesStr():
    values = np.arange(-1200, 1200, 13)
    np.testing.assert_array_equal(calcIntLength(values), [len(str(v)) for v in values.tolist()])


# ---------------------------------------------------------------------------
# unsigned arrays
# ---------------------------------------------------------------------------

def testNeededDigitsUint64BeyondInt64():
    arr = np.array([0, 9, 2**63, np.iinfo(np.uint64).max], dtype=np.uint64)
    expected = np.array([1, 1, 19, 20])
    np.testing.assert_array_equal(neededDigits(arr), expected)


def testNeededDigitsSmallUnsigned():
    arr = np.array([[7, 70], [255, 100]], dtype=np.uint8)
    result = neededDigits(arr)
    assert result.shape == (2, 2)
    np.testing.assert_array_equal(result, [[1, 2], [3, 3]])


def testCalcIntLengthUint64():
    arr = np.array([2**63, np.iinfo(np.uint64).max], dtype=np.uint64)
    np.testing.assert_array_equal(calcIntLength(arr), [19, 20])
