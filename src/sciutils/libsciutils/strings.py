"""
String utilities for scientific computing.

Conversion between integers and strings, splitting of parameter lists,
line breaking of documentation text, and small scanning primitives for
hand-written parameter parsers.

Every function here is pure: no module state is read or written, so all
of them are safe to call from any number of threads.
"""

from typing import Any, Iterable, List, NamedTuple, Optional

import numpy as np

from .constants import DIGITS, LIST_DELIMITER, MINUS, WRAP_DELIMITER
from .logger import get_logger

log = get_logger(__name__)


class ParseError(ValueError):
    """
    A string is not exactly an optional ``-`` followed by decimal digits.

    Attributes
    ----------
    text : str or object
        The offending string, or the non-string object that was passed
        in its place.
    index : int or None
        Position of the offending string in the list passed to
        ``strList2int``; ``None`` when a single string was parsed.
    """

    def __init__(self, text: Any, index: Optional[int] = None):
        self.text = text
        self.index = index
        if index is None:
            msg = f"Can't convert {text!r} to an integer."
        else:
            msg = f"Can't convert element {index} ({text!r}) to an integer."
        super().__init__(msg)


class ScannedInteger(NamedTuple):
    """Integer read by ``getIntegerAtPosition`` and the characters it spans."""

    value: int
    width: int


def _checkDelimiter(delimiter: str, caller: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"{caller}: delimiter must be a single character, got {delimiter!r}")


def _digitRunEnd(s: str, start: int) -> int:
    """Index one past the run of ASCII digits beginning at ``start``."""
    end = start
    while end < len(s) and s[end] in DIGITS:
        end += 1
    return end


# ---------------------------------------------------------------------------
# Number <-> string
# ---------------------------------------------------------------------------

def int2str(i: int, n: Optional[int] = None) -> str:
    """
    Convert a non-negative integer to a string, optionally zero-padded.

    Parameters
    ----------
    i : int
        Integer to convert.
    n : int, optional
        Number of digits to fill with leading zeros. ``None`` gives the
        plain representation. A width smaller than the number of digits
        is ignored, the number is never truncated.

    Returns
    -------
    str
        Decimal representation of ``i``.
    """
    if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
        raise TypeError(f"int2str: integer required, got {i!r}")
    if i < 0:
        raise ValueError(f"int2str: value must be non-negative, got {i}")
    s = str(int(i))
    if n is None:
        return s
    if n < 0:
        raise ValueError(f"int2str: digit count must be non-negative, got {n}")
    return s.zfill(n)


def str2int(s: str) -> int:
    """
    Convert a string holding exactly one integer to ``int``.

    The whole string must be an optional ``-`` followed by one or more
    ASCII digits. Surrounding whitespace, a ``+`` sign, underscores or
    any trailing characters are rejected rather than ignored.

    Raises
    ------
    ParseError
        If ``s`` is not such a string.
    """
    if not isinstance(s, str):
        raise ParseError(s)
    start = 1 if s.startswith(MINUS) else 0
    end = _digitRunEnd(s, start)
    if end == start or end != len(s):
        raise ParseError(s)
    return int(s)


def strList2int(items: Iterable[str]) -> List[int]:
    """
    Convert every string of ``items`` with ``str2int``, keeping the order.

    Raises
    ------
    ParseError
        For the first element that is not an integer; ``index`` tells
        which one.
    """
    values = []
    for index, item in enumerate(items):
        try:
            values.append(str2int(item))
        except ParseError as exc:
            log.debug("strList2int: element %d rejected", index)
            raise ParseError(exc.text, index) from exc
    return values


# ---------------------------------------------------------------------------
# Splitting and line breaking
# ---------------------------------------------------------------------------

def splitStringList(s: str, delimiter: str = LIST_DELIMITER) -> List[str]:
    """
    Split a delimiter-separated list and strip whitespace off each entry.

    An empty string gives an empty list. Consecutive delimiters give empty
    entries, which are kept; a single trailing delimiter ends the list
    without adding an empty entry. A string of whitespace only is one
    (empty) entry.

    Examples
    --------
    >>> splitStringList("a, b ,c")
    ['a', 'b', 'c']
    >>> splitStringList("1,,2,")
    ['1', '', '2']
    """
    _checkDelimiter(delimiter, "splitStringList")
    if not s:
        return []
    pieces = s.split(delimiter)
    if pieces[-1] == "":
        pieces.pop()
    return [piece.strip() for piece in pieces]


def breakTextIntoLines(text: str, width: int, delimiter: str = WRAP_DELIMITER) -> List[str]:
    """
    Break text into lines of at most ``width`` characters where possible.

    Lines are broken at the last ``delimiter`` within reach of ``width``.
    A word longer than ``width`` is not cut: the line then runs to the
    next delimiter, or to the end of the text if there is none.

    Only the delimiter at each break is dropped, so
    ``delimiter.join(lines) == text`` always holds. A leading delimiter
    is never a break point and a trailing one stays on the last line,
    so a line is empty only where the text has adjacent delimiters.

    Parameters
    ----------
    text : str
        Text to break.
    width : int
        Preferred maximum line length, at least 1.
    delimiter : str
        Single break character, a space by default.

    Returns
    -------
    List[str]
        The lines, empty for empty text.
    """
    _checkDelimiter(delimiter, "breakTextIntoLines")
    if width < 1:
        raise ValueError(f"breakTextIntoLines: width must be positive, got {width}")

    lines = []
    start = 0
    while True:
        rest = len(text) - start
        if rest <= width:
            if rest > 0:
                lines.append(text[start:])
            break
        # a delimiter at start + width still gives a line of exactly width;
        # at start it only counts after a previous break
        first = start if start > 0 else 1
        location = text.rfind(delimiter, first, start + width + 1)
        if location < 0:
            location = text.find(delimiter, start + width + 1)
            if location < 0:
                log.debug("breakTextIntoLines: %d characters without delimiter", rest)
                lines.append(text[start:])
                break
            log.debug(
                "breakTextIntoLines: line of %d exceeds width %d", location - start, width
            )
        if location == len(text) - 1:
            lines.append(text[start:])
            break
        log.debug2("breakTextIntoLines: break at column %d", location - start)
        lines.append(text[start:location])
        start = location + 1
    return lines


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------

def matchAtStringStart(name: str, pattern: str) -> bool:
    """Return ``True`` if ``name`` begins with ``pattern``."""
    return name.startswith(pattern)


def getIntegerAtPosition(name: str, position: int) -> Optional[ScannedInteger]:
    """
    Read a signed integer starting exactly at ``position`` in ``name``.

    Parameters
    ----------
    name : str
        String to scan.
    position : int
        Index of the first character of the integer (the sign, if any).

    Returns
    -------
    ScannedInteger or None
        The value and the number of characters it occupies, sign
        included, or ``None`` if no integer starts at ``position``.

    Examples
    --------
    >>> getIntegerAtPosition("x=-42;", 2)
    ScannedInteger(value=-42, width=3)
    >>> getIntegerAtPosition("x=-42;", 0) is None
    True
    """
    if position < 0 or position >= len(name):
        return None
    digitsStart = position + 1 if name[position] == MINUS else position
    end = _digitRunEnd(name, digitsStart)
    if end == digitsStart:
        return None
    return ScannedInteger(int(name[position:end]), end - position)
