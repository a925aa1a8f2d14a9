"""libsciutils sub-package for string, digit and power utilities."""

# Import modules themselves (allows: from sciutils.libsciutils import strings)
from . import logger
from . import constants
from . import helpers
from . import intlength
from . import strings

from .helpers import fixedPower
from .intlength import calcIntLength, neededDigits
from .strings import (
    ParseError,
    ScannedInteger,
    breakTextIntoLines,
    getIntegerAtPosition,
    int2str,
    matchAtStringStart,
    splitStringList,
    str2int,
    strList2int,
)

__all__ = [
    "constants",
    "helpers",
    "intlength",
    "logger",
    "strings",
    "ParseError",
    "ScannedInteger",
    "breakTextIntoLines",
    "calcIntLength",
    "fixedPower",
    "getIntegerAtPosition",
    "int2str",
    "matchAtStringStart",
    "neededDigits",
    "splitStringList",
    "str2int",
    "strList2int",
]
