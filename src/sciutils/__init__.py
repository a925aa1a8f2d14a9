"""
sciutils: text and number conversion helpers for scientific codes.

Zero-padded integer formatting, digit counting, strict integer parsing,
list splitting, documentation line breaking and positional scanning,
as used for diagnostics, parameter files and help text.
"""

# Import main sub-packages
from . import libsciutils

__all__ = [
    "libsciutils",
]
