"""
Default delimiters and limits shared by the string utilities.
"""

# Separator for comma-separated parameter lists.
LIST_DELIMITER = ","

# Break character for documentation text.
WRAP_DELIMITER = " "

# Characters ``str2int`` and ``getIntegerAtPosition`` accept.
DIGITS = "0123456789"
MINUS = "-"
