"""Character sets, translation tables and patterns shared by the string operations.
"""

__docformat__ = 'google'

import re
import string
from typing import Dict

# Base character sets
WHITESPACE: str = " \t\r\n"
"""Characters removed by the trimming functions.

Exactly space, tab, carriage return and line feed. Vertical tab and form feed
are not trimmed.

Used in `strutils.trim.lstrip` and `strutils.trim.rstrip`."""

TOKEN_SEPARATORS: str = " \t\n\v\f\r"
"""Characters that separate tokens when splitting without a delimiter.

This is the C `isspace` set, a superset of `WHITESPACE`."""

TAB: str = "\t"
"""@private"""

NEWLINE: str = "\n"
"""@private"""

ASCII_UPPERCASE: str = string.ascii_uppercase
"""@private"""

ASCII_LOWERCASE: str = string.ascii_lowercase
"""@private"""

ASCII_LETTERS: frozenset = frozenset(string.ascii_letters)
"""Letters recognized by `strutils.case.capitalize` for the first character."""

# Translation tables
TO_UPPER: Dict[int, int] = str.maketrans(ASCII_LOWERCASE, ASCII_UPPERCASE)
"""ASCII-only lowercase to uppercase table for `str.translate`.

Unlike `str.upper`, characters outside 'a'-'z' are never changed, so
'ß' stays 'ß' and 'é' stays 'é'.

Used in `strutils.case.upper` and `strutils.case.capitalize`."""

TO_LOWER: Dict[int, int] = str.maketrans(ASCII_UPPERCASE, ASCII_LOWERCASE)
"""ASCII-only uppercase to lowercase table for `str.translate`.

Used in `strutils.case.lower` and `strutils.case.capitalize`."""

# Compiled patterns
TOKEN_PATTERN: re.Pattern = re.compile(f"[^{re.escape(TOKEN_SEPARATORS)}]+")
"""Maximal run of non-separator characters.

Used in `strutils.tokens.split` when no delimiter is given."""
