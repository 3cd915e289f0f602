"""Slicing, substring replacement, splitting and joining.

`split` and `join` are inverses in delimiter mode: for a non-empty delimiter
that does not occur in any element, `split(join(d, parts), d) == parts`.
"""

__docformat__ = 'google'

__all__ = [
    'slice_string',
    'replace',
    'split',
    'join'
]

from typing import Iterable, List
from strutils.patterns import TOKEN_PATTERN

def slice_string(s: str, start: int = 0, end: int = 0) -> str:
    """
    Extract the characters between two indices.

    Indices follow these rules, applied in order:
        1. An `end` of 0 means "to the end of the string"
        2. Negative indices count from the end, as in Python slicing
        3. Both indices are clamped to the string
        4. If `start` is past `end`, the result is empty

    Args:
        s: Source string
        start: Index of the first character to keep
        end: Index one past the last character to keep; 0 for the end of the string

    Returns:
        The selected substring

    Example:
        >>> slice_string('abcdef', 1, -1)
        'bcde'
        >>> slice_string('abcdef', 2, 0)
        'cdef'
        >>> slice_string('abcdef', 4, 2)
        ''
        >>> slice_string('abcdef', -100, 3)
        'abc'
    """
    length = len(s)
    if end == 0:
        end = length
    if start < 0:
        start += length
    if end < 0:
        end += length
    start = min(max(start, 0), length)
    end = min(max(end, 0), length)
    if start > end:
        return ''
    return s[start:end]

def replace(s: str, old: str, rep: str) -> str:
    """
    Replace every non-overlapping occurrence of `old` with `rep`.

    Occurrences are found left to right and the replacement text is never
    scanned again, so `rep` may itself contain `old`.

    Args:
        s: Source string
        old: Substring to look for; if empty, `s` is returned unchanged
        rep: Replacement text

    Returns:
        String with all occurrences replaced

    Example:
        >>> replace('aaaa', 'aa', 'a')
        'aa'
        >>> replace('T4/R3', '/', ' ')
        'T4 R3'
        >>> replace('abc', '', '-')
        'abc'
    """
    if not old:
        return s
    return s.replace(old, rep)

def split(s: str, delim: str = '') -> List[str]:
    """
    Split a string into a list of substrings.

    With an empty `delim` the string is split into maximal runs of
    non-whitespace characters. Otherwise it is cut at every occurrence of
    `delim`, which may be several characters long; adjacent, leading and
    trailing delimiters produce empty elements.

    An empty input always gives an empty list, in both modes.

    Args:
        s: String to split
        delim: Delimiter, or '' to split on whitespace

    Returns:
        Substrings in the order they appear in `s`

    Example:
        >>> split('  a  b  c  ')
        ['a', 'b', 'c']
        >>> split(',a,,b,', ',')
        ['', 'a', '', 'b', '']
        >>> split('ASHLAND -- T12 R13', ' -- ')
        ['ASHLAND', 'T12 R13']
        >>> split('', ',')
        []
    """
    if not s:
        return []
    if not delim:
        return TOKEN_PATTERN.findall(s)
    return s.split(delim)

def join(delim: str, seq: Iterable[str]) -> str:
    """
    Concatenate strings with `delim` between adjacent elements.

    Example:
        >>> join('-', ['x', 'y', 'z'])
        'x-y-z'
        >>> join('-', [])
        ''
    """
    return delim.join(seq)
