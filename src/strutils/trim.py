"""Whitespace trimming.

Whitespace here means exactly space, tab, carriage return and line feed
(`strutils.patterns.WHITESPACE`).
"""

__docformat__ = 'google'

__all__ = [
    'lstrip',
    'rstrip',
    'strip'
]

from strutils.patterns import WHITESPACE

def lstrip(s: str) -> str:
    """
    Remove leading whitespace.

    Example:
        >>> lstrip(' \\t  Portland ')
        'Portland '
    """
    return s.lstrip(WHITESPACE)

def rstrip(s: str) -> str:
    """
    Remove trailing whitespace.

    Example:
        >>> rstrip('Dover-Foxcroft \\r\\n')
        'Dover-Foxcroft'
    """
    return s.rstrip(WHITESPACE)

def strip(s: str) -> str:
    """
    Remove leading and trailing whitespace.

    Args:
        s: Any string

    Returns:
        Input without surrounding whitespace; empty if the input is all whitespace

    Example:
        >>> strip('  T4 R3  ')
        'T4 R3'
        >>> strip(' \\t\\r\\n')
        ''
    """
    return lstrip(rstrip(s))
