"""Padding and justification.

All three functions return the input unchanged when it is already at least
`width` characters long; they never truncate.
"""

__docformat__ = 'google'

__all__ = [
    'center',
    'ljust',
    'rjust'
]

def _check_fill(fill: str):
    if not isinstance(fill, str) or len(fill) != 1:
        raise TypeError(f"The fill character must be exactly one character long, got {fill!r}")

def center(s: str, width: int, fill: str = ' ') -> str:
    """
    Center a string in a field of the given width.

    When the padding cannot be split evenly the extra fill character goes on
    the right. This differs from `str.center`, which favors the left for odd
    widths.

    Args:
        s: String to pad
        width: Total width of the result
        fill: Single padding character

    Returns:
        Padded string of exactly `width` characters, or `s` if it is already that long

    Raises:
        TypeError: If `fill` is not a single character

    Example:
        >>> center('hi', 6, '*')
        '**hi**'
        >>> center('hi', 7, '*')
        '**hi***'
        >>> center('Portland', 4)
        'Portland'
    """
    _check_fill(fill)
    padding = width - len(s)
    if padding <= 0:
        return s
    left = padding // 2
    right = padding - left
    return fill * left + s + fill * right

def ljust(s: str, width: int, fill: str = ' ') -> str:
    """
    Left-justify by appending `fill` up to `width` characters.

    Example:
        >>> ljust('ab', 5, '.')
        'ab...'
    """
    _check_fill(fill)
    return s + fill * max(0, width - len(s))

def rjust(s: str, width: int, fill: str = ' ') -> str:
    """
    Right-justify by prepending `fill` up to `width` characters.

    Example:
        >>> rjust('7', 3, '0')
        '007'
    """
    _check_fill(fill)
    return fill * max(0, width - len(s)) + s
