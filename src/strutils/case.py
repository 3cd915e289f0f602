"""ASCII case conversion.

Only the letters 'A'-'Z' and 'a'-'z' are converted. Every other character,
including non-ASCII letters, is returned verbatim, so results do not depend
on locale or on Unicode case mappings.
"""

__docformat__ = 'google'

__all__ = [
    'capitalize',
    'upper',
    'lower'
]

from strutils.patterns import ASCII_LETTERS, TO_UPPER, TO_LOWER

def capitalize(s: str) -> str:
    """
    Uppercase the first character and lowercase the rest.

    The first character is only changed when it is an ASCII letter.

    Args:
        s: Any string

    Returns:
        Capitalized copy of the input, or the empty string for empty input

    Example:
        >>> capitalize('hELLO')
        'Hello'
        >>> capitalize('1ST PLACE')
        '1st place'
        >>> capitalize('')
        ''
    """
    if not s:
        return ''
    head = s[0]
    if head in ASCII_LETTERS:
        head = head.translate(TO_UPPER)
    return head + s[1:].translate(TO_LOWER)

def upper(s: str) -> str:
    """
    Convert ASCII letters to uppercase.

    Example:
        >>> upper('Dover-Foxcroft')
        'DOVER-FOXCROFT'
        >>> upper('straße')
        'STRAßE'
    """
    return s.translate(TO_UPPER)

def lower(s: str) -> str:
    """
    Convert ASCII letters to lowercase.

    Example:
        >>> lower('CROSS LAKE TWP')
        'cross lake twp'
    """
    return s.translate(TO_LOWER)
