"""Tab expansion."""

__docformat__ = 'google'

__all__ = [
    'expand_tabs'
]

from strutils.patterns import TAB, NEWLINE

def expand_tabs(s: str, tabsize: int = 8) -> str:
    """
    Replace tabs with spaces up to the next tab stop.

    Tab stops fall on every multiple of `tabsize` columns. The column count
    restarts after each line feed, so tab stops are per line. Carriage
    returns are counted as ordinary characters. A `tabsize` of 0 removes tabs
    without inserting anything.

    This differs from `str.expandtabs`, which also restarts the column after
    a carriage return.

    Args:
        s: String to expand
        tabsize: Distance between tab stops

    Returns:
        String with no tab characters

    Raises:
        ValueError: If `tabsize` is negative

    Example:
        >>> expand_tabs('a\\tbc\\tdef', 4)
        'a   bc  def'
        >>> expand_tabs('ab\\n\\tc', 4)
        'ab\\n    c'
        >>> expand_tabs('a\\tb', 0)
        'ab'
    """
    if tabsize < 0:
        raise ValueError(f"tabsize must be non-negative, got {tabsize}")
    if tabsize == 0:
        return s.replace(TAB, '')

    expanded = []
    column = 0
    for char in s:
        if char == TAB:
            spaces = tabsize - column % tabsize
            expanded.append(' ' * spaces)
            column += spaces
        elif char == NEWLINE:
            expanded.append(char)
            column = 0
        else:
            expanded.append(char)
            column += 1
    return ''.join(expanded)
