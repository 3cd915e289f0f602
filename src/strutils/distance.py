"""Levenshtein edit distance and helpers built on it.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'edit_distance',
    'similarity',
    'closest_match'
]

from typing import Iterable, Optional
from strutils.case import lower

def edit_distance(left: str, right: str, ignorecase: bool = False) -> int:
    """
    Compute the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1. The table is filled
    one row at a time, keeping only the previous row.

    Args:
        left: First string
        right: Second string
        ignorecase: Compare after folding ASCII letters to lowercase

    Returns:
        Minimum number of single-character edits turning `left` into `right`

    Example:
        >>> edit_distance('kitten', 'sitting')
        3
        >>> edit_distance('ABC', 'abc', ignorecase=True)
        0
        >>> edit_distance('', 'abc')
        3
    """
    if ignorecase:
        left, right = lower(left), lower(right)

    previous = list(range(len(right) + 1))
    for i, left_char in enumerate(left, start=1):
        current = [i]
        for j, right_char in enumerate(right, start=1):
            current.append(min(
                previous[j] + 1,                            # deletion
                current[j - 1] + 1,                         # insertion
                previous[j - 1] + (left_char != right_char)  # substitution
            ))
        previous = current
    return previous[-1]

def similarity(left: str, right: str, ignorecase: bool = False) -> float:
    """
    Edit distance scaled to a score between 0.0 and 1.0.

    1.0 means identical, 0.0 means every character must change. Two empty
    strings are identical.

    Example:
        >>> similarity('abcd', 'abed')
        0.75
        >>> similarity('', '')
        1.0
    """
    longest = max(len(left), len(right))
    if longest == 0:
        return 1.0
    return 1 - edit_distance(left, right, ignorecase) / longest

def closest_match(target: str, candidates: Iterable[str], ignorecase: bool = False,
                  max_distance: Optional[int] = None) -> Optional[str]:
    """
    Find the candidate with the smallest edit distance to `target`.

    Args:
        target: String to match
        candidates: Strings to compare against
        ignorecase: Compare after folding ASCII letters to lowercase
        max_distance: If given, candidates further away than this are ignored

    Returns:
        The closest candidate (the first one on ties), or None if there is no
        candidate within range

    Example:
        >>> closest_match('PISCATAQUS', ['PENOBSCOT', 'PISCATAQUIS', 'OXFORD'])
        'PISCATAQUIS'
        >>> closest_match('ORNVEILLE', ['PORTLAND'], max_distance=2) is None
        True
    """
    best, best_distance = None, None
    for candidate in candidates:
        distance = edit_distance(target, candidate, ignorecase)
        if max_distance is not None and distance > max_distance:
            continue
        if best_distance is None or distance < best_distance:
            best, best_distance = candidate, distance
    return best
