"""Lookup of string operations by name.

Names used here are the ones accepted in pipeline configuration files
(see `strutils.pipeline`) and by the pandas accessor (see `strutils.series`).
"""

__docformat__ = 'google'

__all__ = [
    'OPERATIONS',
    'STRING_OPERATIONS',
    'get_operation'
]

from typing import Callable, Dict
from strutils.case import capitalize, upper, lower
from strutils.trim import lstrip, rstrip, strip
from strutils.justify import center, ljust, rjust
from strutils.tokens import slice_string, replace, split, join
from strutils.tabs import expand_tabs
from strutils.distance import edit_distance

STRING_OPERATIONS: Dict[str, Callable[..., str]] = {
    'slice': slice_string,
    'capitalize': capitalize,
    'upper': upper,
    'lower': lower,
    'lstrip': lstrip,
    'rstrip': rstrip,
    'strip': strip,
    'center': center,
    'ljust': ljust,
    'rjust': rjust,
    'replace': replace,
    'expand_tabs': expand_tabs
}
"""Operations that take a string as their first argument and return a string.

Only these can be chained in a `strutils.pipeline.Pipeline`."""

OPERATIONS: Dict[str, Callable] = {
    **STRING_OPERATIONS,
    'split': split,
    'join': join,
    'edit_distance': edit_distance
}
"""Every public string operation, keyed by name."""

def get_operation(name: str, string_only: bool = False) -> Callable:
    """
    Look up an operation by name.

    Args:
        name: Operation name, e.g. 'strip' or 'expand_tabs'
        string_only: Only accept operations that map a string to a string

    Returns:
        The operation function

    Raises:
        ValueError: If no operation has this name, or if `string_only` is set
            and the operation does not return a string

    Example:
        >>> get_operation('upper')('t4 r3')
        'T4 R3'
    """
    lookup = STRING_OPERATIONS if string_only else OPERATIONS
    try:
        return lookup[name]
    except KeyError:
        if name in OPERATIONS:
            raise ValueError(f"Operation '{name}' does not return a string and cannot be chained") from None
        raise ValueError(f"Unknown operation '{name}'") from None
