"""pandas integration.

Importing this module registers a `strutils` accessor on `pandas.Series`,
which applies the string operations elementwise:

    >>> import pandas as pd
    >>> import strutils.series
    >>> pd.Series([' t4 r3 ', None], dtype=object).strutils.strip().tolist()
    ['t4 r3', None]

Missing values are passed through untouched, and the index and name of the
original series are kept.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'StrutilsAccessor',
    # Functions
    'distance_matrix'
]

from functools import cache
from typing import Callable, Iterable, Optional
import pandas as pd
from strutils.registry import get_operation
from strutils.distance import edit_distance
from strutils.pipeline import PipelineCatalog

def _is_missing(value) -> bool:
    return pd.api.types.is_scalar(value) and pd.isna(value)

@cache
def _default_catalog() -> PipelineCatalog:
    return PipelineCatalog.load_from_yaml()

@pd.api.extensions.register_series_accessor('strutils')
class StrutilsAccessor:
    """Elementwise string operations for a `pandas.Series` of strings.

    Each method returns a new Series. See the functions of the same name in
    `strutils` for the semantics of each operation.
    """
    def __init__(self, pandas_obj: pd.Series):
        self._obj = pandas_obj

    def _map(self, function: Callable, *args, **kwargs) -> pd.Series:
        return pd.Series(
            [value if _is_missing(value) else function(value, *args, **kwargs) for value in self._obj],
            index=self._obj.index,
            name=self._obj.name,
            dtype=object
        )

    def apply(self, operation: str, *args, **kwargs) -> pd.Series:
        """
        Apply a string operation by name.

        Raises:
            ValueError: If the operation is unknown, or is `join`, which
                does not take a string as its first argument
        """
        if operation == 'join':
            raise ValueError("Operation 'join' takes a sequence of strings; use join_lists")
        return self._map(get_operation(operation), *args, **kwargs)

    def slice(self, start: int = 0, end: int = 0) -> pd.Series:
        return self.apply('slice', start, end)

    def capitalize(self) -> pd.Series:
        return self.apply('capitalize')

    def upper(self) -> pd.Series:
        return self.apply('upper')

    def lower(self) -> pd.Series:
        return self.apply('lower')

    def lstrip(self) -> pd.Series:
        return self.apply('lstrip')

    def rstrip(self) -> pd.Series:
        return self.apply('rstrip')

    def strip(self) -> pd.Series:
        return self.apply('strip')

    def center(self, width: int, fill: str = ' ') -> pd.Series:
        return self.apply('center', width, fill)

    def ljust(self, width: int, fill: str = ' ') -> pd.Series:
        return self.apply('ljust', width, fill)

    def rjust(self, width: int, fill: str = ' ') -> pd.Series:
        return self.apply('rjust', width, fill)

    def replace(self, old: str, rep: str) -> pd.Series:
        return self.apply('replace', old, rep)

    def split(self, delim: str = '') -> pd.Series:
        """Split each string; elements become lists of strings."""
        return self.apply('split', delim)

    def join_lists(self, delim: str) -> pd.Series:
        """Join each element, a list of strings, with `delim`."""
        join = get_operation('join')
        return self._map(lambda value: join(delim, value))

    def expand_tabs(self, tabsize: int = 8) -> pd.Series:
        return self.apply('expand_tabs', tabsize)

    def edit_distance(self, other: str, ignorecase: bool = False) -> pd.Series:
        """Edit distance from each element to `other`."""
        distances = self.apply('edit_distance', other, ignorecase)
        return distances if distances.isna().any() else distances.astype('int64')

    def pipeline(self, name: str, catalog: Optional[PipelineCatalog] = None) -> pd.Series:
        """
        Apply a named pipeline to each element.

        Args:
            name: Pipeline name
            catalog: Catalog to look the name up in. Defaults to the packaged catalog.

        Raises:
            KeyError: If the catalog has no pipeline with this name
        """
        catalog = catalog or _default_catalog()
        return self._map(catalog.get(name))

def distance_matrix(left: Iterable[str], right: Iterable[str], ignorecase: bool = False) -> pd.DataFrame:
    """
    Pairwise edit distances between two collections of strings.

    Args:
        left: Strings labelling the rows
        right: Strings labelling the columns
        ignorecase: Compare after folding ASCII letters to lowercase

    Returns:
        DataFrame where cell (a, b) is `edit_distance(a, b)`

    Example:
        >>> int(distance_matrix(['kitten', 'sitting'], ['sitting']).loc['kitten', 'sitting'])
        3
    """
    left, right = list(left), list(right)
    return pd.DataFrame(
        [[edit_distance(a, b, ignorecase) for b in right] for a in left],
        index=left,
        columns=right,
        dtype='int64'
    )
