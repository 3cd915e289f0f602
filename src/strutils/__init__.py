"""
Pure, ASCII-oriented string transformation utilities.

The operations are re-exported here; see individual module documentation for
detailed information. The pandas accessor is registered by importing
`strutils.series`.
"""
from . import patterns
from . import case
from . import trim
from . import justify
from . import tokens
from . import tabs
from . import distance
from . import registry
from . import pipeline

from .case import capitalize, upper, lower
from .trim import lstrip, rstrip, strip
from .justify import center, ljust, rjust
from .tokens import slice_string, replace, split, join
from .tabs import expand_tabs
from .distance import edit_distance, similarity, closest_match
from .pipeline import Pipeline, PipelineCatalog

__all__ = [
    # Modules
    'patterns',
    'case',
    'trim',
    'justify',
    'tokens',
    'tabs',
    'distance',
    'registry',
    'pipeline',
    # Functions
    'slice_string',
    'capitalize',
    'upper',
    'lower',
    'lstrip',
    'rstrip',
    'strip',
    'center',
    'ljust',
    'rjust',
    'replace',
    'split',
    'join',
    'expand_tabs',
    'edit_distance',
    'similarity',
    'closest_match',
    # Classes
    'Pipeline',
    'PipelineCatalog'
]
