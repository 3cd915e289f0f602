"""Named chains of string operations, configured in YAML.

A pipeline catalog is a YAML document of the form::

    pipelines:
      slug:
      - strip
      - lower
      - replace:
          old: ' '
          rep: '-'

Each step is either a bare operation name or a one-key mapping from an
operation name to its keyword arguments. Operation names are those in
`strutils.registry.STRING_OPERATIONS`. A catalog with a few common pipelines
ships with the package.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'chain_operations',
    # Classes
    'Step',
    'Pipeline',
    'PipelineCatalog'
]

import inspect
import logging
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
import yaml
from strutils.connections import PipelineDataSource
from strutils.registry import get_operation

logger = logging.getLogger(__name__)

def chain_operations(s: str, functions: Iterable[Callable[[str], str]]) -> str:
    """
    Pass a string through a sequence of functions, left to right.

    Example:
        >>> from strutils import strip, upper
        >>> chain_operations('  t4 r3 ', [strip, upper])
        'T4 R3'
    """
    for function in functions:
        s = function(s)
    return s

@dataclass(frozen=True)
class Step:
    """
    One operation in a pipeline, with the keyword arguments to call it with.

    The arguments are stored as a sorted tuple of `(name, value)` pairs, so
    steps with hashable argument values can be hashed and compared.

    Args:
        operation: Name of a string operation, e.g. 'center'
        kwargs: Keyword arguments passed after the input string, as a mapping
            or as `(name, value)` pairs

    Raises:
        ValueError: If the operation is unknown, does not return a string, or
            does not accept the given arguments
    """
    operation: str
    kwargs: Tuple[Tuple[str, Any], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'kwargs', tuple(sorted(dict(self.kwargs).items(), key=lambda item: str(item[0]))))
        operation = get_operation(self.operation, string_only=True)
        try:
            inspect.signature(operation).bind('', **self.arguments)
        except TypeError as err:
            raise ValueError(f"Invalid arguments for step '{self.operation}': {err}") from err

    @property
    def arguments(self) -> Dict[str, Any]:
        return dict(self.kwargs)

    def __call__(self, s: str) -> str:
        return get_operation(self.operation, string_only=True)(s, **self.arguments)

    @classmethod
    def from_config(cls, raw: Any) -> 'Step':
        if isinstance(raw, str):
            return cls(raw)
        if isinstance(raw, dict) and len(raw) == 1:
            operation, kwargs = next(iter(raw.items()))
            kwargs = kwargs or {}
            if not isinstance(kwargs, dict):
                raise ValueError(f"Arguments for step '{operation}' must be a mapping")
            return cls(operation, kwargs)
        raise ValueError(f"Invalid pipeline step: {raw!r}")

    def to_config(self):
        return {self.operation: self.arguments} if self.kwargs else self.operation

@dataclass
class Pipeline:
    """
    A named sequence of steps applied to a string in order.

    Example:
        >>> slug = Pipeline.from_config('slug', ['strip', 'lower', {'replace': {'old': ' ', 'rep': '-'}}])
        >>> slug.apply('  Cross Lake Twp ')
        'cross-lake-twp'
    """
    name: str
    steps: List[Step] = field(default_factory=list)

    @classmethod
    def from_config(cls, name: str, raw_steps: Optional[List[Any]]) -> 'Pipeline':
        if raw_steps is None:
            raw_steps = []
        if not isinstance(raw_steps, list):
            raise ValueError(f"Steps for pipeline '{name}' must be a list")
        return cls(name, [Step.from_config(raw) for raw in raw_steps])

    def to_config(self) -> List[Any]:
        return [step.to_config() for step in self.steps]

    def apply(self, s: str) -> str:
        logger.debug("Applying pipeline '%s' (%d steps)", self.name, len(self.steps))
        return chain_operations(s, self.steps)

    def __call__(self, s: str) -> str:
        return self.apply(s)

@dataclass
class PipelineCatalog(PipelineDataSource):
    """
    A collection of pipelines, keyed by name.

    Examples:
        >>> catalog = PipelineCatalog.load_from_yaml()
        >>> catalog.get('shout').apply(' hello ')
        'HELLO'
        >>> 'slug' in catalog.names
        True
    """
    pipelines: Tuple[Pipeline, ...] = ()

    def __post_init__(self):
        self.pipelines = tuple(self.pipelines)
        self._validate_data()

    @classmethod
    def load_from_yaml(cls, file_path = None):
        """
        Load a catalog from a YAML file.

        Args:
            file_path: Path to the YAML file. Defaults to the packaged catalog.

        Raises:
            ValueError: If the document is not a valid pipeline catalog
        """
        source = cls.yaml_path() if file_path is None else Path(file_path)

        with source.open('r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as err:
                raise ValueError(f"{source} is not valid YAML") from err

        if not isinstance(data, dict) or not isinstance(data.get('pipelines'), dict):
            raise ValueError(f"{source} does not contain a 'pipelines' mapping")

        pipelines = [
            Pipeline.from_config(name, raw_steps)
            for name, raw_steps in data['pipelines'].items()
        ]
        logger.debug("Loaded %d pipelines from %s", len(pipelines), source)
        return cls(pipelines)

    def save_to_yaml(self, file_path):
        serializable_data = {
            'pipelines': {
                pipeline.name: pipeline.to_config() for pipeline in self.pipelines
            }
        }

        with open(file_path, 'w') as f:
            yaml.dump(serializable_data, f, sort_keys=False)
        logger.info("Saved %d pipelines to %s", len(self.pipelines), file_path)

    def _validate_data(self):
        names = [pipeline.name for pipeline in self.pipelines]
        if not all(names):
            raise ValueError("Missing pipeline names in catalog")
        elif len(names) != len(set(names)):
            raise ValueError("Non-unique pipeline names in catalog")

    @cached_property
    def _lookup(self) -> Dict[str, Pipeline]:
        return {pipeline.name: pipeline for pipeline in self.pipelines}

    @property
    def names(self) -> List[str]:
        return list(self._lookup)

    def get(self, name: str) -> Pipeline:
        try:
            return self._lookup[name]
        except KeyError:
            raise KeyError(f"No pipeline named '{name}'") from None
