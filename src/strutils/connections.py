from importlib import resources
from functools import cache

class PipelineDataSource:
    @classmethod
    @cache
    def yaml_path(cls):
        """ Packaged pipeline catalog """
        return resources.files('strutils.data').joinpath('pipelines.yaml')
