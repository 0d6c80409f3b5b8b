from importlib import resources
from importlib.resources.abc import Traversable

class SettingsDataSource:
    @classmethod
    def yaml_path(cls) -> Traversable:
        """ Packaged defaults """
        return resources.files('stringy.data').joinpath('settings.yaml')
