"""This module loads the defaults used by stringy's delegates (text encoding,
padding, wrapping) from a YAML file.

The packaged defaults live in `stringy/data/settings.yaml`. A custom file can be
loaded with `Settings.load` and passed to `stringy.wrapper.Stringy` or to the
`stringy.bases` converters.
"""

__docformat__ = 'google'

__all__ = [
    'Settings',
    'get_settings'
]

import codecs
from dataclasses import dataclass, fields
from functools import cache
from pathlib import Path
import yaml
from loguru import logger
from stringy.connections import SettingsDataSource
from stringy.exceptions import StringyError

@dataclass(frozen=True)
class Settings(SettingsDataSource):
    """
    Defaults applied when a delegate is called without an explicit argument.

    Args:
        encoding: Codec used to turn strings into bytes for base conversion and byte lengths
        errors: Codec error handler; `surrogateescape` lets arbitrary bytes round-trip through `str`
        pad_string: Filler used by `stringy.wrapper.Stringy.pad`
        wrap_width: Line width used by `stringy.wrapper.Stringy.wrap`
        ucwords_delimiters: Characters after which `stringy.wrapper.Stringy.ucwords` capitalizes
    """
    encoding: str = 'utf-8'
    errors: str = 'surrogateescape'
    pad_string: str = ' '
    wrap_width: int = 75
    ucwords_delimiters: str = ' \t\r\n\f\v'

    def __post_init__(self):
        self._validate()

    def _validate(self):
        try:
            codecs.lookup(self.encoding)
            codecs.lookup_error(self.errors)
        except LookupError as e:
            raise StringyError('Invalid codec settings', e) from e

        if not self.pad_string:
            raise StringyError('Setting pad_string must not be empty')
        if self.wrap_width < 1:
            raise StringyError(f'Setting wrap_width must be positive, got {self.wrap_width}')

    @classmethod
    def load(cls, file_path = None) -> "Settings":
        """
        Load settings from a YAML file, falling back to defaults for missing keys.

        Args:
            file_path: Path to a YAML file (defaults to the packaged settings)

        Raises:
            StringyError: If the file contains unknown keys or invalid values
        """
        file_path = Path(file_path) if file_path else cls.yaml_path()

        with file_path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if not data:
            logger.warning("Settings file {} is empty, using defaults", file_path)
            return cls()

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise StringyError(f"Unknown settings in {file_path}: {', '.join(unknown)}")

        logger.debug("Loaded settings from {}", file_path)
        return cls(**data)

@cache
def get_settings() -> Settings:
    """
    Return the packaged default settings, loaded once per process.
    """
    return Settings.load()
