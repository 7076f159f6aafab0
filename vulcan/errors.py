"""Exceptions raised by the configuration loader."""
from pathlib import Path
from typing import Union

from .constants import PARSE_ERROR_TEMPLATE


class ConfigError(Exception):
    """Base class for configuration loading failures."""

    def __init__(self, message: str, path: Union[str, Path, None] = None):
        super().__init__(message)
        self.path = path


class ConfigReadError(ConfigError):
    """The configuration file could not be opened or read."""


class ConfigParseError(ConfigError):
    """The configuration file is not valid JSON or has the wrong shape."""

    def __init__(self, error: Exception, path: Union[str, Path, None] = None):
        super().__init__(PARSE_ERROR_TEMPLATE.format(error=error), path)
