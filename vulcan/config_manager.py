"""
Configuration Loader

Loads the service configuration JSON from a fixed base directory. Only the
basename of the requested filename is used, so callers cannot reach files
outside the base directory with "../" segments or absolute paths.
"""

import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .config import get_settings
from .errors import ConfigParseError, ConfigReadError
from .schemas.configuration import Configuration

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Load configuration files from a single base directory.

    Usage:
        manager = ConfigManager("./configs")
        config = manager.load("config.json")
        print(config.port)
    """

    def __init__(self, base_dir: Union[str, Path, None] = None):
        """
        Initialize configuration manager.

        Args:
            base_dir: Directory configuration files live in
                      (default: the config_dir setting)
        """
        if base_dir is None:
            base_dir = get_settings().config_dir
        self.base_dir = Path(base_dir)
        self.logger = logging.getLogger(f"{__name__}.ConfigManager")

    def resolve_path(self, filename: Union[str, Path]) -> Path:
        """
        Map a caller-supplied filename onto the base directory.

        Args:
            filename: Requested file; any directory component is dropped

        Returns:
            Path of the file inside the base directory

        Raises:
            ConfigReadError: If the filename has no usable basename
                             or contains a NUL byte
        """
        name = Path(filename).name
        if name in ("", ".", "..") or "\x00" in name:
            raise ConfigReadError(
                f"Invalid configuration filename: {str(filename)!r}", filename
            )
        return self.base_dir / name

    def load(self, filename: Union[str, Path]) -> Configuration:
        """
        Read and validate a configuration file.

        Args:
            filename: Configuration file name (resolved inside base_dir)

        Returns:
            Populated Configuration

        Raises:
            ConfigReadError: If the file cannot be opened or read
            ConfigParseError: If the contents are not valid JSON or
                              do not match the configuration shape
        """
        path = self.resolve_path(filename)
        self.logger.debug(f"Loading configuration from: {path}")

        try:
            data = path.read_bytes()
        except OSError as e:
            self.logger.error(f"Failed to read configuration {path}: {e}")
            raise ConfigReadError(str(e), path) from e

        try:
            config = Configuration.model_validate_json(data)
        except ValidationError as e:
            self.logger.error(f"Failed to parse configuration {path}: {e}")
            raise ConfigParseError(e, path) from e

        self.logger.info(
            f"Loaded configuration from {path} "
            f"({len(config.evm_networks)} networks, port {config.port!r})"
        )
        return config


def load_configuration(
    filename: Union[str, Path], base_dir: Union[str, Path, None] = None
) -> Configuration:
    """Load a configuration file from base_dir (default: config_dir setting)."""
    return ConfigManager(base_dir).load(filename)
