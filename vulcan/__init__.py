"""
Helpers for the vulcan token-gating service: configuration loading,
ERC1155 token-id validation, big-integer parsing and cross-chain
collection lookups.
"""
from .config_manager import ConfigManager, load_configuration
from .errors import ConfigError, ConfigParseError, ConfigReadError
from .schemas import Configuration

__version__ = "0.1.0"

__all__ = [
    "ConfigManager",
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "Configuration",
    "load_configuration"
]
