from .configuration import Configuration

__all__ = [
    "Configuration"
]
