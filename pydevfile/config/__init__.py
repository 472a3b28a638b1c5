"""Configuration module for pydevfile."""

from .loader import ConfigLoader, load_config
from .models import PydevfileConfig, PydevfileSettings

__all__ = [
    "ConfigLoader",
    "PydevfileConfig",
    "PydevfileSettings",
    "load_config",
]
