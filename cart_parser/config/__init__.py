"""Configuration loading for batch cart processing."""

from .loader import CartConfig, ConfigError, load_config

__all__ = [
    "CartConfig",
    "ConfigError",
    "load_config",
]
