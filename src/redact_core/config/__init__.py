"""Configuration loading."""

from .loader import ConfigLoader, config_error, deep_merge, resolve_env_vars
from .models import LoggingConfig, ServerConfig, Settings

__all__ = [
    "ConfigLoader",
    "Settings",
    "ServerConfig",
    "LoggingConfig",
    "config_error",
    "deep_merge",
    "resolve_env_vars",
]
