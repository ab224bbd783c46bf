"""Shared types for redact-core.

Import from here rather than submodules:
    from redact_core.types import Environment, LogLevel
"""

from .enums import Environment, LogFormat, LogLevel

__all__ = [
    "Environment",
    "LogFormat",
    "LogLevel",
]
