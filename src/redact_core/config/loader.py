"""Configuration loader."""

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import yaml

from redact_core.errors import AppError, ErrorCategory
from redact_core.redaction import MAX_DEPTH_LIMIT, RedactionConfig
from redact_core.types import Environment, LogFormat, LogLevel

from .models import LoggingConfig, ServerConfig, Settings

CONFIG_PATH_ENV = "REDACT_CORE_CONFIG"
ENVIRONMENT_ENV = "REDACT_CORE_ENV"

VALID_KEYS = frozenset({"environment", "server", "redaction", "logging"})

E = TypeVar("E", bound=Enum)


def config_error(detail: str) -> AppError:
    """Build the error raised for invalid configuration.

    Args:
        detail: What is wrong

    Returns:
        AppError with CONFIG_INVALID code
    """
    return AppError(
        code="CONFIG_INVALID",
        category=ErrorCategory.CONFIG,
        message=f"Invalid configuration: {detail}",
        http_status=500,
    )


def resolve_env_vars(value: str) -> str:
    """Resolve environment variable references in string.

    Supports:
    - ${VAR} - Required, error if not set
    - ${VAR:-default} - With default value
    - ${VAR:?error message} - Required with custom error

    Args:
        value: String with potential env var references

    Returns:
        String with env vars resolved

    Raises:
        AppError: If required var not set
    """
    # Pattern: ${VAR}, ${VAR:-default}, ${VAR:?error}
    pattern = r"\$\{([^}:]+)(?::([?-])([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        operator = match.group(2)  # '-' or '?' or None
        operand = match.group(3)  # default value or error message

        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value

        if operator == "-":
            return operand or ""
        if operator == "?":
            raise config_error(operand or f"Required environment variable {var_name} not set")
        raise config_error(f"Required environment variable {var_name} not set")

    return re.sub(pattern, replacer, value)


def _resolve_env_vars_recursive(data: Any) -> Any:
    """Recursively resolve env vars in data structure.

    Args:
        data: Data structure (dict, list, str, etc.)

    Returns:
        Data with env vars resolved
    """
    if isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    elif isinstance(data, str):
        return resolve_env_vars(data)
    else:
        return data


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _enum_value(enum_type: type[E], value: Any, path: str) -> E:
    if isinstance(value, enum_type):
        return value
    for member in enum_type:
        if str(value).lower() == member.value.lower():
            return member
    allowed = ", ".join(member.value for member in enum_type)
    raise config_error(f"{path} must be one of {allowed}, got {value!r}")


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise config_error(f"'{key}' must be a mapping")
    return section


class ConfigLoader:
    """Load and validate configuration."""

    def __init__(self, logger: Any = None):
        """Initialize config loader.

        Args:
            logger: Optional AppLogger instance
        """
        self._settings: Settings | None = None
        self._config_path: Path | None = None
        self._logger = logger

    @property
    def settings(self) -> Settings | None:
        """Most recently loaded settings."""
        return self._settings

    def load(self, path: str | Path | None = None, use_defaults: bool = True) -> Settings:
        """Load configuration from file.

        Resolution order if path not specified:
        1. REDACT_CORE_CONFIG environment variable
        2. If use_defaults=True and no file found, use default configuration

        REDACT_CORE_ENV, when set, overrides the file's environment.

        Args:
            path: Optional path to config file
            use_defaults: If True, use default config when no file found

        Returns:
            Loaded Settings instance

        Raises:
            AppError: If file not found (when use_defaults=False) or invalid
        """
        if path is None:
            path = os.environ.get(CONFIG_PATH_ENV)

        if path is None or not Path(path).exists():
            if path is not None and not use_defaults:
                raise config_error(f"Configuration file not found: {path}")
            if self._logger:
                self._logger.info("No config file found, using default configuration")
            return self.load_from_dict({})

        config_path = Path(path)
        try:
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise config_error(f"Invalid YAML in config file: {e}") from e

        if not isinstance(data, dict):
            raise config_error("top level must be a mapping")

        data = _resolve_env_vars_recursive(data)
        return self.load_from_dict(data, config_path)

    def load_from_dict(self, data: dict[str, Any], config_path: Path | None = None) -> Settings:
        """Load configuration from dictionary.

        Args:
            data: Configuration dictionary
            config_path: Optional path to config file (for tracking)

        Returns:
            Loaded Settings instance

        Raises:
            AppError: If configuration is invalid
        """
        env_override = os.environ.get(ENVIRONMENT_ENV)
        if env_override:
            data = deep_merge(data, {"environment": env_override})

        for key in data:
            if key not in VALID_KEYS and self._logger:
                self._logger.warning("Unknown configuration key", section=key)

        settings = self._dict_to_settings(data)
        self._settings = settings
        self._config_path = config_path

        if self._logger:
            self._logger.info(
                "Configuration loaded",
                environment=settings.environment.value,
                path=str(config_path) if config_path else None,
            )
        return settings

    def _dict_to_settings(self, data: dict[str, Any]) -> Settings:
        server = _section(data, "server")
        redaction = _section(data, "redaction")
        logging_section = _section(data, "logging")

        max_depth = redaction.get("max_depth", RedactionConfig.max_depth)
        if not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 1:
            raise config_error(f"redaction.max_depth must be a positive integer, got {max_depth!r}")
        if max_depth > MAX_DEPTH_LIMIT:
            raise config_error(
                f"redaction.max_depth must be at most {MAX_DEPTH_LIMIT}, got {max_depth}"
            )

        try:
            port = int(server.get("port", ServerConfig.port))
        except (TypeError, ValueError) as e:
            raise config_error(f"server.port must be an integer: {e}") from e

        return Settings(
            environment=_enum_value(
                Environment, data.get("environment", Environment.DEVELOPMENT), "environment"
            ),
            server=ServerConfig(
                host=str(server.get("host", ServerConfig.host)),
                port=port,
                title=str(server.get("title", ServerConfig.title)),
                version=str(server.get("version", ServerConfig.version)),
            ),
            redaction=RedactionConfig(
                enabled=bool(redaction.get("enabled", True)),
                max_depth=max_depth,
            ),
            logging=LoggingConfig(
                level=_enum_value(
                    LogLevel, logging_section.get("level", LogLevel.INFO), "logging.level"
                ),
                format=_enum_value(
                    LogFormat, logging_section.get("format", LogFormat.JSON), "logging.format"
                ),
            ),
        )
