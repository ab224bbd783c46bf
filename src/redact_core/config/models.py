"""Configuration data models."""

from dataclasses import dataclass, field

from redact_core.logging import LogConfig
from redact_core.redaction import RedactionConfig
from redact_core.types import Environment, LogFormat, LogLevel


@dataclass
class ServerConfig:
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3000
    title: str = "redact-core"
    version: str = "1.0.0"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON

    def to_log_config(self) -> LogConfig:
        """Build the runtime logger configuration."""
        return LogConfig(level=self.level, format=self.format)


@dataclass
class Settings:
    """Complete configuration."""

    environment: Environment = Environment.DEVELOPMENT
    server: ServerConfig = field(default_factory=ServerConfig)
    redaction: RedactionConfig = field(default_factory=RedactionConfig.default)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def is_production(self) -> bool:
        """True when running in production."""
        return self.environment == Environment.PRODUCTION
