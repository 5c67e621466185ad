"""
Configuration Management for Menagerie

🔧 Environment-aware configuration:
Dataclass-based settings that can be built per environment, from a
dictionary, from a JSON/YAML file or from ``MENAGERIE_*`` environment
variables.
"""

import json
import logging
import os
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: str) -> "Environment":
        try:
            return cls(value.lower())
        except ValueError:
            raise ConfigurationError(f"Unknown environment: {value}") from None


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.level}")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass
class ApplicationConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Custom configuration
    custom: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_environment(cls, environment: Environment) -> "ApplicationConfig":
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.debug = False
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ApplicationConfig":
        """
        Create configuration from a dictionary.

        Unknown keys are ignored. ``environment`` selects the environment
        defaults first, the remaining keys override them.

        Raises:
            ConfigurationError: If the environment or log level is invalid
        """
        if "environment" in config_dict:
            config = cls.for_environment(Environment.parse(config_dict["environment"]))
        else:
            config = cls()

        if "debug" in config_dict:
            config.debug = bool(config_dict["debug"])

        if "logging" in config_dict:
            overrides = {
                key: value
                for key, value in config_dict["logging"].items()
                if key in LoggingConfig.__dataclass_fields__
            }
            config.logging = replace(config.logging, **overrides)

        if "custom" in config_dict:
            config.custom.update(config_dict["custom"])

        return config

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ApplicationConfig":
        """Load configuration from a JSON or YAML file"""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_path.suffix == ".json":
            with open(config_path) as f:
                config_dict = json.load(f)
        elif config_path.suffix in (".yml", ".yaml"):
            with open(config_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            raise ConfigurationError(f"Unsupported configuration file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    @classmethod
    def from_environment(cls) -> "ApplicationConfig":
        """Create configuration from environment variables"""
        environment = Environment.parse(os.getenv("MENAGERIE_ENV", "development"))
        config = cls.for_environment(environment)

        if os.getenv("MENAGERIE_DEBUG"):
            config.debug = os.getenv("MENAGERIE_DEBUG").lower() == "true"

        if os.getenv("MENAGERIE_LOG_LEVEL"):
            config.logging = replace(config.logging, level=os.getenv("MENAGERIE_LOG_LEVEL"))

        if os.getenv("MENAGERIE_LOG_FILE"):
            config.logging.file_path = os.getenv("MENAGERIE_LOG_FILE")

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file_path": self.logging.file_path,
                "max_file_size": self.logging.max_file_size,
                "backup_count": self.logging.backup_count
            },
            "custom": self.custom
        }


# Global configuration management
_current_config: Optional[ApplicationConfig] = None


def set_config(config: Optional[ApplicationConfig]):
    """Set the global configuration. ``None`` clears it."""
    global _current_config
    _current_config = config


def get_config() -> ApplicationConfig:
    """Get the current global configuration"""
    global _current_config

    if _current_config is None:
        # Auto-create from environment if not set
        _current_config = ApplicationConfig.from_environment()

    return _current_config


def configure_from_file(config_path: Union[str, Path]) -> ApplicationConfig:
    """Configure application from file"""
    config = ApplicationConfig.from_file(config_path)
    set_config(config)
    return config


def configure_from_dict(config_dict: Dict[str, Any]) -> ApplicationConfig:
    """Configure application from dictionary"""
    config = ApplicationConfig.from_dict(config_dict)
    set_config(config)
    return config


__all__ = [
    "ApplicationConfig", "Environment", "LoggingConfig",
    "set_config", "get_config", "configure_from_file", "configure_from_dict"
]
