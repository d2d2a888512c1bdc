"""
System domain configuration classes.

This module defines configuration classes for system-level settings:
environment and logging.
"""

from dataclasses import dataclass
from typing import Any, Dict
from enum import Enum


class Environment(Enum):
    """Environment types."""
    DEVELOPMENT = "development"
    TEST = "test"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class SystemConfig:
    """
    Main system configuration class.

    `DEBUG` forces the DEBUG log level regardless of `log_level`.
    """

    name: str = "Fee Ledger"
    environment: Environment = Environment.DEVELOPMENT
    DEBUG: bool = False
    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = False
    config_dir: str = "settings"

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'name': self.name,
            'environment': self.environment.value,
            'debug': self.DEBUG,
            'log_level': self.log_level.value,
            'json_logs': self.json_logs,
            'config_dir': self.config_dir
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SystemConfig':
        """Create configuration from dictionary."""
        config = cls()

        config.name = data.get('name', config.name)
        if 'environment' in data:
            config.environment = Environment(data['environment'])
        config.DEBUG = data.get('debug', config.DEBUG)
        if 'log_level' in data:
            config.log_level = LogLevel(str(data['log_level']).upper())
        config.json_logs = data.get('json_logs', config.json_logs)
        config.config_dir = data.get('config_dir', config.config_dir)

        return config
