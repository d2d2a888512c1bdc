"""
Configuration provider base classes and implementations.

This module provides the foundational provider classes for configuration management.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, Optional, TypeVar
from pathlib import Path
import threading

import yaml

from feeledger.core.exceptions import ConfigurationError
from feeledger.logger import get_feeledger_logger

T = TypeVar('T')


class ConfigProvider(ABC, Generic[T]):
    """
    Abstract base class for configuration providers.

    Defines the interface that all configuration providers must implement.
    An optional `validator` callable receives the full candidate configuration
    and returns True when it may be committed.
    """

    def __init__(self, domain: str, validator: Optional[Callable[[Dict[str, Any]], bool]] = None):
        self.domain = domain
        self.validator = validator
        self.logger = get_feeledger_logger().bind(component=f"ConfigProvider_{domain}")
        self._lock = threading.RLock()

    @abstractmethod
    def get_config(self) -> T:
        """Get current configuration."""
        pass

    @abstractmethod
    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Update configuration with new values."""
        pass

    @abstractmethod
    def reset_to_defaults(self) -> bool:
        """Reset configuration to defaults."""
        pass

    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate configuration data."""
        if not isinstance(config, dict):
            return False
        if self.validator is not None:
            return bool(self.validator(config))
        return True


class FileConfigProvider(ConfigProvider[Dict[str, Any]]):
    """
    File-based configuration provider that reads from YAML files.
    """

    def __init__(self, domain: str, config_dir: str = "settings",
                 validator: Optional[Callable[[Dict[str, Any]], bool]] = None):
        super().__init__(domain, validator)
        self.config_dir = Path(config_dir)
        self._config_cache: Optional[Dict[str, Any]] = None
        self._last_modified: Optional[float] = None

    @property
    def config_file(self) -> Path:
        """Get the configuration file path for this domain."""
        return self.config_dir / f"{self.domain}.yaml"

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from file."""
        with self._lock:
            self._refresh_cache()
            return self._config_cache.copy() if self._config_cache else {}

    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Update configuration and save to file."""
        with self._lock:
            current_config = self.get_config()
            current_config.update(updates)

            if not self.validate_config(current_config):
                self.logger.warning("Rejected invalid config update", keys=sorted(updates))
                return False

            self._save_config(current_config)
            self._config_cache = current_config
            return True

    def reset_to_defaults(self) -> bool:
        """Reset to defaults by removing the config file."""
        with self._lock:
            if self.config_file.exists():
                self.config_file.unlink()
            self._config_cache = None
            self._last_modified = None
            return True

    def _refresh_cache(self):
        """Refresh configuration cache if file has changed."""
        if not self.config_file.exists():
            return

        current_mtime = self.config_file.stat().st_mtime
        if self._last_modified is None or current_mtime > self._last_modified:
            try:
                with open(self.config_file, 'r') as f:
                    loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(self.domain, str(self.config_file), f"invalid YAML: {e}") from e
            if not isinstance(loaded, dict):
                raise ConfigurationError(self.domain, str(self.config_file), "top level must be a mapping")
            self._config_cache = loaded
            self._last_modified = current_mtime

    def _save_config(self, config: Dict[str, Any]):
        """Save configuration to file."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, 'w') as f:
            yaml.safe_dump(config, f, default_flow_style=False, indent=2)
        self._last_modified = self.config_file.stat().st_mtime


class RuntimeConfigProvider(ConfigProvider[Dict[str, Any]]):
    """
    Runtime configuration provider that keeps config in memory.
    """

    def __init__(self, domain: str, initial_config: Optional[Dict[str, Any]] = None,
                 validator: Optional[Callable[[Dict[str, Any]], bool]] = None):
        super().__init__(domain, validator)
        self._defaults = dict(initial_config or {})
        self._config = dict(self._defaults)

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from memory."""
        with self._lock:
            return self._config.copy()

    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Update configuration in memory."""
        with self._lock:
            new_config = self._config.copy()
            new_config.update(updates)

            if not self.validate_config(new_config):
                self.logger.warning("Rejected invalid runtime config update", keys=sorted(updates))
                return False

            self._config = new_config
            return True

    def reset_to_defaults(self) -> bool:
        """Reset to the configuration the provider was created with."""
        with self._lock:
            self._config = dict(self._defaults)
            return True
