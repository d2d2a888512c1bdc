"""
Configuration registry for managing domain-specific configurations.

This module provides a centralized registry for configuration management
across the feeledger domains (fee, system).
"""

import threading
from typing import Any, Dict, List, Optional
from pathlib import Path

from .provider import ConfigProvider, FileConfigProvider
from feeledger.logger import get_feeledger_logger


class ConfigRegistry:
    """
    Central registry for domain-specific configuration management.

    Domains without an explicitly registered provider get a FileConfigProvider
    reading `<config_dir>/<domain>.yaml` on first access.
    """

    def __init__(self, config_dir: str = "settings"):
        self.config_dir = Path(config_dir)
        self.logger = get_feeledger_logger().bind(component="ConfigRegistry")
        self._lock = threading.RLock()

        self._providers: Dict[str, ConfigProvider] = {}

        self.logger.debug("ConfigRegistry initialized", config_dir=str(self.config_dir))

    def register_domain(self, domain: str, provider: Optional[ConfigProvider] = None) -> ConfigProvider:
        """
        Register a domain with its configuration provider.

        Args:
            domain: Domain name (e.g., 'fee', 'system')
            provider: Optional custom provider, defaults to FileConfigProvider

        Returns:
            The registered configuration provider
        """
        with self._lock:
            if provider is None:
                provider = FileConfigProvider(domain, str(self.config_dir))

            self._providers[domain] = provider
            self.logger.info("Domain registered", domain=domain, provider_type=type(provider).__name__)

            return provider

    def get_provider(self, domain: str) -> ConfigProvider:
        """Get configuration provider for a domain, registering a file provider if needed."""
        with self._lock:
            if domain not in self._providers:
                return self.register_domain(domain)

            return self._providers[domain]

    def get_config(self, domain: str) -> Dict[str, Any]:
        """Get configuration for a domain."""
        return self.get_provider(domain).get_config()

    def update_config(self, domain: str, updates: Dict[str, Any]) -> bool:
        """Update configuration for a domain."""
        return self.get_provider(domain).update_config(updates)

    def list_domains(self) -> List[str]:
        """List all registered domains."""
        with self._lock:
            return list(self._providers.keys())
