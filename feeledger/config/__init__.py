"""
Configuration management system with domain-based architecture.

- Fee ledger configurations and presets
- System-level settings and logging
- Core registry and provider infrastructure
"""

from .core import ConfigRegistry, ConfigProvider, FileConfigProvider, RuntimeConfigProvider

from .fee import (
    FeeLedgerConfig, FeeRuleConfig, validate_fee_ledger_config,
    get_default_fee_ledger_config, get_fee_ledger_preset, list_available_presets
)

from .system import SystemConfig, Environment, LogLevel


def get_config_registry(config_dir: str = "settings") -> ConfigRegistry:
    """Create a configuration registry rooted at `config_dir`."""
    return ConfigRegistry(config_dir)


def get_fee_config_provider(registry: ConfigRegistry = None) -> ConfigProvider:
    """Get fee ledger configuration provider."""
    if registry is None:
        registry = get_config_registry()
    provider = registry.get_provider("fee")
    if provider.validator is None:
        provider.validator = validate_fee_ledger_config
    return provider


def get_system_config_provider(registry: ConfigRegistry = None) -> ConfigProvider:
    """Get system configuration provider."""
    if registry is None:
        registry = get_config_registry()
    return registry.get_provider("system")


def load_fee_ledger_config(registry: ConfigRegistry = None) -> FeeLedgerConfig:
    """Read the fee domain from `registry` into a FeeLedgerConfig."""
    return FeeLedgerConfig.from_dict(get_fee_config_provider(registry).get_config())


def load_system_config(registry: ConfigRegistry = None) -> SystemConfig:
    """Read the system domain from `registry` into a SystemConfig."""
    return SystemConfig.from_dict(get_system_config_provider(registry).get_config())


__all__ = [
    # Core infrastructure
    'ConfigRegistry',
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',

    # Fee domain
    'FeeLedgerConfig',
    'FeeRuleConfig',
    'validate_fee_ledger_config',
    'get_default_fee_ledger_config',
    'get_fee_ledger_preset',
    'list_available_presets',

    # System domain
    'SystemConfig',
    'Environment',
    'LogLevel',

    # Convenience functions
    'get_config_registry',
    'get_fee_config_provider',
    'get_system_config_provider',
    'load_fee_ledger_config',
    'load_system_config'
]
