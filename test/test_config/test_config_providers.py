"""
Tests for the configuration providers and the registry.
"""

import pytest

from feeledger.config import (
    ConfigRegistry,
    FeeLedgerConfig,
    RuntimeConfigProvider,
    LogLevel,
    get_fee_config_provider,
    load_fee_ledger_config,
    load_system_config,
    validate_fee_ledger_config
)
from feeledger.config.core import FileConfigProvider
from feeledger.core.exceptions import ConfigurationError
from feeledger.outils.address import address_from_int
from feeledger.token_handler.fee_ledger import build_fee_ledger

STAKER = address_from_int(0x05A4E00000)
OWNER = address_from_int(0x0A11CE0000)

FEE_YAML = f"""
name: File Ledger
transfer_fee:
  numerator: 1
  denominator: 1000
mint_fee:
  numerator: 0
  denominator: 1
  flat: 10
staker: '{STAKER}'
owner: '{OWNER}'
redemption_address_count: 2
"""


class TestFileConfigProvider:

    def test_missing_file_gives_empty_config(self, tmp_path):
        provider = FileConfigProvider("fee", str(tmp_path))
        assert provider.get_config() == {}

    def test_reads_yaml(self, tmp_path):
        (tmp_path / "fee.yaml").write_text(FEE_YAML)
        provider = FileConfigProvider("fee", str(tmp_path))

        config = provider.get_config()

        assert config['name'] == "File Ledger"
        assert config['mint_fee']['flat'] == 10

    def test_update_writes_file(self, tmp_path):
        provider = FileConfigProvider("fee", str(tmp_path))
        assert provider.update_config({'redemption_address_count': 7})

        reloaded = FileConfigProvider("fee", str(tmp_path))
        assert reloaded.get_config() == {'redemption_address_count': 7}

    def test_invalid_update_is_not_saved(self, tmp_path):
        provider = FileConfigProvider("fee", str(tmp_path), validator=validate_fee_ledger_config)
        assert not provider.update_config({'redemption_address_count': -7})
        assert not (tmp_path / "fee.yaml").exists()

    def test_reset_removes_file(self, tmp_path):
        provider = FileConfigProvider("fee", str(tmp_path))
        provider.update_config({'name': 'x'})
        assert provider.reset_to_defaults()
        assert provider.get_config() == {}

    def test_malformed_yaml(self, tmp_path):
        (tmp_path / "fee.yaml").write_text("transfer_fee: [1, 2\n")
        with pytest.raises(ConfigurationError):
            FileConfigProvider("fee", str(tmp_path)).get_config()

    def test_non_mapping_yaml(self, tmp_path):
        (tmp_path / "fee.yaml").write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError):
            FileConfigProvider("fee", str(tmp_path)).get_config()


class TestRuntimeConfigProvider:

    def test_update_and_reset(self):
        provider = RuntimeConfigProvider("fee", {'name': 'Runtime'}, validator=validate_fee_ledger_config)

        assert provider.update_config({'redemption_address_count': 1})
        assert not provider.update_config({'unknown': True})
        assert provider.get_config() == {'name': 'Runtime', 'redemption_address_count': 1}

        provider.reset_to_defaults()
        assert provider.get_config() == {'name': 'Runtime'}


class TestConfigRegistry:

    def test_unregistered_domain_gets_file_provider(self, tmp_path):
        registry = ConfigRegistry(str(tmp_path))
        assert isinstance(registry.get_provider("fee"), FileConfigProvider)
        assert registry.list_domains() == ["fee"]

    def test_fee_provider_validates_updates(self, tmp_path):
        registry = ConfigRegistry(str(tmp_path))
        provider = get_fee_config_provider(registry)
        assert provider.validator is validate_fee_ledger_config
        assert not registry.update_config("fee", {'staker': 'not an address'})

    def test_registered_runtime_provider_is_used(self, tmp_path):
        registry = ConfigRegistry(str(tmp_path))
        registry.register_domain("system", RuntimeConfigProvider("system", {'log_level': 'warning'}))
        assert load_system_config(registry).log_level == LogLevel.WARNING

    def test_fee_ledger_from_yaml(self, tmp_path):
        (tmp_path / "fee.yaml").write_text(FEE_YAML)
        registry = ConfigRegistry(str(tmp_path))

        config = load_fee_ledger_config(registry)
        system = build_fee_ledger(config)

        assert isinstance(config, FeeLedgerConfig)
        assert system.administrator.redemption_address_count == 2
        receipt = system.router.mint(address_from_int(0xB0B0B00000), 1000)
        assert receipt.mint_fee == 10

    def test_fee_ledger_from_yaml_without_staker(self, tmp_path):
        (tmp_path / "fee.yaml").write_text("name: Broken\n")
        config = load_fee_ledger_config(ConfigRegistry(str(tmp_path)))
        with pytest.raises(ConfigurationError):
            build_fee_ledger(config)
