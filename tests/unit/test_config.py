"""
Unit tests for the configuration store.
"""

import logging
import types
import pytest
from pydantic import ValidationError
from unittest.mock import Mock

import cosmic_lib
from cosmic_lib import config as config_module
from cosmic_lib.aliases import ALL
from cosmic_lib.config import (
    Configuration,
    Settings,
    new_configuration,
    setup_network,
    add_aliases,
    remove_aliases,
    set_click_handler,
    clear_click_handler,
    add_format_handler,
    remove_format_handler,
    PUBLIC_PASSPHRASE,
    TESTNET_PASSPHRASE,
)
from cosmic_lib.runtime.errors import UnknownNetworkError, ConfigurationError
from cosmic_lib.event import ClickEvent, call_click_handler
from cosmic_lib.handlers import FieldNode, Interface


class TestDefaults:
    """Tests for a freshly created configuration."""

    def test_scalar_defaults(self, conf):
        assert conf.page == "https://cosmic.link/"
        assert conf.network == "public"
        assert conf.horizon is None
        assert conf.source is None
        assert conf.strict is False

    def test_default_networks(self, conf):
        assert conf.current.passphrase == {
            "public": PUBLIC_PASSPHRASE,
            "test": TESTNET_PASSPHRASE,
        }
        assert conf.current.horizon[PUBLIC_PASSPHRASE] == "https://horizon.stellar.org"
        assert conf.current.horizon[TESTNET_PASSPHRASE] == "https://horizon-testnet.stellar.org"
        assert conf.current.server == {}

    def test_aliases_seeded_from_all(self, conf):
        assert conf.aliases == ALL
        assert conf.aliases is not ALL

    def test_builtin_click_handlers(self, conf):
        assert set(conf.click_handlers) == {"address", "asset", "hash"}

    def test_no_format_handlers(self, conf):
        assert conf.format_handlers == {}

    def test_module_default_instance(self):
        assert isinstance(config_module.config, Configuration)
        assert "public" in config_module.config.current.passphrase

    def test_package_exposes_module_and_default(self):
        """The config submodule stays reachable next to the default instance."""
        assert isinstance(cosmic_lib.config, types.ModuleType)
        assert cosmic_lib.default_config is config_module.config

    def test_passphrases_from_sdk(self):
        from stellar_sdk import Network
        assert PUBLIC_PASSPHRASE == Network.PUBLIC_NETWORK_PASSPHRASE
        assert TESTNET_PASSPHRASE == Network.TESTNET_NETWORK_PASSPHRASE

    def test_explicit_empty_click_handlers(self):
        conf = new_configuration(click_handlers={})
        assert conf.click_handlers == {}

    def test_builtin_handlers_follow_interface(self, conf):
        """Replacing the interface redirects the built-in handlers."""
        gui = Mock(spec=Interface)
        conf.interface = gui
        call_click_handler(conf, "hash", ClickEvent(node=FieldNode(value="abcd"), value="abcd"))
        gui.copy.assert_called_once_with("abcd")

    def test_instances_are_independent(self):
        first, second = new_configuration(), new_configuration()
        first.add_aliases({"GNEW": "New"})
        assert "GNEW" not in second.aliases


class TestSetupNetwork:
    """Tests for setup_network()."""

    def test_with_passphrase(self, conf):
        setup_network(conf, "public", "https://horizon.stellar.org", PUBLIC_PASSPHRASE)
        assert conf.current.horizon[PUBLIC_PASSPHRASE] == "https://horizon.stellar.org"

    def test_custom_network(self, conf):
        setup_network(conf, "custom", "https://custom.example.org", "My Passphrase")
        assert conf.current.passphrase["custom"] == "My Passphrase"
        assert conf.current.horizon["My Passphrase"] == "https://custom.example.org"

    def test_override_known_horizon(self, conf):
        """Omitting the passphrase reuses the stored one."""
        setup_network(conf, "public", "https://my-horizon.example.org")
        assert conf.current.passphrase["public"] == PUBLIC_PASSPHRASE
        assert conf.current.horizon[PUBLIC_PASSPHRASE] == "https://my-horizon.example.org"

    def test_unknown_network_without_passphrase(self, conf, caplog):
        """Permissive mode stores the horizon under None."""
        with caplog.at_level(logging.WARNING, logger="cosmic_lib.config"):
            setup_network(conf, "custom", "https://h2.example.org")
        assert conf.current.horizon[None] == "https://h2.example.org"
        assert "custom" not in conf.current.passphrase
        assert "no passphrase" in caplog.text

    def test_strict_unknown_network(self):
        conf = new_configuration(strict=True)
        before = dict(conf.current.horizon)
        with pytest.raises(UnknownNetworkError) as exc_info:
            setup_network(conf, "custom", "https://h2.example.org")
        assert exc_info.value.details["network"] == "custom"
        assert conf.current.horizon == before

    def test_empty_passphrase_falls_back(self, conf):
        setup_network(conf, "test", "https://other.example.org", "")
        assert conf.current.passphrase["test"] == TESTNET_PASSPHRASE
        assert conf.current.horizon[TESTNET_PASSPHRASE] == "https://other.example.org"

    def test_method_delegates(self, conf):
        conf.setup_network("custom", "https://c.example.org", "C")
        assert conf.current.horizon["C"] == "https://c.example.org"


class TestAliasDelegation:

    def test_add_aliases(self, conf, kraken):
        add_aliases(conf, {kraken: "K"})
        assert conf.aliases[kraken] == "K"

    def test_remove_aliases(self, conf, kraken):
        remove_aliases(conf, [kraken])
        assert kraken not in conf.aliases

    def test_methods(self, conf, kraken):
        conf.add_aliases({"GX": "X"})
        conf.remove_aliases(["GX", kraken])
        assert "GX" not in conf.aliases
        assert kraken not in conf.aliases


class TestHandlerDelegation:
    """Registry calls pass through to the event module unchanged."""

    def test_set_and_clear_click_handler(self, conf):
        callback = Mock()
        set_click_handler(conf, "address", callback)
        assert conf.click_handlers["address"] is callback
        clear_click_handler(conf, "address")
        assert conf.click_handlers["address"] is None

    def test_click_handler_replaces(self, conf):
        first, second = Mock(), Mock()
        conf.set_click_handler("asset", first)
        conf.set_click_handler("asset", second)
        assert conf.click_handlers["asset"] is second

    def test_format_handlers_accumulate(self, conf):
        first, second = Mock(), Mock()
        add_format_handler(conf, "query", first)
        conf.add_format_handler("query", second)
        assert conf.format_handlers["query"] == [first, second]

    def test_no_replay_on_configuration(self, conf):
        callback = Mock()
        conf.add_format_handler("xdr", callback)
        callback.assert_not_called()

    def test_remove_format_handler(self, conf):
        first, second = Mock(), Mock()
        conf.add_format_handler("json", first)
        conf.add_format_handler("json", second)
        remove_format_handler(conf, "json", first)
        assert conf.format_handlers["json"] == [second]
        conf.remove_format_handler("json", second)
        assert conf.format_handlers["json"] == []

    def test_remove_absent_format_handler(self, conf):
        conf.remove_format_handler("uri", Mock())
        assert "uri" not in conf.format_handlers


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.page == "https://cosmic.link/"
        assert settings.network == "public"
        assert settings.horizon is None
        assert settings.strict is False

    def test_from_env(self, kraken):
        settings = Settings.from_env({
            "COSMIC_NETWORK": "test",
            "COSMIC_HORIZON": "https://my-horizon.example.org",
            "COSMIC_SOURCE": kraken,
            "COSMIC_STRICT": "true",
        })
        assert settings.network == "test"
        assert settings.horizon == "https://my-horizon.example.org"
        assert settings.source == kraken
        assert settings.strict is True

    def test_rejects_bad_horizon(self):
        with pytest.raises(ValidationError):
            Settings(horizon="ftp://example.org")

    def test_rejects_bad_source(self):
        with pytest.raises(ValidationError):
            Settings(source="GNOTAKEY")

    def test_from_settings(self, kraken):
        conf = Configuration.from_settings(Settings(network="test", source=kraken))
        assert conf.network == "test"
        assert conf.source == kraken
        assert conf.current.passphrase["test"] == TESTNET_PASSPHRASE

    def test_strict_unknown_default_network(self):
        with pytest.raises(ConfigurationError):
            Configuration.from_settings(Settings(network="nowhere", strict=True))
