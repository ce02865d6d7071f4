"""
Cosmic Lib - Stellar transaction link configuration

Known address aliases, network defaults and the click/format handler
registries consulted when building and displaying transaction links.
"""

from . import aliases
from .config import (
    Configuration, NetworkTable, Settings, new_configuration,
    setup_network, add_aliases, remove_aliases,
    set_click_handler, clear_click_handler,
    add_format_handler, remove_format_handler,
    PUBLIC_PASSPHRASE, TESTNET_PASSPHRASE,
)
from .config import config as default_config
from .event import ClickEvent, FormatEvent, call_click_handler, call_format_handlers
from .handlers import FieldNode, Interface, TerminalInterface
from .horizon import HorizonServer
from .resolve import network_passphrase, horizon_url, server, close_servers, display_name
from .runtime.errors import *
from .runtime.strkey import is_valid_public_key, decode_public_key

__version__ = "0.1.0"
__all__ = [
    # Aliases
    "aliases",

    # Configuration
    "Configuration",
    "NetworkTable",
    "Settings",
    "default_config",
    "new_configuration",
    "setup_network",
    "add_aliases",
    "remove_aliases",
    "set_click_handler",
    "clear_click_handler",
    "add_format_handler",
    "remove_format_handler",
    "PUBLIC_PASSPHRASE",
    "TESTNET_PASSPHRASE",

    # Events
    "ClickEvent",
    "FormatEvent",
    "call_click_handler",
    "call_format_handlers",
    "FieldNode",
    "Interface",
    "TerminalInterface",

    # Networks
    "HorizonServer",
    "network_passphrase",
    "horizon_url",
    "server",
    "close_servers",
    "display_name",

    # Errors and keys
    "ErrorCode",
    "CosmicError",
    "ConfigurationError",
    "UnknownNetworkError",
    "InvalidPublicKeyError",
    "HorizonError",
    "is_valid_public_key",
    "decode_public_key",
]
