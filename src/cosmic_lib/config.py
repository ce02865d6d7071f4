"""
Library-wide configuration.

A ``Configuration`` holds the defaults used to build links (page, network,
horizon, source), the known networks, the alias table and the click/format
handler registries. Every operation takes the configuration explicitly; the
module-level ``config`` is only the default instance.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional
import logging
import os

from pydantic import BaseModel, Field, field_validator
from stellar_sdk import Network

from . import aliases as _aliases
from . import event
from .handlers import Interface, TerminalInterface, default_click_handlers
from .runtime.errors import UnknownNetworkError, ConfigurationError, ErrorCode
from .runtime.strkey import is_valid_public_key

logger = logging.getLogger(__name__)

PUBLIC_PASSPHRASE = Network.PUBLIC_NETWORK_PASSPHRASE
TESTNET_PASSPHRASE = Network.TESTNET_NETWORK_PASSPHRASE

DEFAULT_PAGE = "https://cosmic.link/"
DEFAULT_NETWORK = "public"

DEFAULT_NETWORKS = {
    "public": ("https://horizon.stellar.org", PUBLIC_PASSPHRASE),
    "test": ("https://horizon-testnet.stellar.org", TESTNET_PASSPHRASE),
}


class Settings(BaseModel):
    """
    Scalar defaults, loadable from the environment.

    Environment variables: COSMIC_PAGE, COSMIC_NETWORK, COSMIC_HORIZON,
    COSMIC_SOURCE, COSMIC_STRICT.
    """
    page: str = Field(default=DEFAULT_PAGE, description="Base URI of built links")
    network: str = Field(default=DEFAULT_NETWORK, min_length=1, description="Fallback network")
    horizon: Optional[str] = Field(default=None, description="Horizon override")
    source: Optional[str] = Field(default=None, description="Fallback source address")
    strict: bool = Field(default=False, description="Refuse networks without passphrase")

    @field_validator("page", "horizon")
    @classmethod
    def _check_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.startswith(("http://", "https://")):
            raise ValueError(f"Not an http(s) URL: {value}")
        return value

    @field_validator("source")
    @classmethod
    def _check_source(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_valid_public_key(value):
            raise ValueError(f"Not a public key: {value}")
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for name in ("page", "network", "horizon", "source", "strict"):
            raw = environ.get(f"COSMIC_{name.upper()}")
            if raw:
                values[name] = raw
        return cls(**values)


@dataclass
class NetworkTable:
    """Known networks: name -> passphrase, passphrase -> horizon URL."""

    passphrase: Dict[str, str] = field(default_factory=dict)
    horizon: Dict[Optional[str], str] = field(default_factory=dict)
    server: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Configuration:
    """Configuration consulted when building and displaying links."""

    page: str = DEFAULT_PAGE
    network: str = DEFAULT_NETWORK
    horizon: Optional[str] = None
    source: Optional[str] = None
    strict: bool = False
    current: NetworkTable = field(default_factory=NetworkTable)
    aliases: Dict[str, str] = field(default_factory=lambda: dict(_aliases.ALL))
    interface: Interface = field(default_factory=TerminalInterface)
    click_handlers: Optional[Dict[str, Optional[Callable]]] = None
    format_handlers: Dict[str, List[Callable]] = field(default_factory=dict)

    def __post_init__(self):
        if self.click_handlers is None:
            self.click_handlers = default_click_handlers(self)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "Configuration":
        """Build a configuration with the default networks from ``settings``."""
        return new_configuration(
            page=settings.page,
            network=settings.network,
            horizon=settings.horizon,
            source=settings.source,
            strict=settings.strict,
            **kwargs
        )

    def setup_network(self, name: str, horizon: str, passphrase: Optional[str] = None) -> None:
        setup_network(self, name, horizon, passphrase)

    def add_aliases(self, definitions: Mapping[str, str]) -> None:
        add_aliases(self, definitions)

    def remove_aliases(self, public_keys: Iterable[str]) -> None:
        remove_aliases(self, public_keys)

    def set_click_handler(self, field_type: str, callback: Callable) -> None:
        set_click_handler(self, field_type, callback)

    def clear_click_handler(self, field_type: str) -> None:
        clear_click_handler(self, field_type)

    def add_format_handler(self, format: str, callback: Callable) -> None:
        add_format_handler(self, format, callback)

    def remove_format_handler(self, format: str, callback: Callable) -> None:
        remove_format_handler(self, format, callback)


def setup_network(conf: Configuration, name: str, horizon: str,
                  passphrase: Optional[str] = None) -> None:
    """
    Set the default ``passphrase`` and ``horizon`` URL for network ``name``.

    Without ``passphrase``, the one already known for ``name`` is used, which
    allows overriding the horizon of a known network:

        setup_network(conf, "public", "https://my-own-horizon.example.org")
        setup_network(conf, "custom", "https://custom-horizon.example.org", "My Passphrase")

    When no passphrase is known for ``name`` either, the horizon is stored
    under ``None`` with a warning, or ``UnknownNetworkError`` is raised if
    ``conf.strict`` is set.
    """
    if passphrase:
        conf.current.passphrase[name] = passphrase
    else:
        passphrase = conf.current.passphrase.get(name)

    if passphrase is None:
        if conf.strict:
            raise UnknownNetworkError(
                f"No passphrase known for network {name!r}",
                details={"network": name, "horizon": horizon},
            )
        logger.warning(f"Network {name!r} has no passphrase, horizon {horizon} stored without one")

    conf.current.horizon[passphrase] = horizon
    logger.debug(f"Network {name!r} uses {horizon}")


def add_aliases(conf: Configuration, definitions: Mapping[str, str]) -> None:
    """Add new aliases or replace existing ones."""
    _aliases.add(conf, definitions)


def remove_aliases(conf: Configuration, public_keys: Iterable[str]) -> None:
    """Remove aliases for ``public_keys``."""
    _aliases.remove(conf, public_keys)


def set_click_handler(conf: Configuration, field_type: str, callback: Callable) -> None:
    """Set the click handler for ``field_type`` fields (``address``, ``asset``, ``hash``...)."""
    event.set_click_handler(conf, field_type, callback)


def clear_click_handler(conf: Configuration, field_type: str) -> None:
    """Remove the current click handler for ``field_type``."""
    event.clear_click_handler(conf, field_type)


def add_format_handler(conf: Configuration, format: str, callback: Callable) -> None:
    """
    Add the format handler ``callback`` for ``format``.

    ``format`` is one of ``uri``, ``query``, ``tdesc``, ``json``,
    ``transaction`` or ``xdr``. ``callback`` receives a ``FormatEvent`` each
    time a link computes (or fails to compute) ``format``.
    """
    event.add_format_handler(conf, format, callback)


def remove_format_handler(conf: Configuration, format: str, callback: Callable) -> None:
    """Remove format handler ``callback`` for ``format``."""
    event.remove_format_handler(conf, format, callback)


def new_configuration(**kwargs) -> Configuration:
    """Create a configuration with the ``public`` and ``test`` networks set up."""
    conf = Configuration(**kwargs)
    for name, (horizon, passphrase) in DEFAULT_NETWORKS.items():
        setup_network(conf, name, horizon, passphrase)
    if conf.network not in conf.current.passphrase and conf.strict:
        raise ConfigurationError(
            f"Default network {conf.network!r} is not set up",
            code=ErrorCode.INVALID_SETTING,
        )
    return conf


config = new_configuration()

__all__ = [
    "PUBLIC_PASSPHRASE",
    "TESTNET_PASSPHRASE",
    "DEFAULT_PAGE",
    "DEFAULT_NETWORK",
    "Settings",
    "NetworkTable",
    "Configuration",
    "setup_network",
    "add_aliases",
    "remove_aliases",
    "set_click_handler",
    "clear_click_handler",
    "add_format_handler",
    "remove_format_handler",
    "new_configuration",
    "config",
]
