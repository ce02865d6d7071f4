"""
Resolve networks, horizon nodes and display names from a configuration.
"""

from __future__ import annotations
from typing import Optional
import logging

from .config import Configuration
from .horizon import HorizonServer
from .runtime.errors import UnknownNetworkError

logger = logging.getLogger(__name__)


def network_passphrase(conf: Configuration, network: Optional[str] = None) -> str:
    """
    Passphrase for ``network``.

    Known network names map to their passphrase, anything else is taken as
    a literal passphrase. Defaults to ``conf.network``.
    """
    network = network or conf.network
    return conf.current.passphrase.get(network, network)


def horizon_url(conf: Configuration, passphrase: str) -> str:
    """
    Horizon URL for ``passphrase``.

    ``conf.horizon`` takes precedence over the network table.

    Raises:
        UnknownNetworkError: If no horizon is known for ``passphrase``
    """
    if conf.horizon:
        return conf.horizon
    url = conf.current.horizon.get(passphrase)
    if url is None:
        raise UnknownNetworkError(
            f"No horizon known for network {passphrase!r}",
            details={"passphrase": passphrase},
        )
    return url


def server(conf: Configuration, passphrase: Optional[str] = None) -> HorizonServer:
    """Cached ``HorizonServer`` for ``passphrase`` (default network if omitted)."""
    passphrase = passphrase or network_passphrase(conf)
    url = horizon_url(conf, passphrase)
    cached = conf.current.server.get(url)
    if cached is None:
        logger.debug(f"Opening horizon {url}")
        cached = HorizonServer(url)
        conf.current.server[url] = cached
    return cached


def close_servers(conf: Configuration) -> None:
    """Close and forget every cached ``HorizonServer``."""
    for url, cached in list(conf.current.server.items()):
        logger.debug(f"Closing horizon {url}")
        cached.close()
    conf.current.server.clear()


def display_name(conf: Configuration, public_key: str) -> str:
    """Alias of ``public_key``, or the key itself. Display only."""
    return conf.aliases.get(public_key, public_key)


__all__ = [
    "network_passphrase",
    "horizon_url",
    "server",
    "close_servers",
    "display_name",
]
