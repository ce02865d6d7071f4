"""
Minimal Horizon HTTP client.

Only what the configuration layer needs: check a node is reachable and load
an account.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
import json
import logging

import requests

from .runtime.errors import HorizonError, ErrorCode

logger = logging.getLogger(__name__)


class HorizonServer:
    """
    Client for a single Horizon node.

    Example:
        ```python
        with HorizonServer("https://horizon.stellar.org") as server:
            account = server.load_account("GA5XIGA5C7QTPTWXQHY6MCJRMTRZDOSHR6EFIBNDQTCQHG262N4GGKTM")
        ```
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            url: Horizon base URL
            timeout: Request timeout in seconds (default: 30)
            session: Optional requests.Session for connection pooling
        """
        self._url = url.rstrip('/')
        self._timeout = timeout
        self._session = session or requests.Session()
        self._owns_session = session is None

    @property
    def url(self) -> str:
        """Get the Horizon base URL."""
        return self._url

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> HorizonServer:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _get(self, path: str) -> Dict[str, Any]:
        url = f"{self._url}/{path.lstrip('/')}" if path else self._url
        logger.debug(f"GET {url}")

        try:
            response = self._session.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )

            if response.status_code == 404:
                raise HorizonError(
                    f"Not found: {url}",
                    code=ErrorCode.HORIZON_NOT_FOUND,
                    details={"url": url},
                )
            if response.status_code != 200:
                raise HorizonError(
                    f"HTTP {response.status_code}: {response.reason}",
                    details={"url": url, "status": response.status_code},
                )

            return response.json()

        except (requests.exceptions.JSONDecodeError, json.JSONDecodeError) as e:
            raise HorizonError(f"Invalid JSON response: {e}") from e
        except requests.exceptions.RequestException as e:
            raise HorizonError(f"HTTP request failed: {e}") from e

    def fetch_root(self) -> Dict[str, Any]:
        """Fetch the node root document (versions, network passphrase)."""
        return self._get("")

    def load_account(self, public_key: str) -> Dict[str, Any]:
        """
        Load an account record.

        Raises:
            HorizonError: With code HORIZON_NOT_FOUND when the account does not exist
        """
        return self._get(f"accounts/{public_key}")


__all__ = ["HorizonServer"]
