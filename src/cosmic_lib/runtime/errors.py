"""
Cosmic Lib Error Model

Registry operations are total and never raise. These errors surface only
from strict configuration, opt-in key validation and Horizon access.
Underlying exceptions are chained with ``raise ... from`` and exposed as
``cause``.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Cosmic Lib error codes."""

    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Configuration errors (100-199)
    CONFIGURATION_ERROR = 100
    UNKNOWN_NETWORK = 101
    INVALID_SETTING = 102

    # Key errors (200-299)
    INVALID_PUBLIC_KEY = 200

    # Horizon errors (300-399)
    HORIZON_ERROR = 300
    HORIZON_NOT_FOUND = 301


class CosmicError(Exception):
    """
    Base class for all cosmic_lib errors.

    Subclasses pick their ``code`` and ``default_message`` as class
    attributes; both can be overridden per instance.
    """

    code: ErrorCode = ErrorCode.UNKNOWN
    default_message = "Unknown error"

    def __init__(self, message: Optional[str] = None, code: Optional[ErrorCode] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        if code is not None:
            self.code = code
        self.details = details or {}

    @property
    def cause(self) -> Optional[BaseException]:
        """Exception this error was raised from, if any."""
        return self.__cause__

    def __str__(self) -> str:
        if self.details:
            return f"[{self.code.name}] {self.message} {self.details}"
        return f"[{self.code.name}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {"code": int(self.code), "message": self.message}
        if self.details:
            result["details"] = dict(self.details)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result


class ConfigurationError(CosmicError):
    """Invalid library configuration."""
    code = ErrorCode.CONFIGURATION_ERROR
    default_message = "Invalid configuration"


class UnknownNetworkError(ConfigurationError):
    """No passphrase or horizon is known for a network."""
    code = ErrorCode.UNKNOWN_NETWORK
    default_message = "Unknown network"


class InvalidPublicKeyError(CosmicError):
    """Malformed Stellar public key."""
    code = ErrorCode.INVALID_PUBLIC_KEY
    default_message = "Invalid public key"


class HorizonError(CosmicError):
    """Horizon request failures."""
    code = ErrorCode.HORIZON_ERROR
    default_message = "Horizon request failed"


__all__ = [
    "ErrorCode",
    "CosmicError",
    "ConfigurationError",
    "UnknownNetworkError",
    "InvalidPublicKeyError",
    "HorizonError",
]
