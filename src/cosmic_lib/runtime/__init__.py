"""
Runtime support: error model and public key helpers.
"""

from .errors import *
from .strkey import decode_public_key, is_valid_public_key

__all__ = [
    "ErrorCode",
    "CosmicError",
    "ConfigurationError",
    "UnknownNetworkError",
    "InvalidPublicKeyError",
    "HorizonError",
    "decode_public_key",
    "is_valid_public_key",
]
