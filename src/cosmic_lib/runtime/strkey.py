"""
Public key helpers backed by the Stellar SDK.
"""

from stellar_sdk import Keypair
from stellar_sdk.exceptions import Ed25519PublicKeyInvalidError

from .errors import InvalidPublicKeyError


def decode_public_key(key: str) -> bytes:
    """
    Decode a 'G...' public key into its raw 32 bytes.

    Args:
        key: StrKey encoded account id

    Returns:
        Raw ed25519 public key

    Raises:
        InvalidPublicKeyError: If the key is malformed or the checksum is wrong
    """
    if not isinstance(key, str):
        raise InvalidPublicKeyError(f"Not a public key: {key!r}")
    try:
        return Keypair.from_public_key(key).raw_public_key()
    except (Ed25519PublicKeyInvalidError, ValueError) as e:
        raise InvalidPublicKeyError(f"Not a public key: {key!r}") from e


def is_valid_public_key(key: str) -> bool:
    """Check whether key is a well-formed account public key."""
    try:
        decode_public_key(key)
    except InvalidPublicKeyError:
        return False
    return True
