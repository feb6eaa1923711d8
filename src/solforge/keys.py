"""Address and key codec.

Public keys travel as base-58 text of exactly 32 bytes. Secret keys travel
as base-58 text of the 64-byte keypair encoding: the 32-byte ed25519 seed
followed by the 32-byte public key derived from it.
"""

import logging

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from solforge.errors import InvalidAddressError, InvalidSecretError

logger = logging.getLogger(__name__)

PUBKEY_LENGTH = 32
SEED_LENGTH = 32
KEYPAIR_LENGTH = 64

_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode())


def _b58decode(text: str) -> bytes:
    """Decode base-58 text, raising ValueError on any malformed input."""
    if not isinstance(text, str) or not text:
        raise ValueError("empty value")
    # b58decode strips trailing whitespace, so check the alphabet up front
    if not set(text) <= _ALPHABET:
        raise ValueError("invalid base-58 character")
    return base58.b58decode(text)


def parse_address(text: str, field: str = "address") -> Pubkey:
    """Parse a base-58 public address.

    Args:
        text: Base-58 encoded address
        field: Request field name, used in the error message

    Returns:
        Parsed public key

    Raises:
        InvalidAddressError: On bad alphabet or a decoded length other than 32
    """
    try:
        raw = _b58decode(text)
    except ValueError:
        raise InvalidAddressError(field)

    if len(raw) != PUBKEY_LENGTH:
        raise InvalidAddressError(
            field, f"decodes to {len(raw)} bytes, expected {PUBKEY_LENGTH}"
        )

    return Pubkey.from_bytes(raw)


def parse_secret(text: str, field: str = "secret") -> Keypair:
    """Parse a base-58 secret key into a keypair.

    The embedded public key must match the one derived from the seed,
    otherwise signatures made with the keypair would not verify against
    the address it advertises.

    Args:
        text: Base-58 encoded 64-byte keypair
        field: Request field name, used in the error message

    Returns:
        Keypair

    Raises:
        InvalidSecretError: On bad encoding, wrong length or inconsistent halves
    """
    try:
        raw = _b58decode(text)
    except ValueError:
        raise InvalidSecretError("not valid base-58", field=field)

    if len(raw) != KEYPAIR_LENGTH:
        raise InvalidSecretError(
            f"decodes to {len(raw)} bytes, expected {KEYPAIR_LENGTH}", field=field
        )

    keypair = Keypair.from_seed(raw[:SEED_LENGTH])
    if bytes(keypair.pubkey()) != raw[SEED_LENGTH:]:
        raise InvalidSecretError(
            "public key does not match private key", field=field
        )

    return keypair


def generate_keypair() -> Keypair:
    """Generate a fresh keypair from the OS random source."""
    return Keypair()


def encode_address(pubkey: Pubkey) -> str:
    """Encode a public key as base-58 text."""
    return str(pubkey)


def encode_secret(keypair: Keypair) -> str:
    """Encode a keypair as base-58 text of its 64-byte form."""
    return base58.b58encode(bytes(keypair)).decode()
