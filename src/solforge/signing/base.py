"""Signature encoding.

Signatures travel as standard base-64 text of the raw 64-byte ed25519
signature.
"""

import base64
import binascii
from dataclasses import dataclass

from solders.pubkey import Pubkey
from solders.signature import Signature

from solforge.errors import InvalidSignatureEncodingError

SIGNATURE_LENGTH = 64


@dataclass(frozen=True)
class SignedMessage:
    """Result of signing a message.

    Attributes:
        signature: Detached ed25519 signature
        public_key: Public key of the signer
        message: The exact bytes that were signed
    """
    signature: Signature
    public_key: Pubkey
    message: bytes


def encode_signature(signature: Signature) -> str:
    """Encode a signature as base-64 text."""
    return base64.b64encode(bytes(signature)).decode()


def decode_signature(text: str, field: str = "signature") -> Signature:
    """Decode base-64 text into a signature.

    Args:
        text: Base-64 encoded signature
        field: Request field name, used in the error message

    Returns:
        Signature

    Raises:
        InvalidSignatureEncodingError: If the text is not base-64 or does not
            decode to exactly 64 bytes
    """
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, TypeError, ValueError):
        raise InvalidSignatureEncodingError("not valid base64", field=field)

    if len(raw) != SIGNATURE_LENGTH:
        raise InvalidSignatureEncodingError(
            f"decodes to {len(raw)} bytes, expected {SIGNATURE_LENGTH}",
            field=field,
        )

    return Signature.from_bytes(raw)
