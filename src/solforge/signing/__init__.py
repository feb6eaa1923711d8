"""Message signing services.

Signs and verifies arbitrary messages with ed25519 keypairs:
- sign_message: detached signature over the exact message bytes
- verify_message: check a signature against a public key
"""

from solforge.signing.base import (
    SIGNATURE_LENGTH,
    SignedMessage,
    decode_signature,
    encode_signature,
)
from solforge.signing.local import sign_message, verify_message

__all__ = [
    "SIGNATURE_LENGTH",
    "SignedMessage",
    "decode_signature",
    "encode_signature",
    "sign_message",
    "verify_message",
]
