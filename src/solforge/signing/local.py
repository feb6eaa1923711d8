"""Local ed25519 signing.

The keypair only lives for the duration of a single request. Nothing here
hashes or frames the message: the signature covers the exact bytes given.
"""

import logging

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from solforge.signing.base import SignedMessage

logger = logging.getLogger(__name__)


def sign_message(keypair: Keypair, message: bytes) -> SignedMessage:
    """Sign a message with a keypair.

    Args:
        keypair: Signing keypair
        message: Raw message bytes

    Returns:
        SignedMessage with the signature and signer public key
    """
    signature = keypair.sign_message(message)
    logger.debug("Signed %d byte message for %s", len(message), keypair.pubkey())
    return SignedMessage(signature=signature, public_key=keypair.pubkey(), message=message)


def verify_message(pubkey: Pubkey, message: bytes, signature: Signature) -> bool:
    """Check that ``signature`` was produced over ``message`` by ``pubkey``.

    A well-formed signature that does not match is a normal ``False``
    result, not an error.
    """
    return signature.verify(pubkey, message)
