"""Operation table.

Each HTTP route maps onto exactly one entry of ``OPERATIONS``: a pure
function that takes request-level strings and integers and returns the
JSON-ready ``data`` payload of the response envelope. Routers go through
``run_operation`` and never touch the codec or builders directly.
"""

import logging
from typing import Callable

from solforge.errors import InvalidFieldError
from solforge.instructions import initialize_mint, mint_to, transfer_native, transfer_token
from solforge.keys import encode_address, encode_secret, generate_keypair, parse_address, parse_secret
from solforge.signing import decode_signature, encode_signature, sign_message, verify_message

logger = logging.getLogger(__name__)


def _message_bytes(message: str) -> bytes:
    """Encode a message as UTF-8, rejecting lone surrogates."""
    try:
        return message.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidFieldError("message", "must be valid UTF-8")


def generate_keypair_op() -> dict:
    """Generate a new keypair."""
    keypair = generate_keypair()
    logger.info("Generated keypair %s", keypair.pubkey())
    return {
        "pubkey": encode_address(keypair.pubkey()),
        "secret": encode_secret(keypair),
    }


def create_token_op(mint: str, mint_authority: str, decimals: int) -> dict:
    return initialize_mint(mint, mint_authority, decimals).to_dict()


def mint_token_op(mint: str, destination: str, authority: str, amount: int) -> dict:
    return mint_to(mint, destination, authority, amount).to_dict()


def send_token_op(destination: str, mint: str, owner: str, amount: int) -> dict:
    """Build a token transfer from the owner's address.

    The owner wallet address is used directly as the source token account.
    The mint is validated but not used to derive an associated token
    account, so callers whose tokens live in an ATA must build the transfer
    against that account themselves.
    """
    destination_key = parse_address(destination, "destination")
    parse_address(mint, "mint")
    owner_key = parse_address(owner, "owner")

    return transfer_token(
        source=owner_key,
        destination=destination_key,
        owner=owner_key,
        amount=amount,
    ).to_dict()


def sign_message_op(message: str, secret: str) -> dict:
    """Sign the UTF-8 bytes of ``message``."""
    keypair = parse_secret(secret)
    signed = sign_message(keypair, _message_bytes(message))
    return {
        "signature": encode_signature(signed.signature),
        "public_key": encode_address(signed.public_key),
        "message": message,
    }


def verify_message_op(message: str, signature: str, pubkey: str) -> dict:
    """Verify a base-64 signature over the UTF-8 bytes of ``message``."""
    key = parse_address(pubkey, "pubkey")
    sig = decode_signature(signature)
    valid = verify_message(key, _message_bytes(message), sig)
    return {
        "valid": valid,
        "message": message,
        "pubkey": pubkey,
    }


def send_sol_op(from_address: str, to_address: str, lamports: int) -> dict:
    return transfer_native(from_address, to_address, lamports).to_dict()


OPERATIONS: dict[str, Callable[..., dict]] = {
    "keypair.generate": generate_keypair_op,
    "token.create": create_token_op,
    "token.mint": mint_token_op,
    "token.send": send_token_op,
    "message.sign": sign_message_op,
    "message.verify": verify_message_op,
    "sol.send": send_sol_op,
}


def run_operation(name: str, **kwargs) -> dict:
    """Run a named operation.

    Args:
        name: Key of ``OPERATIONS``
        **kwargs: Operation arguments

    Returns:
        Operation payload

    Raises:
        KeyError: If the operation is unknown
        InputError: If any argument fails validation
    """
    operation = OPERATIONS[name]
    logger.debug("Running operation %s", name)
    return operation(**kwargs)
