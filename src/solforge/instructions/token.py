"""SPL Token program instructions.

Account layouts follow the token program's calling convention:

    InitializeMint  [mint (w), rent sysvar]
    MintTo          [mint (w), destination (w), authority (s)]
    Transfer        [source (w), destination (w), owner (s)]

Only single-signer authorities are supported; no multisig signer lists.
"""

import logging
import struct
from typing import Union

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from spl.token.models import MintToParams, TransferParams
from spl.token.instructions import mint_to as spl_mint_to
from spl.token.instructions import transfer as spl_transfer

from solforge.instructions.base import (
    RENT_SYSVAR,
    TOKEN_PROGRAM,
    InstructionDescriptor,
    assembling,
    check_u8,
    check_u64,
)
from solforge.keys import parse_address

logger = logging.getLogger(__name__)

# Token program instruction tags
INITIALIZE_MINT = 0
TRANSFER = 3
MINT_TO = 7

# COption<Pubkey> tag for "no freeze authority"
_NO_FREEZE_AUTHORITY = b"\x00"

Address = Union[str, Pubkey]


def _address(value: Address, field: str) -> Pubkey:
    if isinstance(value, Pubkey):
        return value
    return parse_address(value, field)


def initialize_mint(
    mint: Address,
    mint_authority: Address,
    decimals: int,
) -> InstructionDescriptor:
    """Build an InitializeMint instruction with no freeze authority.

    ``decimals`` is passed through as-is; the token program decides what
    it means.

    Args:
        mint: Mint account to initialize
        mint_authority: Account allowed to mint new tokens
        decimals: Number of base-10 digits to the right of the decimal point

    Returns:
        InstructionDescriptor

    Raises:
        InvalidAddressError: If mint or mint_authority is malformed
        InvalidFieldError: If decimals is not in 0..255
    """
    mint_key = _address(mint, "mint")
    authority_key = _address(mint_authority, "mint_authority")
    check_u8(decimals, "decimals")

    with assembling("initialize_mint"):
        # Packed as the token program packs it: tag, decimals, authority,
        # then a one-byte COption tag with no trailing pubkey.
        data = (
            struct.pack("<BB", INITIALIZE_MINT, decimals)
            + bytes(authority_key)
            + _NO_FREEZE_AUTHORITY
        )
        accounts = [
            AccountMeta(pubkey=mint_key, is_signer=False, is_writable=True),
            AccountMeta(pubkey=RENT_SYSVAR, is_signer=False, is_writable=False),
        ]
        instruction = Instruction(program_id=TOKEN_PROGRAM, data=data, accounts=accounts)

    logger.debug("Built initialize_mint for mint %s (decimals=%d)", mint_key, decimals)
    return InstructionDescriptor.from_instruction(instruction)


def mint_to(
    mint: Address,
    destination: Address,
    authority: Address,
    amount: int,
) -> InstructionDescriptor:
    """Build a MintTo instruction.

    An ``amount`` of zero is valid and produces a no-op instruction.

    Args:
        mint: Mint whose supply increases
        destination: Token account receiving the new tokens
        authority: Mint authority (signer)
        amount: Amount in the mint's base units

    Returns:
        InstructionDescriptor
    """
    mint_key = _address(mint, "mint")
    destination_key = _address(destination, "destination")
    authority_key = _address(authority, "authority")
    check_u64(amount, "amount")

    with assembling("mint_to"):
        instruction = spl_mint_to(
            MintToParams(
                program_id=TOKEN_PROGRAM,
                mint=mint_key,
                dest=destination_key,
                mint_authority=authority_key,
                amount=amount,
                signers=[],
            )
        )

    logger.debug("Built mint_to for mint %s amount=%d", mint_key, amount)
    return InstructionDescriptor.from_instruction(instruction)


def transfer_token(
    source: Address,
    destination: Address,
    owner: Address,
    amount: int,
) -> InstructionDescriptor:
    """Build a token account to token account Transfer instruction.

    ``source`` must be the sender's token account. No associated token
    account is derived here; supplying the right account is up to the
    caller.

    Args:
        source: Token account debited
        destination: Token account credited
        owner: Owner of the source account (signer)
        amount: Amount in the mint's base units

    Returns:
        InstructionDescriptor
    """
    source_key = _address(source, "source")
    destination_key = _address(destination, "destination")
    owner_key = _address(owner, "owner")
    check_u64(amount, "amount")

    with assembling("transfer"):
        instruction = spl_transfer(
            TransferParams(
                program_id=TOKEN_PROGRAM,
                source=source_key,
                dest=destination_key,
                owner=owner_key,
                amount=amount,
                signers=[],
            )
        )

    logger.debug("Built token transfer %s -> %s amount=%d", source_key, destination_key, amount)
    return InstructionDescriptor.from_instruction(instruction)
