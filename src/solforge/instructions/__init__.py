"""Unsigned instruction construction.

Builders return InstructionDescriptor values for the caller to place in a
transaction, sign and broadcast. Nothing here talks to the network.
"""

from solforge.instructions.base import (
    RENT_SYSVAR,
    SYSTEM_PROGRAM,
    TOKEN_PROGRAM,
    AccountEntry,
    InstructionDescriptor,
)
from solforge.instructions.system import transfer_native
from solforge.instructions.token import initialize_mint, mint_to, transfer_token

__all__ = [
    "RENT_SYSVAR",
    "SYSTEM_PROGRAM",
    "TOKEN_PROGRAM",
    "AccountEntry",
    "InstructionDescriptor",
    "initialize_mint",
    "mint_to",
    "transfer_token",
    "transfer_native",
]
