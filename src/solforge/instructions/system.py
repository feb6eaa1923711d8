"""System program instructions."""

import logging
from typing import Union

from solders.pubkey import Pubkey
from solders.system_program import TransferParams, transfer

from solforge.instructions.base import InstructionDescriptor, assembling, check_u64
from solforge.keys import parse_address

logger = logging.getLogger(__name__)


def transfer_native(
    from_address: Union[str, Pubkey],
    to_address: Union[str, Pubkey],
    lamports: int,
) -> InstructionDescriptor:
    """Build a native SOL transfer.

    Accounts: [from (signer, writable), to (writable)]. No minimum or
    maximum is enforced beyond the u64 range.

    Args:
        from_address: Funding account (signer)
        to_address: Recipient account
        lamports: Amount in lamports

    Returns:
        InstructionDescriptor
    """
    from_key = from_address if isinstance(from_address, Pubkey) else parse_address(from_address, "from")
    to_key = to_address if isinstance(to_address, Pubkey) else parse_address(to_address, "to")
    check_u64(lamports, "lamports")

    with assembling("transfer_native"):
        instruction = transfer(
            TransferParams(from_pubkey=from_key, to_pubkey=to_key, lamports=lamports)
        )

    logger.debug("Built SOL transfer %s -> %s lamports=%d", from_key, to_key, lamports)
    return InstructionDescriptor.from_instruction(instruction)
