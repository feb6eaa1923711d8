"""Instruction descriptors and shared program addresses."""

import base64
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Final, Iterator

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from solforge.errors import InputError, InstructionBuildError, InvalidFieldError

SYSTEM_PROGRAM: Final[Pubkey] = Pubkey.from_string("11111111111111111111111111111111")
TOKEN_PROGRAM: Final[Pubkey] = Pubkey.from_string(
    "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
)
RENT_SYSVAR: Final[Pubkey] = Pubkey.from_string(
    "SysvarRent111111111111111111111111111111111"
)

U8_MAX: Final[int] = 2**8 - 1
U64_MAX: Final[int] = 2**64 - 1


@dataclass(frozen=True)
class AccountEntry:
    """One account reference of an instruction."""
    pubkey: Pubkey
    is_signer: bool
    is_writable: bool

    def to_dict(self) -> dict:
        return {
            "pubkey": str(self.pubkey),
            "is_signer": self.is_signer,
            "is_writable": self.is_writable,
        }


@dataclass(frozen=True)
class InstructionDescriptor:
    """An unsigned instruction.

    Attributes:
        program_id: Program that executes the instruction
        accounts: Account references in the order the program expects them
        data: Program-specific binary payload (opcode + arguments)
    """
    program_id: Pubkey
    accounts: tuple[AccountEntry, ...]
    data: bytes

    @classmethod
    def from_instruction(cls, instruction: Instruction) -> "InstructionDescriptor":
        """Build a descriptor from a solders Instruction."""
        return cls(
            program_id=instruction.program_id,
            accounts=tuple(
                AccountEntry(
                    pubkey=meta.pubkey,
                    is_signer=meta.is_signer,
                    is_writable=meta.is_writable,
                )
                for meta in instruction.accounts
            ),
            data=bytes(instruction.data),
        )

    def to_dict(self) -> dict:
        """Serialize to the wire shape used in API responses."""
        return {
            "program_id": str(self.program_id),
            "accounts": [account.to_dict() for account in self.accounts],
            "instruction_data": base64.b64encode(self.data).decode(),
        }


def check_u64(value: int, field: str) -> int:
    """Ensure ``value`` is an integer in ``0..2**64-1``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError(field, "must be an integer")
    if value < 0 or value > U64_MAX:
        raise InvalidFieldError(field, f"must be between 0 and {U64_MAX}")
    return value


def check_u8(value: int, field: str) -> int:
    """Ensure ``value`` is an integer in ``0..255``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError(field, "must be an integer")
    if value < 0 or value > U8_MAX:
        raise InvalidFieldError(field, f"must be between 0 and {U8_MAX}")
    return value


@contextmanager
def assembling(name: str) -> Iterator[None]:
    """Convert unexpected library failures into InstructionBuildError."""
    try:
        yield
    except InputError:
        raise
    except Exception as e:
        raise InstructionBuildError(f"Failed to build {name} instruction: {e}") from e
