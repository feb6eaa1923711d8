"""Field types and payloads shared by the instruction routes."""

from typing import Annotated

from pydantic import BaseModel, Field

from solforge.instructions.base import U8_MAX, U64_MAX

# Strict so that "100", 1.5 and true are rejected rather than coerced
Amount = Annotated[int, Field(strict=True, ge=0, le=U64_MAX)]
Decimals = Annotated[int, Field(strict=True, ge=0, le=U8_MAX)]


class AccountMetaData(BaseModel):
    """One account reference of a built instruction."""

    pubkey: str = Field(..., description="Account address (base-58)")
    is_signer: bool = Field(..., description="Whether the account must sign")
    is_writable: bool = Field(..., description="Whether the account is written")


class InstructionData(BaseModel):
    """An unsigned instruction ready to be placed in a transaction."""

    program_id: str = Field(..., description="Program address (base-58)")
    accounts: list[AccountMetaData] = Field(
        ..., description="Accounts in the order the program expects them"
    )
    instruction_data: str = Field(..., description="Instruction payload (base-64)")
