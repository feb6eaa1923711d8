"""SPL token contracts."""

from pydantic import BaseModel, Field

from solforge.web.contracts.common import Amount, Decimals


class CreateTokenRequest(BaseModel):
    """Request to build an InitializeMint instruction."""

    mint: str = Field(..., description="Mint account address (base-58)")
    mint_authority: str = Field(..., description="Mint authority (base-58)")
    decimals: Decimals = Field(..., description="Token decimals (0-255)")


class MintTokenRequest(BaseModel):
    """Request to build a MintTo instruction."""

    mint: str = Field(..., description="Mint address (base-58)")
    destination: str = Field(..., description="Destination token account (base-58)")
    authority: str = Field(..., description="Mint authority (base-58)")
    amount: Amount = Field(..., description="Amount in base units")


class SendTokenRequest(BaseModel):
    """Request to build a token Transfer instruction.

    The owner address doubles as the source token account.
    """

    destination: str = Field(..., description="Destination token account (base-58)")
    mint: str = Field(..., description="Mint address (base-58)")
    owner: str = Field(..., description="Owner wallet address (base-58)")
    amount: Amount = Field(..., description="Amount in base units")
