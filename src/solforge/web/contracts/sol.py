"""Native SOL transfer contracts."""

from pydantic import BaseModel, ConfigDict, Field

from solforge.web.contracts.common import Amount


class SendSolRequest(BaseModel):
    """Request to build a native SOL transfer."""

    model_config = ConfigDict(populate_by_name=True)

    from_address: str = Field(..., alias="from", description="Sender address (base-58)")
    to_address: str = Field(..., alias="to", description="Recipient address (base-58)")
    lamports: Amount = Field(..., description="Amount in lamports")
