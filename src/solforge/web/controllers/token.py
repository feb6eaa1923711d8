"""SPL token instruction endpoints.

These endpoints return unsigned instructions. NO signing or broadcasting
happens server-side.
"""

from fastapi import APIRouter

from solforge.operations import run_operation
from solforge.web.contracts import (
    CreateTokenRequest,
    InstructionData,
    MintTokenRequest,
    SendTokenRequest,
    SuccessResponse,
)

router = APIRouter(tags=["token"])


@router.post("/token/create", response_model=SuccessResponse[InstructionData])
async def create_token(request: CreateTokenRequest) -> SuccessResponse[InstructionData]:
    """Build an InitializeMint instruction (no freeze authority)."""
    data = run_operation(
        "token.create",
        mint=request.mint,
        mint_authority=request.mint_authority,
        decimals=request.decimals,
    )
    return SuccessResponse[InstructionData](data=InstructionData(**data))


@router.post("/token/mint", response_model=SuccessResponse[InstructionData])
async def mint_token(request: MintTokenRequest) -> SuccessResponse[InstructionData]:
    """Build a MintTo instruction."""
    data = run_operation(
        "token.mint",
        mint=request.mint,
        destination=request.destination,
        authority=request.authority,
        amount=request.amount,
    )
    return SuccessResponse[InstructionData](data=InstructionData(**data))


@router.post("/send/token", response_model=SuccessResponse[InstructionData])
async def send_token(request: SendTokenRequest) -> SuccessResponse[InstructionData]:
    """Build a token Transfer instruction.

    The owner address is used as the source token account. If the tokens
    are held in an associated token account, build the transfer against
    that account instead.
    """
    data = run_operation(
        "token.send",
        destination=request.destination,
        mint=request.mint,
        owner=request.owner,
        amount=request.amount,
    )
    return SuccessResponse[InstructionData](data=InstructionData(**data))
