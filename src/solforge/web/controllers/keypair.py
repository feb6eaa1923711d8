"""Keypair generation endpoint."""

from fastapi import APIRouter

from solforge.operations import run_operation
from solforge.web.contracts import KeypairData, SuccessResponse

router = APIRouter(tags=["keypair"])


@router.post("/keypair", response_model=SuccessResponse[KeypairData])
async def generate_keypair() -> SuccessResponse[KeypairData]:
    """Generate a new ed25519 keypair.

    The request body is ignored. The secret is returned once and never
    retained.
    """
    data = run_operation("keypair.generate")
    return SuccessResponse[KeypairData](data=KeypairData(**data))
