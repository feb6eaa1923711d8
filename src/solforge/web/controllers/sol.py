"""Native SOL transfer endpoint."""

from fastapi import APIRouter

from solforge.operations import run_operation
from solforge.web.contracts import InstructionData, SendSolRequest, SuccessResponse

router = APIRouter(tags=["sol"])


@router.post("/send/sol", response_model=SuccessResponse[InstructionData])
async def send_sol(request: SendSolRequest) -> SuccessResponse[InstructionData]:
    """Build a System program transfer instruction."""
    data = run_operation(
        "sol.send",
        from_address=request.from_address,
        to_address=request.to_address,
        lamports=request.lamports,
    )
    return SuccessResponse[InstructionData](data=InstructionData(**data))
