"""Message signing endpoints.

The secret key sent to /message/sign is used for that request only and
is never logged or stored.
"""

from fastapi import APIRouter

from solforge.operations import run_operation
from solforge.web.contracts import (
    SignMessageData,
    SignMessageRequest,
    SuccessResponse,
    VerifyMessageData,
    VerifyMessageRequest,
)

router = APIRouter(prefix="/message", tags=["message"])


@router.post("/sign", response_model=SuccessResponse[SignMessageData])
async def sign_message(request: SignMessageRequest) -> SuccessResponse[SignMessageData]:
    """Sign the UTF-8 bytes of a message."""
    data = run_operation("message.sign", message=request.message, secret=request.secret)
    return SuccessResponse[SignMessageData](data=SignMessageData(**data))


@router.post("/verify", response_model=SuccessResponse[VerifyMessageData])
async def verify_message(request: VerifyMessageRequest) -> SuccessResponse[VerifyMessageData]:
    """Verify a signature.

    A wrong signature is reported as ``valid: false``; only malformed
    input is an error.
    """
    data = run_operation(
        "message.verify",
        message=request.message,
        signature=request.signature,
        pubkey=request.pubkey,
    )
    return SuccessResponse[VerifyMessageData](data=VerifyMessageData(**data))
