"""Request and response contracts for the web layer."""

from solforge.web.contracts.common import Amount, Decimals, AccountMetaData, InstructionData
from solforge.web.contracts.envelope import ErrorResponse, SuccessResponse
from solforge.web.contracts.keypair import KeypairData
from solforge.web.contracts.message import (
    SignMessageData,
    SignMessageRequest,
    VerifyMessageData,
    VerifyMessageRequest,
)
from solforge.web.contracts.sol import SendSolRequest
from solforge.web.contracts.token import (
    CreateTokenRequest,
    MintTokenRequest,
    SendTokenRequest,
)

__all__ = [
    # Shared
    "Amount",
    "Decimals",
    "AccountMetaData",
    "InstructionData",
    # Envelope
    "ErrorResponse",
    "SuccessResponse",
    # Keypair
    "KeypairData",
    # Message
    "SignMessageData",
    "SignMessageRequest",
    "VerifyMessageData",
    "VerifyMessageRequest",
    # Transfers
    "SendSolRequest",
    # Token
    "CreateTokenRequest",
    "MintTokenRequest",
    "SendTokenRequest",
]
