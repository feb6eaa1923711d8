"""Message signing contracts."""

from pydantic import BaseModel, Field


class SignMessageRequest(BaseModel):
    """Request to sign a message with a secret key."""

    message: str = Field(..., description="Message to sign (UTF-8)")
    secret: str = Field(..., description="64-byte secret key (base-58)")


class SignMessageData(BaseModel):
    """Signature over a message."""

    signature: str = Field(..., description="Ed25519 signature (base-64)")
    public_key: str = Field(..., description="Signer public key (base-58)")
    message: str = Field(..., description="The signed message")


class VerifyMessageRequest(BaseModel):
    """Request to verify a message signature."""

    message: str = Field(..., description="Message that was signed (UTF-8)")
    signature: str = Field(..., description="Ed25519 signature (base-64)")
    pubkey: str = Field(..., description="Claimed signer public key (base-58)")


class VerifyMessageData(BaseModel):
    """Verification result."""

    valid: bool = Field(..., description="Whether the signature is valid")
    message: str
    pubkey: str
