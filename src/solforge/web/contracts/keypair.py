"""Keypair contracts."""

from pydantic import BaseModel, Field


class KeypairData(BaseModel):
    """A freshly generated keypair.

    SECURITY: ``secret`` is returned once and never stored server-side.
    """

    pubkey: str = Field(..., description="Public key (base-58)")
    secret: str = Field(..., description="64-byte secret key (base-58)")
