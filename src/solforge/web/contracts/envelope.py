"""Uniform response envelope.

Success: {"success": true, "data": {...}}
Failure: {"success": false, "error": "<message>"}

The error text is for humans; clients should branch on the HTTP status and
``success`` flag only.
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Envelope for a successful operation."""

    success: Literal[True] = True
    data: T


class ErrorResponse(BaseModel):
    """Envelope for a failed operation."""

    success: Literal[False] = False
    error: str = Field(..., description="Human-readable error message")
