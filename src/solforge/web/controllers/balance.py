"""Balance lookup endpoint.

Plain-text output:
    Balance: <n> lamports
    Error: <message>
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from solforge.web.services.balance_service import BalanceLookupError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["balance"])


@router.get("/", response_class=PlainTextResponse)
async def get_balance(request: Request) -> PlainTextResponse:
    """Report the balance of the configured wallet address."""
    service = getattr(request.app.state, "balance_service", None)
    if service is None:
        return PlainTextResponse("Error: balance lookup not configured", status_code=503)

    try:
        lamports = await service.get_balance()
    except BalanceLookupError as e:
        logger.warning("Balance lookup for %s failed: %s", service.address, e)
        return PlainTextResponse(f"Error: {e}", status_code=502)

    return PlainTextResponse(f"Balance: {lamports} lamports")
