"""HTTP controllers for the web API.

Instruction and signing routes are thin: they unpack the request model,
call the matching entry of solforge.operations.OPERATIONS and wrap the
result in the success envelope. Failures are turned into the error
envelope by the handlers registered in solforge.api.errors.
"""

from solforge.web.controllers.balance import router as balance_router
from solforge.web.controllers.keypair import router as keypair_router
from solforge.web.controllers.message import router as message_router
from solforge.web.controllers.sol import router as sol_router
from solforge.web.controllers.token import router as token_router

__all__ = [
    "balance_router",
    "keypair_router",
    "message_router",
    "sol_router",
    "token_router",
]
