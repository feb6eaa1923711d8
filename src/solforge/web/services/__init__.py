"""Web services that need I/O.

These services CAN query chain state. They MUST NOT sign or broadcast.
"""

from solforge.web.services.balance_service import BalanceLookupError, BalanceService

__all__ = [
    "BalanceLookupError",
    "BalanceService",
]
