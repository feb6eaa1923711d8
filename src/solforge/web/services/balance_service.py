"""Balance lookup against a remote Solana RPC node.

The only network call in the service. The client is constructed once at
startup from configuration and handed to the app; every lookup is bounded
by a timeout and can be cancelled with the request.
"""

import asyncio
import logging
from typing import Optional

from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import RPCException
from solders.pubkey import Pubkey

from solforge.config import Settings
from solforge.errors import SolforgeError
from solforge.keys import parse_address

logger = logging.getLogger(__name__)


class BalanceLookupError(SolforgeError):
    """Exception raised when the RPC node cannot report a balance."""
    pass


class BalanceService:
    """Reports the lamport balance of one configured address."""

    def __init__(self, client: AsyncClient, address: Pubkey, timeout: float = 10.0):
        """Initialize balance service.

        Args:
            client: Solana RPC client
            address: Address to query
            timeout: Per-lookup timeout in seconds
        """
        self._client = client
        self.address = address
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> Optional["BalanceService"]:
        """Create a service from settings.

        Returns:
            BalanceService, or None if no wallet address is configured

        Raises:
            InvalidAddressError: If the configured address is malformed
        """
        if not settings.has_balance_lookup:
            logger.warning("WALLET_ADDRESS not set - balance lookup disabled")
            return None

        address = parse_address(settings.wallet_address, "wallet_address")
        client = AsyncClient(settings.rpc_url, timeout=settings.rpc_timeout)
        logger.info("Balance lookup configured for %s", address)
        return cls(client, address, timeout=settings.rpc_timeout)

    async def get_balance(self) -> int:
        """Fetch the balance in lamports.

        Raises:
            BalanceLookupError: On timeout or RPC failure
        """
        try:
            response = await asyncio.wait_for(
                self._client.get_balance(self.address), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            raise BalanceLookupError(f"RPC request timed out after {self.timeout}s")
        except (SolanaRpcException, RPCException) as e:
            raise BalanceLookupError(f"RPC request failed: {e}") from e
        except ValueError as e:
            raise BalanceLookupError(f"Malformed RPC response: {e}") from e

        return response.value

    async def close(self):
        """Close the underlying RPC client."""
        await self._client.close()
