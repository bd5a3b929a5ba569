"""Thin Solana RPC connection used by the action endpoints."""

import logging

from solana.rpc.async_api import AsyncClient
from solders.hash import Hash

logger = logging.getLogger(__name__)


class SolanaConnection:
    """Wraps the async Solana RPC client with the two calls the actions need."""

    def __init__(self, rpc_url: str, timeout: float = 30.0):
        self.rpc_url = rpc_url
        self._client = AsyncClient(rpc_url, timeout=timeout)

    async def get_minimum_balance_for_rent_exemption(self, size: int) -> int:
        """Lamports an account of ``size`` data bytes needs to be rent exempt."""
        resp = await self._client.get_minimum_balance_for_rent_exemption(size)
        return resp.value

    async def get_latest_blockhash(self) -> Hash:
        """Latest network blockhash."""
        resp = await self._client.get_latest_blockhash()
        return resp.value.blockhash

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "SolanaConnection":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False
