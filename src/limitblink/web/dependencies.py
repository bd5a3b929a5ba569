"""FastAPI dependencies for the external collaborators.

Tests swap these out through ``app.dependency_overrides``.
"""

from typing import AsyncIterator

from limitblink.config import get_settings
from limitblink.routing.base import LimitOrderProvider
from limitblink.routing.jupiter_limit import create_jupiter_limit_provider
from limitblink.rpc import SolanaConnection


async def get_connection() -> AsyncIterator[SolanaConnection]:
    """Per-request connection to the public RPC endpoint."""
    async with SolanaConnection(get_settings().sol_rpc_url) as connection:
        yield connection


async def get_keyed_connection() -> AsyncIterator[SolanaConnection]:
    """Per-request connection to the keyed RPC endpoint."""
    async with SolanaConnection(get_settings().keyed_rpc_url) as connection:
        yield connection


def get_limit_order_provider() -> LimitOrderProvider:
    settings = get_settings()
    return create_jupiter_limit_provider(
        referral_account=settings.referral_account,
        referral_name=settings.referral_name,
        base_url=settings.jupiter_limit_api_url,
    )
