"""Pytest configuration and fixtures."""

import os
from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from solders.hash import Hash
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.system_program import TransferParams, transfer

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["RPC_API_KEY"] = ""

from limitblink.api.app import create_app
from limitblink.config import get_settings
from limitblink.routing.base import LimitOrderProvider, OrderFragment, OrderRequest
from limitblink.web.dependencies import (
    get_connection,
    get_keyed_connection,
    get_limit_order_provider,
)

DEFAULT_TO = "GqkJ3UoKTScvXiaJUxrGJ9QD847LAj2DTvMzqjaT2tJm"
TEST_BLOCKHASH = Hash(bytes([7] * 32))
RENT_EXEMPT_MINIMUM = 890_880


class FakeConnection:
    """Records RPC calls instead of hitting the network."""

    def __init__(self, minimum_balance: int = RENT_EXEMPT_MINIMUM, blockhash: Hash = TEST_BLOCKHASH):
        self.minimum_balance = minimum_balance
        self.blockhash = blockhash
        self.calls: list[str] = []

    async def get_minimum_balance_for_rent_exemption(self, size: int) -> int:
        self.calls.append(f"rent:{size}")
        return self.minimum_balance

    async def get_latest_blockhash(self) -> Hash:
        self.calls.append("blockhash")
        return self.blockhash


class FakeLimitOrderProvider(LimitOrderProvider):
    """Returns a single transfer instruction per order."""

    def __init__(self, error: Optional[Exception] = None):
        self.orders: list[OrderRequest] = []
        self.error = error

    @property
    def name(self) -> str:
        return "Fake"

    async def create_order(self, order: OrderRequest) -> OrderFragment:
        self.orders.append(order)
        if self.error:
            raise self.error
        ix = transfer(
            TransferParams(from_pubkey=order.owner, to_pubkey=order.base, lamports=order.in_amount)
        )
        return OrderFragment(instructions=[ix], order_pubkey=Keypair().pubkey())


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def account() -> Pubkey:
    return Keypair().pubkey()


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def provider() -> FakeLimitOrderProvider:
    return FakeLimitOrderProvider()


@pytest.fixture
def test_app(connection, provider):
    """Application with the network collaborators replaced by fakes."""
    app = create_app()
    app.dependency_overrides[get_connection] = lambda: connection
    app.dependency_overrides[get_keyed_connection] = lambda: connection
    app.dependency_overrides[get_limit_order_provider] = lambda: provider
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
