"""Tests for order assembly and unsigned transaction building."""

import base64
from unittest.mock import patch

import pytest
from solders.keypair import Keypair
from solders.transaction import Transaction

from limitblink.errors import InsufficientAmountError
from limitblink.routing.base import OrderRequest
from limitblink.routing.jupiter_limit import get_token_mint
from limitblink.web.services.order_builder import (
    OrderBuilder,
    create_post_response,
    ensure_rent_exempt,
    new_base_key,
    order_expiry,
)

from conftest import RENT_EXEMPT_MINIMUM, TEST_BLOCKHASH, FakeConnection, FakeLimitOrderProvider


def make_order(owner=None) -> OrderRequest:
    return OrderRequest(
        owner=owner or Keypair().pubkey(),
        in_amount=100_000,
        out_amount=100_000,
        input_mint=get_token_mint("SOL"),
        output_mint=get_token_mint("USDC"),
        base=new_base_key(),
    )


class TestRentCheck:
    """Tests for the rent-exemption guard."""

    @pytest.mark.asyncio
    async def test_amount_above_minimum_passes(self):
        connection = FakeConnection()

        await ensure_rent_exempt(connection, Keypair().pubkey(), 10**9)

        assert connection.calls == ["rent:0"]

    @pytest.mark.asyncio
    async def test_amount_below_minimum_fails(self):
        connection = FakeConnection()
        to = Keypair().pubkey()

        with pytest.raises(InsufficientAmountError) as exc_info:
            await ensure_rent_exempt(connection, to, 100_000)

        assert str(to) in exc_info.value.message

    @pytest.mark.asyncio
    async def test_exact_minimum_passes(self):
        connection = FakeConnection()
        await ensure_rent_exempt(connection, Keypair().pubkey(), RENT_EXEMPT_MINIMUM)


class TestOrderBuilder:
    """Tests for OrderBuilder."""

    @pytest.mark.asyncio
    async def test_build_sets_fee_payer_and_blockhash(self):
        connection = FakeConnection()
        provider = FakeLimitOrderProvider()
        payer = Keypair().pubkey()
        order = make_order()

        tx = await OrderBuilder(connection, provider).build(order, fee_payer=payer)

        assert provider.orders == [order]
        assert tx.message.account_keys[0] == payer
        assert tx.message.recent_blockhash == TEST_BLOCKHASH
        assert len(tx.message.instructions) == 1
        assert connection.calls == ["blockhash"]

    @pytest.mark.asyncio
    async def test_provider_failure_skips_blockhash(self):
        connection = FakeConnection()
        provider = FakeLimitOrderProvider(error=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await OrderBuilder(connection, provider).build(make_order(), fee_payer=Keypair().pubkey())

        assert connection.calls == []


class TestHelpers:
    """Tests for base key, expiry and response envelope."""

    def test_base_keys_are_unique(self):
        assert new_base_key() != new_base_key()

    def test_no_expiry(self):
        assert order_expiry(None) is None

    def test_expiry_offset(self):
        with patch("limitblink.web.services.order_builder.time.time", return_value=1_700_000_000):
            assert order_expiry(3600) == 1_700_003_600

    def test_order_to_dict(self):
        order = make_order()
        data = order.to_dict()

        assert data["inputMint"] == "So11111111111111111111111111111111111111112"
        assert data["outputMint"] == "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
        assert data["inAmount"] == 100_000
        assert data["expiredAt"] is None
        assert data["base"] == str(order.base)

    @pytest.mark.asyncio
    async def test_post_response_is_base64_transaction(self):
        payer = Keypair().pubkey()
        tx = await OrderBuilder(FakeConnection(), FakeLimitOrderProvider()).build(
            make_order(), fee_payer=payer
        )

        response = create_post_response(tx, "DCA order")
        decoded = Transaction.from_bytes(base64.b64decode(response.transaction))

        assert response.type == "transaction"
        assert response.message == "DCA order"
        assert decoded.message.account_keys[0] == payer
