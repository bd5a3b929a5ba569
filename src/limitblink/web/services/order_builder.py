"""Order request assembly and unsigned transaction building.

This service builds unsigned transactions for client-side signing.
NO signing or broadcasting happens here - the wallet signs and sends.
"""

import base64
import logging
import time
from typing import Optional

from solders.keypair import Keypair
from solders.message import Message
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from limitblink.errors import InsufficientAmountError
from limitblink.routing.base import LimitOrderProvider, OrderRequest
from limitblink.rpc import SolanaConnection
from limitblink.web.contracts.actions import ActionPostResponse

logger = logging.getLogger(__name__)

# Accounts holding only native SOL carry no data
NATIVE_ACCOUNT_SIZE = 0


def new_base_key() -> Pubkey:
    """Fresh single-use base key; only seeds the order id."""
    return Keypair().pubkey()


def order_expiry(expiry_seconds: Optional[int]) -> Optional[int]:
    """Unix timestamp an order expires at, or None for no expiry."""
    if expiry_seconds is None:
        return None
    return int(time.time()) + expiry_seconds


async def ensure_rent_exempt(
    connection: SolanaConnection,
    to: Pubkey,
    lamports: int,
) -> None:
    """Reject amounts that would leave ``to`` below the rent-exemption minimum.

    Raises:
        InsufficientAmountError: if ``lamports`` is below the minimum
    """
    minimum_balance = await connection.get_minimum_balance_for_rent_exemption(NATIVE_ACCOUNT_SIZE)
    if lamports < minimum_balance:
        logger.info(f"Amount {lamports} lamports below rent minimum {minimum_balance} for {to}")
        raise InsufficientAmountError(str(to))


class OrderBuilder:
    """Places an order through the provider and wraps it in a transaction.

    The transaction is returned unsigned: the caller's wallet is the fee payer
    and signs it client-side.
    """

    def __init__(self, connection: SolanaConnection, provider: LimitOrderProvider):
        self.connection = connection
        self.provider = provider

    async def build(self, order: OrderRequest, fee_payer: Pubkey) -> Transaction:
        """Build the unsigned order transaction.

        Args:
            order: Normalized order request
            fee_payer: Account paying fees (the caller's wallet)

        Returns:
            Unsigned transaction with the latest blockhash
        """
        fragment = await self.provider.create_order(order)

        blockhash = await self.connection.get_latest_blockhash()
        message = Message.new_with_blockhash(fragment.instructions, fee_payer, blockhash)

        logger.info(
            f"Built {self.provider.name} order for {order.owner}: "
            f"{order.in_amount} {order.input_mint} -> {order.out_amount} {order.output_mint}"
        )
        return Transaction.new_unsigned(message)


def create_post_response(transaction: Transaction, message: str) -> ActionPostResponse:
    """Wrap an unsigned transaction into the POST response envelope."""
    encoded = base64.b64encode(bytes(transaction)).decode("ascii")
    return ActionPostResponse(transaction=encoded, message=message)
