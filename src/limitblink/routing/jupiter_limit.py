"""Jupiter limit order integration for Solana.

Uses the Jupiter Limit Order API to build order-creation transactions.
API docs: https://station.jup.ag/docs/old/limit-order/limit-order-api
"""

import base64
import logging
from typing import Optional

import httpx
from solders.instruction import AccountMeta, Instruction
from solders.message import Message
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from limitblink.errors import OrderProviderError
from limitblink.routing.base import LimitOrderProvider, OrderFragment, OrderRequest

logger = logging.getLogger(__name__)

JUPITER_LIMIT_API_V1 = "https://jup.ag/api/limit/v1"

# Token mint addresses on Solana mainnet
SOLANA_TOKENS = {
    "SOL": "So11111111111111111111111111111111111111112",  # Wrapped SOL
    "USDC": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
}

# Token decimals
TOKEN_DECIMALS = {
    "SOL": 9,
    "USDC": 6,
}


def get_token_mint(symbol: str) -> Pubkey:
    """Get token mint address by symbol."""
    return Pubkey.from_string(SOLANA_TOKENS[symbol.upper()])


def is_signer_index(message: Message, index: int) -> bool:
    """Signers are the first ``num_required_signatures`` account keys."""
    return index < message.header.num_required_signatures


def is_writable_index(message: Message, index: int) -> bool:
    """Writability from the legacy message header.

    Keys are ordered: writable signers, read-only signers, writable
    non-signers, read-only non-signers.
    """
    header = message.header
    num_signers = header.num_required_signatures
    if index < num_signers:
        return index < num_signers - header.num_readonly_signed_accounts
    return index < len(message.account_keys) - header.num_readonly_unsigned_accounts


def decompile_instructions(tx: Transaction) -> list[Instruction]:
    """Expand a transaction's compiled instructions back into instructions.

    Signer and writable flags come from the message header, so the
    instructions can be recompiled under a different fee payer.
    """
    message = tx.message
    keys = message.account_keys
    instructions = []
    for compiled in message.instructions:
        accounts = [
            AccountMeta(
                pubkey=keys[index],
                is_signer=is_signer_index(message, index),
                is_writable=is_writable_index(message, index),
            )
            for index in bytes(compiled.accounts)
        ]
        instructions.append(
            Instruction(
                program_id=keys[compiled.program_id_index],
                data=bytes(compiled.data),
                accounts=accounts,
            )
        )
    return instructions


class JupiterLimitOrderProvider(LimitOrderProvider):
    """Jupiter limit order provider.

    The API answers with a serialized legacy transaction; only its
    instructions are kept; fee payer and blockhash are set by the caller.
    """

    def __init__(
        self,
        referral_account: Optional[str] = None,
        referral_name: Optional[str] = None,
        base_url: str = JUPITER_LIMIT_API_V1,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Jupiter limit order provider.

        Args:
            referral_account: Optional referral account credited on fills
            referral_name: Optional referral name
            base_url: Limit order API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.referral_account = referral_account
        self.referral_name = referral_name
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def name(self) -> str:
        return "Jupiter Limit Order"

    def _build_payload(self, order: OrderRequest) -> dict:
        payload = order.to_dict()
        if self.referral_account:
            payload["referralAccount"] = self.referral_account
        if self.referral_name:
            payload["referralName"] = self.referral_name
        return payload

    async def create_order(self, order: OrderRequest) -> OrderFragment:
        """Create a limit order through the Jupiter API.

        Args:
            order: Normalized order request

        Returns:
            OrderFragment with the order-creation instructions

        Raises:
            OrderProviderError: on a non-200 reply or an undecodable transaction
        """
        payload = self._build_payload(order)
        logger.debug(f"Creating Jupiter limit order: {payload}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                f"{self.base_url}/createOrder",
                headers={"Accept": "application/json"},
                json=payload,
            )

        if response.status_code != 200:
            logger.warning(f"Jupiter limit API error: {response.status_code} - {response.text}")
            raise OrderProviderError(f"Jupiter limit API error: {response.status_code}")

        data = response.json()
        encoded_tx = data.get("tx")
        if not encoded_tx:
            raise OrderProviderError("No order transaction returned")

        try:
            tx = Transaction.from_bytes(base64.b64decode(encoded_tx))
        except Exception as e:
            raise OrderProviderError(f"Malformed order transaction: {e}") from e

        order_pubkey = data.get("orderPubkey")
        fragment = OrderFragment(
            instructions=decompile_instructions(tx),
            order_pubkey=Pubkey.from_string(order_pubkey) if order_pubkey else None,
        )
        logger.info(
            f"Jupiter limit order built: {order.in_amount} -> {order.out_amount} "
            f"({len(fragment.instructions)} instructions, order={order_pubkey})"
        )
        return fragment


def create_jupiter_limit_provider(
    referral_account: Optional[str] = None,
    referral_name: Optional[str] = None,
    base_url: str = JUPITER_LIMIT_API_V1,
) -> JupiterLimitOrderProvider:
    """Create a Jupiter limit order provider instance."""
    return JupiterLimitOrderProvider(
        referral_account=referral_account,
        referral_name=referral_name,
        base_url=base_url,
    )
