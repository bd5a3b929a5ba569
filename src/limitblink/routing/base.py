"""Abstract interface for limit-order construction services."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from solders.instruction import Instruction
from solders.pubkey import Pubkey


@dataclass(frozen=True)
class OrderRequest:
    """A normalized limit-order request.

    Amounts are integer base units of the input and output mints.
    """

    owner: Pubkey
    in_amount: int
    out_amount: int
    input_mint: Pubkey
    output_mint: Pubkey
    base: Pubkey
    expired_at: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to the JSON shape the order service expects."""
        return {
            "owner": str(self.owner),
            "inAmount": self.in_amount,
            "outAmount": self.out_amount,
            "inputMint": str(self.input_mint),
            "outputMint": str(self.output_mint),
            "expiredAt": self.expired_at,
            "base": str(self.base),
        }


@dataclass
class OrderFragment:
    """Instructions that create an order, ready to go into a transaction."""

    instructions: list[Instruction] = field(default_factory=list)
    order_pubkey: Optional[Pubkey] = None


class LimitOrderProvider(ABC):
    """Abstract base class for limit-order providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for display/logging."""
        pass

    @abstractmethod
    async def create_order(self, order: OrderRequest) -> OrderFragment:
        """Build the instructions that place ``order``.

        Raises:
            OrderProviderError: if the service rejects the order
        """
        pass
