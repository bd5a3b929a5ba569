"""Web boundary layer for the Solana action endpoints.

All operations in this layer prepare data for client-side signing. The
service never holds keys, signs or broadcasts transactions.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
