"""limitblink - Solana Actions for Jupiter limit orders."""

__version__ = "0.1.0"
