"""Application configuration using pydantic-settings.

Holds the defaults the action endpoints fall back on, the RPC endpoints and
the Jupiter limit-order settings.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from solders.pubkey import Pubkey

from limitblink.web.services.params import ActionDefaults


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")

    # ======================
    # Solana RPC
    # ======================
    sol_rpc_url: str = Field(
        default="https://api.mainnet-beta.solana.com", description="Solana RPC URL"
    )
    rpc_api_key: str = Field(default="", description="API key for the keyed RPC endpoint")
    keyed_rpc_url_template: str = Field(
        default="https://mainnet.helius-rpc.com/?api-key={api_key}",
        description="Keyed RPC URL, {api_key} is substituted",
    )

    # ======================
    # Jupiter limit orders
    # ======================
    jupiter_limit_api_url: str = Field(
        default="https://jup.ag/api/limit/v1", description="Jupiter limit order API URL"
    )
    referral_account: str = Field(
        default="GqkJ3UoKTScvXiaJUxrGJ9QD847LAj2DTvMzqjaT2tJm",
        description="Referral account attached to created orders",
    )
    referral_name: str = Field(default="limitBlink", description="Referral name")
    order_expiry_seconds: Optional[int] = Field(
        default=None, gt=0, description="Order lifetime in seconds (None = never expires)"
    )

    # ======================
    # Action defaults
    # ======================
    default_to_address: str = Field(
        default="GqkJ3UoKTScvXiaJUxrGJ9QD847LAj2DTvMzqjaT2tJm",
        description="Address used when the 'to' query parameter is absent",
    )
    default_sol_amount: Decimal = Field(default=Decimal("1.0"), gt=0)
    default_usdc_amount: Decimal = Field(default=Decimal("100"), gt=0)
    action_icon_path: str = Field(default="/solana_devs.jpg", description="Icon path on the request origin")

    # ======================
    # Action protocol headers
    # ======================
    action_version: str = Field(default="2.1.3", description="X-Action-Version header")
    blockchain_id: str = Field(
        default="solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp",
        description="X-Blockchain-Ids header (CAIP-2 mainnet id)",
    )

    @property
    def keyed_rpc_url(self) -> str:
        """RPC URL for the limit-order endpoint, keyed when an API key is set."""
        if not self.rpc_api_key:
            return self.sol_rpc_url
        return self.keyed_rpc_url_template.format(api_key=self.rpc_api_key)

    def action_defaults(self) -> ActionDefaults:
        """Build the defaults record handed to the parameter resolver."""
        return ActionDefaults(
            to_address=Pubkey.from_string(self.default_to_address),
            sol_amount=self.default_sol_amount,
            usdc_amount=self.default_usdc_amount,
        )

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "rpc": {
                "default": self.sol_rpc_url,
                "keyed": "***" if self.rpc_api_key else "(not set)",
            },
            "jupiter": {
                "limit_api": self.jupiter_limit_api_url,
                "referral_account": self.referral_account,
                "referral_name": self.referral_name,
                "order_expiry_seconds": self.order_expiry_seconds,
            },
            "defaults": {
                "to": self.default_to_address,
                "sol_amount": str(self.default_sol_amount),
                "usdc_amount": str(self.default_usdc_amount),
            },
            "action_version": self.action_version,
            "blockchain_id": self.blockchain_id,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
