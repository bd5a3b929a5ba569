"""Tests for application settings."""

from decimal import Decimal

from limitblink.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_keyed_rpc_falls_back_without_key(self):
        settings = Settings(rpc_api_key="")

        assert settings.keyed_rpc_url == settings.sol_rpc_url

    def test_keyed_rpc_uses_key(self):
        settings = Settings(rpc_api_key="abc123")

        assert settings.keyed_rpc_url == "https://mainnet.helius-rpc.com/?api-key=abc123"
        assert "abc123" not in str(settings.get_safe_dict())

    def test_action_defaults(self):
        settings = Settings(default_sol_amount=Decimal("2"), default_usdc_amount=Decimal("5"))
        defaults = settings.action_defaults()

        assert str(defaults.to_address) == settings.default_to_address
        assert defaults.sol_amount == Decimal("2")
        assert defaults.usdc_amount == Decimal("5")
