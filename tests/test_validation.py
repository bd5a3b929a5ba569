"""Tests for POST body validation."""

import pytest
from solders.keypair import Keypair

from limitblink.errors import ActionErrorKind, InvalidAccountError
from limitblink.web.services.validation import parse_post_body, validate_account


class TestPostBody:
    """Tests for the POST body schema and account check."""

    def test_valid_account(self):
        account = Keypair().pubkey()
        body = parse_post_body({"account": str(account)})

        assert validate_account(body) == account

    def test_protocol_fields_are_accepted(self):
        account = Keypair().pubkey()
        body = parse_post_body(
            {"account": str(account), "type": "transaction", "data": {"amountInSOL": "1"}}
        )

        assert body.type == "transaction"
        assert validate_account(body) == account

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"account": None},
            {"account": 42},
            {"account": "x", "unexpected": True},
            [],
            "account",
        ],
    )
    def test_schema_failures(self, raw):
        with pytest.raises(InvalidAccountError) as exc_info:
            parse_post_body(raw)

        assert exc_info.value.kind == ActionErrorKind.INVALID_ACCOUNT
        assert exc_info.value.message == 'Invalid "account" provided'

    @pytest.mark.parametrize("account", ["not-an-address", "", "0" * 44])
    def test_malformed_account(self, account):
        body = parse_post_body({"account": account})

        with pytest.raises(InvalidAccountError):
            validate_account(body)
