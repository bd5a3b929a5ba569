"""POST body validation for the action endpoints."""

import json
import logging
from typing import Any

from fastapi import Request
from pydantic import ValidationError
from solders.pubkey import Pubkey

from limitblink.errors import InvalidAccountError, UnknownError
from limitblink.web.contracts.actions import ActionPostRequest

logger = logging.getLogger(__name__)


def parse_post_body(raw: Any) -> ActionPostRequest:
    """Validate a decoded JSON body against the POST schema.

    Missing or non-string ``account`` and unknown fields all fail the same way.
    """
    try:
        return ActionPostRequest.model_validate(raw)
    except ValidationError as e:
        logger.info(f"Rejected action body: {e.error_count()} validation error(s)")
        raise InvalidAccountError() from e


def validate_account(body: ActionPostRequest) -> Pubkey:
    """Parse the caller's account address."""
    try:
        return Pubkey.from_string(body.account)
    except ValueError as e:
        raise InvalidAccountError() from e


async def read_account(request: Request) -> Pubkey:
    """Decode the request body and return the validated account address."""
    try:
        raw = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Undecodable action body: {e}")
        raise UnknownError() from e

    return validate_account(parse_post_body(raw))
