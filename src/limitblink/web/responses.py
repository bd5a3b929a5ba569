"""Response helpers shared by the action endpoints.

Every action response, success or failure, carries the same permissive
cross-origin headers so wallets and blink clients can call us from anywhere.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from limitblink.config import get_settings
from limitblink.errors import ActionError, UnknownError

logger = logging.getLogger(__name__)

ACTIONS_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,PUT,OPTIONS",
    "Access-Control-Allow-Headers": (
        "Content-Type, Authorization, Content-Encoding, Accept-Encoding, "
        "X-Accept-Action-Version, X-Accept-Blockchain-Ids"
    ),
    "Access-Control-Expose-Headers": "X-Action-Version, X-Blockchain-Ids",
}


def action_headers() -> dict[str, str]:
    """CORS headers plus the action version and chain id headers."""
    settings = get_settings()
    return {
        **ACTIONS_CORS_HEADERS,
        "X-Action-Version": settings.action_version,
        "X-Blockchain-Ids": settings.blockchain_id,
    }


def action_response(payload: BaseModel) -> JSONResponse:
    """200 JSON response with the action headers."""
    return JSONResponse(
        content=payload.model_dump(mode="json", exclude_none=True),
        headers=action_headers(),
    )


def action_error_response(error: Exception) -> PlainTextResponse:
    """400 plain-text response for any failure.

    ActionErrors return their own message. Anything else is logged and
    answered with the generic unknown-error message.
    """
    if isinstance(error, ActionError):
        logger.info(f"Action request rejected: {error!r} - {error.message}")
        message = error.message
    else:
        logger.exception(f"Unexpected action error: {error}", exc_info=error)
        message = UnknownError().message

    return PlainTextResponse(message, status_code=400, headers=action_headers())


def absolute_url(request: Request, path: str) -> str:
    """Absolute URL of ``path`` on the request's origin."""
    return str(request.base_url).rstrip("/") + "/" + path.lstrip("/")
