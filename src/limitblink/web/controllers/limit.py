"""Fixed-amount limit order action.

GET/OPTIONS describe the action, POST returns an unsigned transaction that
places a SOL -> USDC limit order of a fixed size.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from limitblink.config import get_settings
from limitblink.routing.base import LimitOrderProvider, OrderRequest
from limitblink.routing.jupiter_limit import get_token_mint
from limitblink.rpc import SolanaConnection
from limitblink.web.contracts.actions import (
    ActionGetResponse,
    ActionLinks,
    ActionParameter,
    LinkedAction,
)
from limitblink.web.dependencies import get_connection, get_limit_order_provider
from limitblink.web.responses import absolute_url, action_error_response, action_response
from limitblink.web.services.order_builder import (
    OrderBuilder,
    create_post_response,
    ensure_rent_exempt,
    new_base_key,
    order_expiry,
)
from limitblink.web.services.params import (
    AMOUNT_SOL_PARAM,
    AMOUNT_USDC_PARAM,
    resolve_transfer_params,
)
from limitblink.web.services.validation import read_account

logger = logging.getLogger(__name__)

LIMIT_ACTION_PATH = "/api/actions/limit"

# Order size in base units; the query amount only feeds the rent check
FIXED_IN_AMOUNT = 100_000
FIXED_OUT_AMOUNT = 100_000

ORDER_MESSAGE = "DCA order"

router = APIRouter(tags=["actions"])


def describe_limit_action(request: Request) -> ActionGetResponse:
    """Build the action descriptor. It does not depend on the query string."""
    settings = get_settings()
    return ActionGetResponse(
        title="Jupiter Limit Order",
        icon=absolute_url(request, settings.action_icon_path),
        description="Place a SOL to USDC limit order on Jupiter",
        label="Place order",
        links=ActionLinks(
            actions=[
                LinkedAction(
                    label="DCA",
                    href=absolute_url(request, LIMIT_ACTION_PATH),
                    parameters=[
                        ActionParameter(name=AMOUNT_USDC_PARAM, label="USDC", required=True),
                        ActionParameter(name=AMOUNT_SOL_PARAM, label="SOL", required=True),
                    ],
                )
            ]
        ),
    )


@router.api_route(LIMIT_ACTION_PATH, methods=["GET", "OPTIONS"])
async def get_limit_action(request: Request) -> Response:
    """Describe the limit order action.

    OPTIONS answers the same way so CORS pre-flight works for blinks.
    """
    try:
        resolve_transfer_params(request.query_params, get_settings().action_defaults())
        return action_response(describe_limit_action(request))
    except Exception as e:
        return action_error_response(e)


@router.post(LIMIT_ACTION_PATH)
async def post_limit_action(
    request: Request,
    connection: SolanaConnection = Depends(get_connection),
    provider: LimitOrderProvider = Depends(get_limit_order_provider),
) -> Response:
    """Build an unsigned limit order transaction for the caller's wallet."""
    settings = get_settings()
    try:
        params = resolve_transfer_params(request.query_params, settings.action_defaults())
        account = await read_account(request)

        await ensure_rent_exempt(connection, params.to, params.lamports)

        order = OrderRequest(
            owner=params.to,
            in_amount=FIXED_IN_AMOUNT,
            out_amount=FIXED_OUT_AMOUNT,
            input_mint=get_token_mint("SOL"),
            output_mint=get_token_mint("USDC"),
            expired_at=order_expiry(settings.order_expiry_seconds),
            base=new_base_key(),
        )
        transaction = await OrderBuilder(connection, provider).build(order, fee_payer=account)

        logger.info(f"Limit order transaction prepared for {account}")
        return action_response(create_post_response(transaction, ORDER_MESSAGE))
    except Exception as e:
        return action_error_response(e)
