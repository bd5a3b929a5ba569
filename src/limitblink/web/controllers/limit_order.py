"""Sized limit order action.

The user picks how much SOL to sell and how much USDC to ask for; amounts are
scaled to base units before the order is placed.
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
from limitblink.web.dependencies import get_keyed_connection, get_limit_order_provider
from limitblink.web.responses import absolute_url, action_error_response, action_response
from limitblink.web.services.order_builder import (
    OrderBuilder,
    create_post_response,
    new_base_key,
    order_expiry,
)
from limitblink.web.services.params import (
    AMOUNT_SOL_PARAM,
    AMOUNT_USDC_PARAM,
    TO_PARAM,
    LimitOrderParams,
    resolve_limit_order_params,
)
from limitblink.web.services.validation import read_account

logger = logging.getLogger(__name__)

LIMIT_ORDER_ACTION_PATH = "/api/actions/limit-order"

router = APIRouter(tags=["actions"])


def describe_limit_order_action(request: Request, params: LimitOrderParams) -> ActionGetResponse:
    """Build the action descriptor; the link target carries the resolved ``to``."""
    settings = get_settings()
    href = (
        f"{absolute_url(request, LIMIT_ORDER_ACTION_PATH)}"
        f"?{TO_PARAM}={params.to}"
        f"&{AMOUNT_SOL_PARAM}={{{AMOUNT_SOL_PARAM}}}"
        f"&{AMOUNT_USDC_PARAM}={{{AMOUNT_USDC_PARAM}}}"
    )
    return ActionGetResponse(
        title="Jupiter Limit Order",
        icon=absolute_url(request, settings.action_icon_path),
        description="Sell SOL for USDC at your price with a Jupiter limit order",
        label="Place order",
        links=ActionLinks(
            actions=[
                LinkedAction(
                    label="Place limit order",
                    href=href,
                    parameters=[
                        ActionParameter(name=AMOUNT_SOL_PARAM, label="SOL", required=True),
                        ActionParameter(name=AMOUNT_USDC_PARAM, label="USDC", required=True),
                    ],
                )
            ]
        ),
    )


@router.api_route(LIMIT_ORDER_ACTION_PATH, methods=["GET", "OPTIONS"])
async def get_limit_order_action(request: Request) -> Response:
    """Describe the sized limit order action."""
    try:
        params = resolve_limit_order_params(request.query_params, get_settings().action_defaults())
        return action_response(describe_limit_order_action(request, params))
    except Exception as e:
        return action_error_response(e)


@router.post(LIMIT_ORDER_ACTION_PATH)
async def post_limit_order_action(
    request: Request,
    connection: SolanaConnection = Depends(get_keyed_connection),
    provider: LimitOrderProvider = Depends(get_limit_order_provider),
) -> Response:
    """Build an unsigned transaction selling ``amountInSOL`` for ``amountInUSDC``."""
    settings = get_settings()
    try:
        params = resolve_limit_order_params(request.query_params, settings.action_defaults())
        account = await read_account(request)

        order = OrderRequest(
            owner=params.to,
            in_amount=params.sol_base_units,
            out_amount=params.usdc_base_units,
            input_mint=get_token_mint("SOL"),
            output_mint=get_token_mint("USDC"),
            expired_at=order_expiry(settings.order_expiry_seconds),
            base=new_base_key(),
        )
        transaction = await OrderBuilder(connection, provider).build(order, fee_payer=account)

        message = f"Limit order: {params.sol_amount} SOL for {params.usdc_amount} USDC"
        logger.info(f"{message} prepared for {account}")
        return action_response(create_post_response(transaction, message))
    except Exception as e:
        return action_error_response(e)
