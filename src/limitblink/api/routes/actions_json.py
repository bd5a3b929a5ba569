"""Actions discovery file served at the site root."""

from fastapi import APIRouter
from fastapi.responses import Response

from limitblink.web.contracts.actions import ActionRule, ActionsJson
from limitblink.web.responses import action_response

router = APIRouter()


@router.api_route("/actions.json", methods=["GET", "OPTIONS"])
async def actions_json() -> Response:
    """Map blink URLs on this origin onto the action API."""
    payload = ActionsJson(
        rules=[ActionRule(pathPattern="/api/actions/**", apiPath="/api/actions/**")]
    )
    return action_response(payload)
