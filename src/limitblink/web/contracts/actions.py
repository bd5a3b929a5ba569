"""Solana Actions request and response contracts."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ActionParameter(BaseModel):
    """An input the client renders for a linked action."""

    name: str = Field(..., description="Query parameter name in the href template")
    label: Optional[str] = Field(None, description="Placeholder text of the input")
    required: bool = Field(False, description="Whether the input must be filled")


class LinkedAction(BaseModel):
    """A button with an href template and its inputs."""

    label: str = Field(..., description="Button text")
    href: str = Field(..., description="Target URL, may contain {parameter} tokens")
    parameters: list[ActionParameter] = Field(default_factory=list)


class ActionLinks(BaseModel):
    """Linked actions rendered instead of the default button."""

    actions: list[LinkedAction] = Field(default_factory=list)


class ActionGetResponse(BaseModel):
    """Action descriptor returned by GET."""

    type: Literal["action"] = "action"
    title: str
    icon: str = Field(..., description="Absolute URL of the action icon")
    description: str
    label: str = Field(..., description="Default button text, ignored when links are set")
    links: Optional[ActionLinks] = None


class ActionPostRequest(BaseModel):
    """POST body sent by the wallet client."""

    model_config = ConfigDict(extra="forbid")

    account: str = Field(..., description="Base58 address of the signing wallet")
    type: Optional[str] = Field(None, description="Action type echoed by the client")
    data: Optional[dict[str, Any]] = Field(None, description="Form data for parameterised actions")


class ActionPostResponse(BaseModel):
    """Unsigned transaction returned by POST."""

    type: Literal["transaction"] = "transaction"
    transaction: str = Field(..., description="Base64 serialized unsigned transaction")
    message: Optional[str] = Field(None, description="Message shown to the user")


class ActionRule(BaseModel):
    """Path mapping published in actions.json."""

    pathPattern: str
    apiPath: str


class ActionsJson(BaseModel):
    """Body of /actions.json."""

    rules: list[ActionRule] = Field(default_factory=list)
