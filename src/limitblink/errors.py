"""Error types raised while handling action requests.

Every client-facing failure is an ``ActionError`` carrying its kind, the
offending field (if any) and the message returned to the caller.
"""

from enum import Enum
from typing import Optional

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class ActionErrorKind(str, Enum):
    """Kinds of action request failures."""

    INVALID_PARAMETER = "invalid_parameter"
    INVALID_ACCOUNT = "invalid_account"
    INSUFFICIENT_AMOUNT = "insufficient_amount"
    UNKNOWN = "unknown"


class ActionError(Exception):
    """Base class for failures answered with a client error."""

    kind: ActionErrorKind = ActionErrorKind.UNKNOWN

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value}, field={self.field!r})"


class InvalidParameterError(ActionError):
    """Malformed or semantically invalid query parameter."""

    kind = ActionErrorKind.INVALID_PARAMETER

    def __init__(self, field: str):
        super().__init__(f"Invalid input query parameter: {field}", field=field)


class InvalidAccountError(ActionError):
    """Malformed account address in the POST body."""

    kind = ActionErrorKind.INVALID_ACCOUNT

    def __init__(self):
        super().__init__('Invalid "account" provided', field="account")


class InsufficientAmountError(ActionError):
    """Transfer amount below the rent-exemption minimum."""

    kind = ActionErrorKind.INSUFFICIENT_AMOUNT

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"account may not be rent exempt: {address}", field="amount")


class UnknownError(ActionError):
    """Anything else; the original error is logged, never returned."""

    kind = ActionErrorKind.UNKNOWN

    def __init__(self):
        super().__init__(UNKNOWN_ERROR_MESSAGE)


class OrderProviderError(Exception):
    """Raised when the limit-order service rejects or garbles a request."""
    pass
