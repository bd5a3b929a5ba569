"""HTTP controllers for the action endpoints.

Each controller answers GET/OPTIONS with an action descriptor and POST with
an unsigned transaction for the caller's wallet.
"""

from limitblink.web.controllers.limit import router as limit_router
from limitblink.web.controllers.limit_order import router as limit_order_router

__all__ = [
    "limit_router",
    "limit_order_router",
]
