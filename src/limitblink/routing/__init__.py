"""Limit-order providers."""

from limitblink.routing.base import LimitOrderProvider, OrderFragment, OrderRequest

__all__ = ["LimitOrderProvider", "OrderFragment", "OrderRequest"]
