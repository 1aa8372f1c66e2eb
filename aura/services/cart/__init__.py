"""Cart services."""

from aura.services.cart.cart import Cart

__all__ = ["Cart"]
