"""Checkout services."""

from aura.services.checkout.checkout_session import CheckoutSession, format_price

__all__ = ["CheckoutSession", "format_price"]
