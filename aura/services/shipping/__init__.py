"""Shipping services."""

from aura.services.shipping.shipping_service import ShippingService

__all__ = ["ShippingService"]
