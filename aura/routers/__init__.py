"""
Aura API Routers.

All routers are imported here for easy access.
"""

from aura.routers.catalog import router as catalog_router
from aura.routers.sessions import router as sessions_router
from aura.routers.cart import router as cart_router
from aura.routers.i18n import router as i18n_router
from aura.routers.checkout import router as checkout_router
from aura.routers.concierge import router as concierge_router

__all__ = [
    "catalog_router",
    "sessions_router",
    "cart_router",
    "i18n_router",
    "checkout_router",
    "concierge_router",
]
