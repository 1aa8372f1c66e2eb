"""
FastAPI router for the session cart.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import NotFoundException

from aura.dependencies import get_catalog_service, get_session
from aura.schemas.cart import AddToCartRequest, CartResponse
from aura.services.catalog.catalog_service import CatalogService
from aura.services.session.session_store import StorefrontSession

router = APIRouter(prefix="/sessions/{session_id}/cart", tags=["cart"])


def _cart_response(session: StorefrontSession) -> CartResponse:
    cart = session.cart
    return CartResponse(items=cart.items, count=cart.count, subtotal=cart.subtotal)


@router.get("", response_model=CartResponse)
async def get_cart(
    session: Annotated[StorefrontSession, Depends(get_session)],
):
    return _cart_response(session)


@router.post("", response_model=CartResponse)
async def add_to_cart(
    body: AddToCartRequest,
    session: Annotated[StorefrontSession, Depends(get_session)],
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Append a product to the cart."""
    product = catalog.get_product(body.productId)
    if not product:
        raise NotFoundException("Product not found", code="PRODUCT_NOT_FOUND")

    session.cart.add(product)
    return _cart_response(session)


@router.delete("/{index}", response_model=CartResponse)
async def remove_from_cart(
    index: int,
    session: Annotated[StorefrontSession, Depends(get_session)],
):
    """Remove the cart line at a position."""
    try:
        session.cart.remove(index)
    except IndexError:
        raise NotFoundException("Cart item not found", code="CART_ITEM_NOT_FOUND")
    return _cart_response(session)
