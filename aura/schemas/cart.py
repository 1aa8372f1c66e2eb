"""
Pydantic models for cart request/response validation.
"""

from typing import List
from pydantic import BaseModel, Field

from aura.schemas.catalog import Product


class AddToCartRequest(BaseModel):
    """Request body for adding a product to the cart."""
    productId: str = Field(..., min_length=1)


class CartResponse(BaseModel):
    """Cart contents in listing order."""
    items: List[Product]
    count: int
    subtotal: float
