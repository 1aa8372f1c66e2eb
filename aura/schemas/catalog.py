"""
Pydantic models for the product catalog.

Defines the product record and product-detail translation payloads.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


class Product(BaseModel):
    """A product in the Aura catalog. Prices are in USD."""
    id: str
    name: str
    tagline: str
    description: str
    longDescription: Optional[str] = None
    price: float = Field(..., ge=0)
    category: str
    imageUrl: str
    features: List[str] = []

    model_config = {"frozen": True}


class ProductDetailResponse(BaseModel):
    """Product with display options for the detail page."""
    product: Product
    sizes: List[str] = []


class TranslateProductRequest(BaseModel):
    """Request to translate a product's description and features."""
    language: str = Field(default="Italian", min_length=2, max_length=40)


class TranslateProductResponse(BaseModel):
    """Translated product details."""
    productId: str
    language: str
    translatedDescription: str
    translatedFeatures: List[str]
