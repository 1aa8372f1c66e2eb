"""
FastAPI router for the product catalog.

Provides product listing, detail, related products and on-demand
translation of a product's description and features.
"""

import logging
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query

from common.utils import NotFoundException, ServiceUnavailableException

from aura.dependencies import get_catalog_service, get_translation_service
from aura.schemas.catalog import (
    Product,
    ProductDetailResponse,
    TranslateProductRequest,
    TranslateProductResponse,
)
from aura.services.catalog.catalog_service import CatalogService
from aura.services.translation.translation_service import TranslationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["catalog"])


def _get_product_or_404(catalog: CatalogService, product_id: str) -> Product:
    product = catalog.get_product(product_id)
    if not product:
        raise NotFoundException("Product not found", code="PRODUCT_NOT_FOUND")
    return product


@router.get("", response_model=List[Product])
async def list_products(
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
    category: Optional[str] = Query(None, description="Audio, Wearable, Mobile or Home"),
):
    return catalog.list_products(category)


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(
    product_id: str,
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Get a product with its size options."""
    product = _get_product_or_404(catalog, product_id)
    return ProductDetailResponse(product=product, sizes=catalog.sizes_for(product))


@router.get("/{product_id}/related", response_model=List[Product])
async def get_related_products(
    product_id: str,
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    product = _get_product_or_404(catalog, product_id)
    return catalog.get_related(product)


@router.post("/{product_id}/translate", response_model=TranslateProductResponse)
async def translate_product(
    product_id: str,
    body: TranslateProductRequest,
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
    translator: Annotated[TranslationService, Depends(get_translation_service)],
):
    """
    Translate a product's long description and features.

    Returns 503 when the AI provider is unavailable or the translation failed.
    """
    product = _get_product_or_404(catalog, product_id)

    result = await translator.translate_product_details(
        description=product.longDescription or product.description,
        features=product.features,
        target_language=body.language,
    )
    if result is None:
        raise ServiceUnavailableException(
            message="Translation is not available right now",
            code="TRANSLATION_FAILED",
        )

    return TranslateProductResponse(
        productId=product.id,
        language=body.language,
        translatedDescription=result["translatedDescription"],
        translatedFeatures=result["translatedFeatures"],
    )
