"""
FastAPI router for the AI concierge chat.
"""

import base64
import binascii
import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import NotFoundException, ValidationException

from aura.dependencies import get_catalog_service, get_concierge_service
from aura.schemas.concierge import ConciergeChatRequest, ConciergeChatResponse
from aura.services.catalog.catalog_service import CatalogService
from aura.services.concierge.concierge_service import ConciergeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/concierge", tags=["concierge"])


@router.post("/chat", response_model=ConciergeChatResponse)
async def chat(
    body: ConciergeChatRequest,
    concierge: Annotated[ConciergeService, Depends(get_concierge_service)],
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """
    Send a message to the concierge.

    The reply carries a base64 JPEG when the concierge generated or edited
    an image for this turn.
    """
    active_product = None
    if body.productId:
        active_product = catalog.get_product(body.productId)
        if not active_product:
            raise NotFoundException("Product not found", code="PRODUCT_NOT_FOUND")

    image_bytes = None
    if body.imageBase64:
        try:
            image_bytes = base64.b64decode(body.imageBase64, validate=True)
        except (binascii.Error, ValueError):
            raise ValidationException(message="imageBase64 is not valid base64", code="INVALID_IMAGE")

    reply = await concierge.send_message(
        history=[turn.model_dump() for turn in body.history],
        message=body.message,
        active_product=active_product,
        image_bytes=image_bytes,
    )

    return ConciergeChatResponse(
        text=reply.text,
        imageBase64=base64.b64encode(reply.image).decode("ascii") if reply.image else None,
    )
