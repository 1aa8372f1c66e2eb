"""Request and response models for the Aura API."""

from aura.schemas.catalog import (
    Product,
    ProductDetailResponse,
    TranslateProductRequest,
    TranslateProductResponse,
)
from aura.schemas.cart import AddToCartRequest, CartResponse
from aura.schemas.checkout import (
    CheckoutResponse,
    LocationSuggestion,
    SelectLocationRequest,
    ShippingEstimate,
    ZipInputRequest,
)
from aura.schemas.concierge import ChatTurn, ConciergeChatRequest, ConciergeChatResponse
from aura.schemas.i18n import (
    LanguageResponse,
    LanguagesListResponse,
    LanguageStateResponse,
    LookupRequest,
    LookupResponse,
    SetLanguageRequest,
)

__all__ = [
    "AddToCartRequest",
    "CartResponse",
    "ChatTurn",
    "CheckoutResponse",
    "ConciergeChatRequest",
    "ConciergeChatResponse",
    "LanguageResponse",
    "LanguagesListResponse",
    "LanguageStateResponse",
    "LocationSuggestion",
    "LookupRequest",
    "LookupResponse",
    "Product",
    "ProductDetailResponse",
    "SelectLocationRequest",
    "SetLanguageRequest",
    "ShippingEstimate",
    "TranslateProductRequest",
    "TranslateProductResponse",
    "ZipInputRequest",
]
