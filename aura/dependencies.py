"""
FastAPI dependencies for the Aura storefront.

Provides dependency injection for all services.
"""

import logging
from typing import Optional

from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from common.utils import NotFoundException

from aura.config import Settings
from aura.services.catalog.catalog_service import CatalogService
from aura.services.catalog.products import PRODUCTS
from aura.services.concierge.concierge_service import ConciergeService
from aura.services.i18n.language_config import LanguageConfig
from aura.services.media.image_service import ImageService
from aura.services.session.session_store import SessionStore, StorefrontSession
from aura.services.shipping.shipping_service import ShippingService
from aura.services.translation.translation_service import TranslationService

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

# AI
_ai_provider: Optional[AIProvider] = None

# Catalog
_catalog_service: Optional[CatalogService] = None

# i18n
_language_config: Optional[LanguageConfig] = None
_translation_service: Optional[TranslationService] = None

# Checkout
_shipping_service: Optional[ShippingService] = None

# Concierge
_image_service: Optional[ImageService] = None
_concierge_service: Optional[ConciergeService] = None

# Sessions
_session_store: Optional[SessionStore] = None


# ─────────────────────────────────────────────────────────────────
# Initialization functions
# ─────────────────────────────────────────────────────────────────

def build_ai_provider(settings: Settings) -> Optional[AIProvider]:
    """
    Create the configured AI provider.

    Returns None when the provider's API key is not set; every AI-backed
    feature then answers with its fallback.
    """
    api_key = settings.get_ai_api_key()
    if not api_key:
        logger.warning(f"No API key for AI provider '{settings.AI_PROVIDER}'; AI features disabled")
        return None

    if settings.AI_PROVIDER == "openai":
        return OpenAIProvider(
            api_key=api_key,
            model=settings.OPENAI_MODEL,
            max_retries=settings.AI_MAX_RETRIES,
            timeout=settings.AI_TIMEOUT_SECONDS,
        )

    return ClaudeProvider(
        api_key=api_key,
        model=settings.CLAUDE_MODEL,
        max_retries=settings.AI_MAX_RETRIES,
        timeout=settings.AI_TIMEOUT_SECONDS,
    )


def init_catalog_services() -> None:
    """Initialize catalog services."""
    global _catalog_service

    _catalog_service = CatalogService(PRODUCTS)


def init_i18n_services(settings: Settings, ai_provider: Optional[AIProvider]) -> None:
    """Initialize i18n services."""
    global _language_config, _translation_service

    _language_config = LanguageConfig(enabled=settings.get_supported_languages())
    _translation_service = TranslationService(ai_provider=ai_provider)


def init_checkout_services(settings: Settings, ai_provider: Optional[AIProvider]) -> None:
    """Initialize checkout services."""
    global _shipping_service

    _shipping_service = ShippingService(
        ai_provider=ai_provider,
        origin=settings.SHIPPING_ORIGIN,
        max_suggestions=settings.MAX_ZIP_SUGGESTIONS,
    )


def init_concierge_services(settings: Settings, ai_provider: Optional[AIProvider]) -> None:
    """Initialize concierge services."""
    global _image_service, _concierge_service

    _image_service = ImageService(
        api_key=settings.FAL_API_KEY,
        base_url=settings.FAL_BASE_URL,
    )
    _concierge_service = ConciergeService(
        ai_provider=ai_provider,
        image_service=_image_service,
        products=get_catalog_service().list_products(),
    )


def init_session_services(settings: Settings) -> None:
    """Initialize the session store."""
    global _session_store

    _session_store = SessionStore(
        translator=get_translation_service(),
        shipping_service=get_shipping_service(),
        max_sessions=settings.MAX_SESSIONS,
        default_language=settings.DEFAULT_LANGUAGE,
        translation_debounce_seconds=settings.TRANSLATION_DEBOUNCE_SECONDS,
        fade_in_seconds=settings.LOADER_FADE_IN_SECONDS,
        fade_out_seconds=settings.LOADER_FADE_OUT_SECONDS,
        zip_debounce_seconds=settings.ZIP_LOOKUP_DEBOUNCE_SECONDS,
        zip_min_length=settings.ZIP_MIN_LENGTH,
        fallback_shipping_cost=settings.FALLBACK_SHIPPING_COST,
        fallback_currency=settings.FALLBACK_CURRENCY,
    )


def init_all_services(settings: Settings, ai_provider: Optional[AIProvider] = None) -> None:
    """
    Initialize all services.

    Args:
        settings: Application settings
        ai_provider: Provider to use instead of building one from settings
    """
    global _ai_provider

    _ai_provider = ai_provider if ai_provider is not None else build_ai_provider(settings)

    init_catalog_services()
    init_i18n_services(settings, _ai_provider)
    init_checkout_services(settings, _ai_provider)
    init_concierge_services(settings, _ai_provider)
    init_session_services(settings)


async def shutdown_services() -> None:
    """Close open sessions."""
    if _session_store is not None:
        await _session_store.close()


# ─────────────────────────────────────────────────────────────────
# Getters
# ─────────────────────────────────────────────────────────────────

def get_ai_provider() -> Optional[AIProvider]:
    return _ai_provider


def get_catalog_service() -> CatalogService:
    if _catalog_service is None:
        raise RuntimeError("Catalog services not initialized.")
    return _catalog_service


def get_language_config() -> LanguageConfig:
    if _language_config is None:
        raise RuntimeError("i18n services not initialized.")
    return _language_config


def get_translation_service() -> TranslationService:
    if _translation_service is None:
        raise RuntimeError("i18n services not initialized.")
    return _translation_service


def get_shipping_service() -> ShippingService:
    if _shipping_service is None:
        raise RuntimeError("Checkout services not initialized.")
    return _shipping_service


def get_concierge_service() -> ConciergeService:
    if _concierge_service is None:
        raise RuntimeError("Concierge services not initialized.")
    return _concierge_service


def get_session_store() -> SessionStore:
    if _session_store is None:
        raise RuntimeError("Session services not initialized.")
    return _session_store


def get_session(session_id: str) -> StorefrontSession:
    """Resolve the {session_id} path parameter."""
    session = get_session_store().get_session(session_id)
    if session is None:
        raise NotFoundException("Session not found", code="SESSION_NOT_FOUND")
    return session
