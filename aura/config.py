"""
Aura storefront settings.

Extends the base settings with storefront-specific configuration.
"""

from typing import Optional
from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Aura-specific settings."""

    # ==========================================================================
    # External Services
    # ==========================================================================
    # FAL.ai Image Generation (concierge edit_image tool)
    FAL_API_KEY: Optional[str] = None
    FAL_BASE_URL: str = "https://fal.run"

    # ==========================================================================
    # Translation
    # ==========================================================================
    # Quiet interval after the last newly registered text before a batch goes out
    TRANSLATION_DEBOUNCE_SECONDS: float = 0.8

    # Overlay fade timings
    LOADER_FADE_IN_SECONDS: float = 0.05
    LOADER_FADE_OUT_SECONDS: float = 0.5

    # ==========================================================================
    # Checkout
    # ==========================================================================
    ZIP_LOOKUP_DEBOUNCE_SECONDS: float = 0.8
    ZIP_MIN_LENGTH: int = 3
    MAX_ZIP_SUGGESTIONS: int = 5

    SHIPPING_ORIGIN: str = "Cupertino, CA, USA"
    FALLBACK_SHIPPING_COST: float = 25.0
    FALLBACK_CURRENCY: str = "USD"

    # ==========================================================================
    # Sessions
    # ==========================================================================
    # Oldest sessions are evicted beyond this count
    MAX_SESSIONS: int = 1000


# Global settings instance
settings = Settings()
