"""Translation services."""

from aura.services.translation.translation_service import TranslationService
from aura.services.translation.language_provider import (
    ENGLISH,
    LanguageProvider,
    LanguageState,
    is_protected,
)
from aura.services.translation.loader import TranslationLoader

__all__ = [
    "ENGLISH",
    "LanguageProvider",
    "LanguageState",
    "TranslationLoader",
    "TranslationService",
    "is_protected",
]
