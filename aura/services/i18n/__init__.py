"""i18n services."""

from aura.services.i18n.language_config import LanguageConfig

__all__ = [
    "LanguageConfig",
]
