"""
Language configuration service.

Manages the list of storefront languages with display labels.
Languages are identified by their English name, which is also what the
translation prompts use.
"""

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class LanguageConfig:
    """
    Configuration for supported languages.
    """

    LANGUAGES = [
        {"code": "English", "label": "English", "isDefault": True},
        {"code": "Italian", "label": "Italiano", "isDefault": False},
        {"code": "French", "label": "Français", "isDefault": False},
        {"code": "German", "label": "Deutsch", "isDefault": False},
        {"code": "Spanish", "label": "Español", "isDefault": False},
        {"code": "Japanese", "label": "日本語", "isDefault": False},
    ]

    def __init__(self, enabled: Optional[List[str]] = None):
        """
        Initialize LanguageConfig.

        Args:
            enabled: Language codes to offer (default: all known languages)
        """
        self._languages = [
            dict(lang) for lang in self.LANGUAGES
            if enabled is None or lang["code"] in enabled
        ]
        if enabled is not None:
            unknown = set(enabled) - {lang["code"] for lang in self.LANGUAGES}
            for code in sorted(unknown):
                logger.warning(f"Ignoring unknown language in configuration: {code}")

    def get_supported_languages(self) -> List[dict]:
        """
        Get list of supported languages with metadata.

        Returns:
            List of language dicts:
                [
                    { "code": "English", "label": "English", "isDefault": True },
                    { "code": "Italian", "label": "Italiano", "isDefault": False }
                ]
        """
        return [dict(lang) for lang in self._languages]

    def get_language_codes(self) -> List[str]:
        return [lang["code"] for lang in self._languages]

    def is_supported(self, lang: str) -> bool:
        return lang in self.get_language_codes()
