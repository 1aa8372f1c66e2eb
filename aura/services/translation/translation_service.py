"""
Translation service using the configured AI provider.

Handles batch translation of UI strings and on-demand translation of
product details, in the Aura brand voice.
"""

import json
import logging
from typing import List, Dict, Any, Optional

from pydantic import BaseModel, ValidationError

from common.ai.base import AIProvider

logger = logging.getLogger(__name__)


BRAND_VOICE = (
    'Maintain the "Aura" brand voice: calm, sophisticated, minimalist, '
    "and slightly poetic."
)

BATCH_SCHEMA: Dict[str, Any] = {
    "type": "array",
    "items": {"type": "string"},
}

PRODUCT_DETAILS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "translatedDescription": {"type": "string"},
        "translatedFeatures": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["translatedDescription", "translatedFeatures"],
}


class ProductDetailsTranslation(BaseModel):
    translatedDescription: str
    translatedFeatures: List[str]


class TranslationService:
    """
    Translates storefront text using the AI provider.
    Optimized for batch translation to reduce API calls.

    With no provider configured (missing API key) every call degrades to
    its no-translation result.
    """

    def __init__(self, ai_provider: Optional[AIProvider]):
        """
        Initialize TranslationService.

        Args:
            ai_provider: AI provider for translation, or None when no key is set
        """
        self._ai = ai_provider

    async def translate_batch(
        self,
        texts: List[str],
        target_language: str,
    ) -> Optional[List[str]]:
        """
        Translate a batch of UI strings in one request.

        Args:
            texts: Source strings (English)
            target_language: Target language name, e.g. "French"

        Returns:
            Translations in input order, or None if the request failed or
            the reply did not have the expected shape
        """
        if not texts:
            return []

        if self._ai is None:
            logger.warning("Batch translation skipped: AI provider not configured")
            return None

        prompt = f"""Translate the following array of strings into {target_language}.

Strings: {json.dumps(texts, ensure_ascii=False)}

CRITICAL RULES:
1. DO NOT TRANSLATE the brand name "Aura". Keep it as "Aura".
2. DO NOT TRANSLATE the slogan "Quiet living" or "Quiet living.". Keep it exactly as is in English.
3. Maintain the minimalist, sophisticated brand voice.
4. Return a JSON array of strings corresponding exactly to the input order."""

        try:
            result = await self._ai.chat_json(
                message=prompt,
                schema=BATCH_SCHEMA,
                system_prompt="You are a professional translator. Return only valid JSON.",
                max_tokens=4096,
            )
        except Exception as e:
            logger.error(f"Batch translation failed: {e}")
            return None

        if not isinstance(result, list) or not all(isinstance(t, str) for t in result):
            logger.warning("Batch translation returned an unexpected shape")
            return None

        if len(result) != len(texts):
            logger.warning(
                f"Batch translation returned {len(result)} strings for {len(texts)} inputs"
            )

        return result

    async def translate_product_details(
        self,
        description: str,
        features: List[str],
        target_language: str = "Italian",
    ) -> Optional[Dict[str, Any]]:
        """
        Translate a product description and its feature list together.

        Returns:
            {"translatedDescription": str, "translatedFeatures": [str]} or None
        """
        if self._ai is None:
            return None

        prompt = f"""Translate the following product details into {target_language}.

Input Description: "{description}"
Input Features: {json.dumps(features, ensure_ascii=False)}

STYLE GUIDELINES:
- {BRAND_VOICE}
- The description should feel organic.
- The features should remain concise specifications but adapted to the target language naturally.
- Do not add introductory text. Return only the JSON."""

        try:
            result = await self._ai.chat_json(
                message=prompt,
                schema=PRODUCT_DETAILS_SCHEMA,
            )
            return ProductDetailsTranslation.model_validate(result).model_dump()
        except (ValueError, ValidationError) as e:
            logger.warning(f"Failed to parse product translation: {e}")
            return None
        except Exception as e:
            logger.error(f"Product translation failed: {e}")
            return None

    async def translate_content(
        self,
        text: str,
        target_language: str = "Italian",
    ) -> str:
        """
        Translate a single piece of copy.

        Returns:
            Translated text, or the input unchanged on any failure
        """
        if self._ai is None or not text:
            return text

        prompt = f"""Translate the following product description into {target_language}.

CRITICAL OUTPUT RULES:
1. Return ONLY the translated text.
2. Do NOT include any conversational filler, prefixes, or introductions like "Here is the translation".
3. Just give me the raw translated string.

STYLE GUIDELINES:
- {BRAND_VOICE}
- Do not sound like a machine translator. Use evocative language (e.g., "warmth", "texture", "organic").

Text to translate:
"{text}\""""

        try:
            response = await self._ai.chat(message=prompt, max_tokens=2048)
        except Exception as e:
            logger.error(f"Translation error: {e}")
            return text

        return response.strip() or text
