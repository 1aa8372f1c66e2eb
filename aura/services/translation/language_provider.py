"""
Per-session language state with a stale-while-revalidate translation cache.

Lookups never block: a cache hit returns the translation, a miss returns
the original text and registers it as pending. A debounced background
flush sends every pending text for the current language in one batch and
merges the answers into the cache.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

from common.utils.debounce import Debouncer
from aura.services.translation.translation_service import TranslationService

logger = logging.getLogger(__name__)

ENGLISH = "English"
BRAND_NAME = "Aura"
SLOGAN = "quiet living"

_FLUSH_KEY = "translation-flush"


def is_protected(text: str) -> bool:
    """Brand name and slogan are never translated."""
    return text == BRAND_NAME or SLOGAN in text.lower()


@dataclass(frozen=True)
class LanguageState:
    """Read-only snapshot of a provider."""
    language: str
    is_translating: bool
    pending: Tuple[str, ...]
    cached: int


class LanguageProvider:
    """
    Current language, translation cache and pending set for one session.

    All mutation happens on the event loop thread; lookups are synchronous
    and the batch request runs as a debounced task.
    """

    def __init__(
        self,
        translator: TranslationService,
        debounce_seconds: float = 0.8,
        language: str = ENGLISH,
    ):
        """
        Args:
            translator: Batch translation backend
            debounce_seconds: Quiet interval after the last new registration
            language: Starting language
        """
        self._translator = translator
        self._language = language
        self._debouncer = Debouncer(debounce_seconds)

        # (language, source text) -> translated text
        self._cache: Dict[Tuple[str, str], str] = {}
        # dicts keep registration order for the batch request
        self._pending: Dict[str, None] = {}
        self._seen: Dict[str, None] = {}
        self._in_flight: Set[Tuple[str, str]] = set()
        self._failed: Set[str] = set()

        self._is_translating = False
        self._listeners: List[Callable[[bool], None]] = []

    @property
    def language(self) -> str:
        return self._language

    @property
    def is_translating(self) -> bool:
        return self._is_translating

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    def subscribe(self, listener: Callable[[bool], None]) -> None:
        """Call listener with the new value whenever is_translating changes."""
        self._listeners.append(listener)

    def state(self) -> LanguageState:
        return LanguageState(
            language=self._language,
            is_translating=self._is_translating,
            pending=tuple(self._pending),
            cached=len(self._cache),
        )

    def cached(self, text: str, language: str) -> Optional[str]:
        return self._cache.get((language, text))

    def translate(self, text: str) -> str:
        """
        Translation of text for the current language, or text itself.

        A miss registers text as pending (once) and re-arms the flush timer.
        """
        if not text or is_protected(text):
            return text

        self._seen[text] = None

        if self._language == ENGLISH:
            return text

        key = (self._language, text)
        hit = self._cache.get(key)
        if hit is not None:
            return hit

        if text not in self._pending and text not in self._failed:
            self._pending[text] = None
            self._set_translating(True)
            self._debouncer.schedule(_FLUSH_KEY, self.flush)

        return text

    def translate_many(self, texts: Iterable[str]) -> List[str]:
        return [self.translate(text) for text in texts]

    def set_language(self, language: str) -> None:
        """
        Switch language.

        Pending work for the old language is dropped and every text looked
        up so far is re-checked against the cache for the new one.
        """
        if language == self._language:
            return

        logger.debug(f"Language switch: {self._language} -> {language}")
        self._language = language
        self._pending.clear()
        self._failed.clear()

        if language == ENGLISH:
            self._debouncer.cancel(_FLUSH_KEY)
            self._set_translating(False)
            return

        for text in self._seen:
            if (language, text) not in self._cache:
                self._pending[text] = None

        # Settles back to False on flush when nothing is missing
        self._set_translating(True)
        self._debouncer.schedule(_FLUSH_KEY, self.flush)

    async def flush(self) -> None:
        """Send one batch request for everything pending in the current language."""
        language = self._language
        if language == ENGLISH:
            self._set_translating(False)
            return

        needed = [
            text for text in self._pending
            if (language, text) not in self._cache and (language, text) not in self._in_flight
        ]

        if not needed:
            for text in list(self._pending):
                if (language, text) in self._cache:
                    del self._pending[text]
            if not self._pending:
                self._set_translating(False)
            return

        self._in_flight.update((language, text) for text in needed)
        try:
            results = await self._translator.translate_batch(needed, language)
        except Exception as e:
            logger.error(f"Translation failed: {e}")
            results = None
        finally:
            self._in_flight.difference_update((language, text) for text in needed)

        if results is not None:
            for text, translated in zip(needed, results):
                if translated:
                    self._cache[(language, text)] = translated
            logger.debug(f"Cached {len(results)} {language} translations")

        # A language switch during the request already reset pending state
        if self._language != language:
            return

        for text in needed:
            self._pending.pop(text, None)
            if (language, text) not in self._cache:
                self._failed.add(text)

        if not self._pending:
            self._set_translating(False)

    async def close(self) -> None:
        await self._debouncer.close()

    def _set_translating(self, value: bool) -> None:
        if value == self._is_translating:
            return
        self._is_translating = value
        for listener in self._listeners:
            listener(value)
