"""
In-memory storefront sessions.

A session owns everything that is per-shopper: language state with its
translation cache, the loading overlay, the cart and the checkout form.
Nothing is persisted; sessions live until deleted, evicted or shutdown.
"""

import asyncio
import logging
import secrets
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Optional, Set

from aura.services.cart.cart import Cart
from aura.services.checkout.checkout_session import CheckoutSession
from aura.services.shipping.shipping_service import ShippingService
from aura.services.translation.language_provider import ENGLISH, LanguageProvider
from aura.services.translation.loader import TranslationLoader
from aura.services.translation.translation_service import TranslationService

logger = logging.getLogger(__name__)


class StorefrontSession:
    """Per-shopper state."""

    def __init__(
        self,
        session_id: str,
        language: LanguageProvider,
        loader: TranslationLoader,
        cart: Cart,
        checkout: CheckoutSession,
    ):
        self.id = session_id
        self.language = language
        self.loader = loader
        self.cart = cart
        self.checkout = checkout
        self.created_at = datetime.now(timezone.utc)

    async def close(self) -> None:
        """Cancel the session's pending timers."""
        await self.language.close()
        await self.loader.close()
        await self.checkout.close()


class SessionStore:
    """
    Creates and looks up sessions by id.

    Holds at most max_sessions; creating one more evicts the oldest.
    Evicted and deleted sessions are closed in background tasks; create
    and delete return without waiting for requests still in flight.
    """

    def __init__(
        self,
        translator: TranslationService,
        shipping_service: ShippingService,
        max_sessions: int = 1000,
        default_language: str = ENGLISH,
        translation_debounce_seconds: float = 0.8,
        fade_in_seconds: float = 0.05,
        fade_out_seconds: float = 0.5,
        zip_debounce_seconds: float = 0.8,
        zip_min_length: int = 3,
        fallback_shipping_cost: float = 25.0,
        fallback_currency: str = "USD",
    ):
        self._translator = translator
        self._shipping = shipping_service
        self._max_sessions = max_sessions
        self._default_language = default_language
        self._translation_debounce = translation_debounce_seconds
        self._fade_in = fade_in_seconds
        self._fade_out = fade_out_seconds
        self._zip_debounce = zip_debounce_seconds
        self._zip_min_length = zip_min_length
        self._fallback_cost = fallback_shipping_cost
        self._fallback_currency = fallback_currency

        self._sessions: "OrderedDict[str, StorefrontSession]" = OrderedDict()
        self._closing: Set[asyncio.Task] = set()

    def __len__(self) -> int:
        return len(self._sessions)

    async def create_session(self) -> StorefrontSession:
        """
        Create a session with an empty cart in the default language.

        Returns:
            The new session
        """
        session_id = secrets.token_urlsafe(16)

        provider = LanguageProvider(
            translator=self._translator,
            debounce_seconds=self._translation_debounce,
            language=self._default_language,
        )
        session = StorefrontSession(
            session_id=session_id,
            language=provider,
            loader=TranslationLoader(
                provider,
                fade_in_seconds=self._fade_in,
                fade_out_seconds=self._fade_out,
            ),
            cart=Cart(),
            checkout=CheckoutSession(
                shipping_service=self._shipping,
                debounce_seconds=self._zip_debounce,
                min_zip_length=self._zip_min_length,
                fallback_cost=self._fallback_cost,
                fallback_currency=self._fallback_currency,
            ),
        )
        self._sessions[session_id] = session

        while len(self._sessions) > self._max_sessions:
            evicted_id, evicted = self._sessions.popitem(last=False)
            logger.info(f"Evicting session {evicted_id}")
            self._close_in_background(evicted)

        logger.info(f"Session created: {session_id}")
        return session

    def get_session(self, session_id: str) -> Optional[StorefrontSession]:
        return self._sessions.get(session_id)

    async def delete_session(self, session_id: str) -> bool:
        """
        Close and forget a session.

        Returns:
            True if the session existed
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        self._close_in_background(session)
        logger.info(f"Session deleted: {session_id}")
        return True

    async def close(self) -> None:
        """Close every session and wait for background closes to finish."""
        while self._sessions:
            _, session = self._sessions.popitem()
            await session.close()
        if self._closing:
            await asyncio.gather(*list(self._closing), return_exceptions=True)

    def _close_in_background(self, session: StorefrontSession) -> None:
        task = asyncio.get_running_loop().create_task(session.close())
        self._closing.add(task)
        task.add_done_callback(self._closing.discard)
