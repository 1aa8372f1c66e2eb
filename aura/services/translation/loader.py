"""
Translation loading overlay state.

Mirrors the provider's is_translating flag with two timed phases: the
overlay mounts at once and becomes visible after a short fade-in delay;
when translating stops it hides at once and unmounts after the fade-out.
"""

from typing import Any, Dict, Optional

from common.utils.debounce import Debouncer
from aura.services.translation.language_provider import LanguageProvider

_PHASE_KEY = "overlay-phase"


class TranslationLoader:
    """Overlay shown while a session's translations are loading."""

    def __init__(
        self,
        provider: LanguageProvider,
        fade_in_seconds: float = 0.05,
        fade_out_seconds: float = 0.5,
    ):
        self._provider = provider
        self._fade_in = fade_in_seconds
        self._fade_out = fade_out_seconds
        self._timers = Debouncer(fade_in_seconds)

        self.mounted = False
        self.visible = False

        provider.subscribe(self.update)

    def update(self, is_translating: bool) -> None:
        """React to a change of the provider's translating flag."""
        if is_translating:
            self.mounted = True
            self._timers.schedule(_PHASE_KEY, self._show, delay=self._fade_in)
        else:
            self.visible = False
            self._timers.schedule(_PHASE_KEY, self._unmount, delay=self._fade_out)

    def overlay(self) -> Optional[Dict[str, Any]]:
        """Overlay payload, or None when nothing should be rendered."""
        if not self.mounted:
            return None
        language = self._provider.language
        return {
            "visible": self.visible,
            "language": language,
            "message": f"Translating to {language}...",
        }

    async def close(self) -> None:
        await self._timers.close()

    async def _show(self) -> None:
        self.visible = True

    async def _unmount(self) -> None:
        self.mounted = False
