"""Tests for the translation loading overlay."""

import asyncio
import pytest

from aura.services.translation.language_provider import LanguageProvider
from aura.services.translation.loader import TranslationLoader


FADE_IN = 0.01
FADE_OUT = 0.02


@pytest.fixture
def provider(translator):
    return LanguageProvider(translator, debounce_seconds=0.01, language="French")


@pytest.fixture
def loader(provider):
    return TranslationLoader(provider, fade_in_seconds=FADE_IN, fade_out_seconds=FADE_OUT)


class TestTranslationLoader:

    def test_unmounted_initially(self, loader):
        assert loader.overlay() is None

    @pytest.mark.asyncio
    async def test_mounts_then_fades_in(self, loader):
        loader.update(True)

        assert loader.mounted is True
        assert loader.overlay() == {
            "visible": False,
            "language": "French",
            "message": "Translating to French...",
        }

        await asyncio.sleep(FADE_IN * 3)
        assert loader.overlay()["visible"] is True

    @pytest.mark.asyncio
    async def test_hides_then_unmounts(self, loader):
        loader.update(True)
        await asyncio.sleep(FADE_IN * 3)

        loader.update(False)
        assert loader.visible is False
        assert loader.mounted is True

        await asyncio.sleep(FADE_OUT * 3)
        assert loader.overlay() is None

    @pytest.mark.asyncio
    async def test_restart_during_fade_out_keeps_overlay(self, loader):
        loader.update(True)
        await asyncio.sleep(FADE_IN * 3)
        loader.update(False)

        loader.update(True)
        await asyncio.sleep(FADE_OUT * 3)

        assert loader.mounted is True
        assert loader.visible is True

    @pytest.mark.asyncio
    async def test_follows_provider_flag(self, provider, loader):
        provider.translate("Shop")
        assert loader.mounted is True

        await provider.debouncer.drain()
        assert loader.visible is False

        await asyncio.sleep(FADE_OUT * 3)
        assert loader.overlay() is None
        await loader.close()
