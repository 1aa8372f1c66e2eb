"""Shared test fixtures for Aura backend tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from common.ai.base import AIProvider
from aura.schemas.checkout import LocationSuggestion, ShippingEstimate
from aura.services.catalog.products import PRODUCTS


@pytest.fixture
def mock_ai():
    ai = MagicMock(spec=AIProvider)
    ai.chat = AsyncMock(return_value="")
    ai.chat_json = AsyncMock()
    ai.chat_with_tools = AsyncMock()
    ai.submit_tool_result = AsyncMock()
    return ai


def make_translator(table=None, fail=False):
    """
    Stand-in for TranslationService.translate_batch.

    Answers from table keyed by (language, text), else "<language>:<text>".
    """
    table = table or {}

    async def _translate_batch(texts, target_language):
        if fail:
            return None
        return [table.get((target_language, t), f"{target_language}:{t}") for t in texts]

    translator = MagicMock()
    translator.translate_batch = AsyncMock(side_effect=_translate_batch)
    return translator


@pytest.fixture
def translator():
    return make_translator({
        ("French", "Shop"): "Boutique",
        ("French", "About"): "À propos",
    })


@pytest.fixture
def failing_translator():
    return make_translator(fail=True)


@pytest.fixture
def mock_shipping_service():
    service = MagicMock()
    service.lookup_zip_location = AsyncMock(return_value=[])
    service.calculate_shipping_estimate = AsyncMock(return_value=None)
    return service


@pytest.fixture
def messina():
    return LocationSuggestion(zip="98121", city="Messina", country="Italy", region="Sicily")


@pytest.fixture
def seattle():
    return LocationSuggestion(zip="98121", city="Seattle", country="USA", region="WA")


@pytest.fixture
def euro_estimate():
    return ShippingEstimate(
        cost=68.5,
        city="Messina, Italy",
        distance="10500 km",
        currency="EUR",
        exchangeRate=0.9,
    )


@pytest.fixture
def products():
    return list(PRODUCTS)


@pytest.fixture
def translator_factory():
    return make_translator
