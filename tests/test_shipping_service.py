"""Tests for postal-code lookup and shipping estimation."""

import pytest

from aura.schemas.checkout import LocationSuggestion
from aura.services.shipping.shipping_service import ShippingService


def _location(i):
    return {"zip": "98121", "city": f"City {i}", "country": "Italy", "region": ""}


class TestLookupZipLocation:

    @pytest.mark.asyncio
    async def test_returns_suggestions(self, mock_ai):
        mock_ai.chat_json.return_value = [
            {"zip": "98121", "city": "Seattle", "country": "USA", "region": "WA"},
            {"zip": "98121", "city": "Messina", "country": "Italy", "region": "Sicily"},
        ]
        service = ShippingService(mock_ai)

        result = await service.lookup_zip_location("98121")

        assert [s.city for s in result] == ["Seattle", "Messina"]
        assert all(isinstance(s, LocationSuggestion) for s in result)
        assert '"98121"' in mock_ai.chat_json.call_args.kwargs["message"]

    @pytest.mark.asyncio
    async def test_truncates_to_max_suggestions(self, mock_ai):
        mock_ai.chat_json.return_value = [_location(i) for i in range(8)]
        service = ShippingService(mock_ai, max_suggestions=5)

        result = await service.lookup_zip_location("98121")

        assert len(result) == 5

    @pytest.mark.asyncio
    async def test_missing_region_defaults_to_empty(self, mock_ai):
        mock_ai.chat_json.return_value = [{"zip": "00184", "city": "Rome", "country": "Italy"}]
        service = ShippingService(mock_ai)

        result = await service.lookup_zip_location("00184")

        assert result[0].region == ""

    @pytest.mark.asyncio
    async def test_bad_shape_returns_empty(self, mock_ai):
        mock_ai.chat_json.return_value = {"city": "Seattle"}
        service = ShippingService(mock_ai)

        assert await service.lookup_zip_location("98121") == []

    @pytest.mark.asyncio
    async def test_provider_error_returns_empty(self, mock_ai):
        mock_ai.chat_json.side_effect = RuntimeError("connection reset")
        service = ShippingService(mock_ai)

        assert await service.lookup_zip_location("98121") == []

    @pytest.mark.asyncio
    async def test_no_provider_returns_empty(self):
        assert await ShippingService(None).lookup_zip_location("98121") == []


class TestCalculateShippingEstimate:

    @pytest.mark.asyncio
    async def test_returns_estimate(self, mock_ai):
        mock_ai.chat_json.return_value = {
            "cost": 89.5,
            "city": "Messina, Italy",
            "distance": "10500 km",
            "currency": "EUR",
            "exchangeRate": 0.92,
        }
        service = ShippingService(mock_ai, origin="Cupertino, CA, USA")

        estimate = await service.calculate_shipping_estimate("98121", "Italy", "Messina")

        assert estimate.cost == 89.5
        assert estimate.currency == "EUR"
        prompt = mock_ai.chat_json.call_args.kwargs["message"]
        assert 'Destination: "Messina, 98121, Italy"' in prompt
        assert "Origin: Cupertino, CA, USA." in prompt
        assert "$25.00 customs fee" in prompt

    @pytest.mark.asyncio
    async def test_without_city(self, mock_ai):
        mock_ai.chat_json.return_value = {
            "cost": 20.0,
            "city": "Seattle, WA",
            "distance": "800 miles",
            "currency": "USD",
            "exchangeRate": 1,
        }
        service = ShippingService(mock_ai)

        await service.calculate_shipping_estimate("98121", "USA")

        assert 'Destination: "98121, USA"' in mock_ai.chat_json.call_args.kwargs["message"]

    @pytest.mark.asyncio
    async def test_negative_cost_rejected(self, mock_ai):
        mock_ai.chat_json.return_value = {
            "cost": -5,
            "city": "Seattle, WA",
            "distance": "800 miles",
            "currency": "USD",
            "exchangeRate": 1,
        }
        service = ShippingService(mock_ai)

        assert await service.calculate_shipping_estimate("98121", "USA", "Seattle") is None

    @pytest.mark.asyncio
    async def test_provider_error_returns_none(self, mock_ai):
        mock_ai.chat_json.side_effect = RuntimeError("boom")
        service = ShippingService(mock_ai)

        assert await service.calculate_shipping_estimate("98121", "USA", "Seattle") is None

    @pytest.mark.asyncio
    async def test_no_provider_returns_none(self):
        assert await ShippingService(None).calculate_shipping_estimate("98121", "USA") is None
