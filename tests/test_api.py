"""Router tests against the FastAPI app with a mocked AI provider."""

import base64
import pytest
from fastapi.testclient import TestClient

from aura.config import Settings
from aura.dependencies import init_all_services


@pytest.fixture
def client(mock_ai):
    from api import app

    init_all_services(
        Settings(
            TRANSLATION_DEBOUNCE_SECONDS=0.01,
            ZIP_LOOKUP_DEBOUNCE_SECONDS=0.01,
            FAL_API_KEY=None,
        ),
        ai_provider=mock_ai,
    )
    app.state.services_ready = True

    with TestClient(app) as client:
        yield client


@pytest.fixture
def session_id(client):
    response = client.post("/api/sessions")
    assert response.status_code == 201
    return response.json()["sessionId"]


class TestHealthAndCatalog:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "ok"
        assert response.json()["data"]["aiEnabled"] is True

    def test_list_products(self, client):
        response = client.get("/api/products", params={"category": "Audio"})

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["p1", "p2"]

    def test_product_detail_with_sizes(self, client):
        response = client.get("/api/products/p3")

        assert response.status_code == 200
        assert response.json()["product"]["name"] == "Aura Band"
        assert response.json()["sizes"] == ["S", "M", "L"]

    def test_unknown_product(self, client):
        response = client.get("/api/products/p99")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "PRODUCT_NOT_FOUND"

    def test_related(self, client):
        response = client.get("/api/products/p1/related")

        assert [p["id"] for p in response.json()] == ["p2", "p3", "p4"]

    def test_translate_product(self, client, mock_ai):
        mock_ai.chat_json.return_value = {
            "translatedDescription": "Cuffie morbide",
            "translatedFeatures": ["Modalità silenziosa", "Batteria 40 ore", "Archetto in cotone"],
        }

        response = client.post("/api/products/p1/translate", json={"language": "Italian"})

        assert response.status_code == 200
        assert response.json()["translatedDescription"] == "Cuffie morbide"
        assert response.json()["productId"] == "p1"

    def test_translate_product_failure(self, client, mock_ai):
        mock_ai.chat_json.side_effect = RuntimeError("boom")

        response = client.post("/api/products/p1/translate", json={"language": "Italian"})

        assert response.status_code == 503
        assert response.json()["detail"]["code"] == "TRANSLATION_FAILED"


class TestSessionsAndCart:

    def test_unknown_session(self, client):
        response = client.get("/api/sessions/nope/cart")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "SESSION_NOT_FOUND"

    def test_add_and_remove(self, client, session_id):
        client.post(f"/api/sessions/{session_id}/cart", json={"productId": "p1"})
        response = client.post(f"/api/sessions/{session_id}/cart", json={"productId": "p2"})

        assert response.json()["count"] == 2
        assert response.json()["subtotal"] == 528.0

        response = client.delete(f"/api/sessions/{session_id}/cart/0")

        assert [p["id"] for p in response.json()["items"]] == ["p2"]

    def test_add_unknown_product(self, client, session_id):
        response = client.post(f"/api/sessions/{session_id}/cart", json={"productId": "p99"})

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "PRODUCT_NOT_FOUND"

    def test_remove_bad_index(self, client, session_id):
        response = client.delete(f"/api/sessions/{session_id}/cart/3")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "CART_ITEM_NOT_FOUND"

    def test_delete_session(self, client, session_id):
        assert client.delete(f"/api/sessions/{session_id}").status_code == 200
        assert client.get(f"/api/sessions/{session_id}/cart").status_code == 404


class TestI18n:

    def test_languages(self, client):
        response = client.get("/api/i18n/languages")

        codes = [lang["code"] for lang in response.json()["languages"]]
        assert codes[0] == "English"
        assert "French" in codes

    def test_unsupported_language(self, client, session_id):
        response = client.put(f"/api/sessions/{session_id}/i18n/language", json={"language": "Klingon"})

        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "UNSUPPORTED_LANGUAGE"

    def test_lookup_returns_source_text_while_translating(self, client, session_id, mock_ai):
        mock_ai.chat_json.return_value = ["Boutique", "À propos"]
        client.put(f"/api/sessions/{session_id}/i18n/language", json={"language": "French"})

        response = client.post(
            f"/api/sessions/{session_id}/i18n/lookup",
            json={"texts": ["Shop", "About", "Aura"]},
        )

        body = response.json()
        assert body["language"] == "French"
        assert body["translations"] == {"Shop": "Shop", "About": "About", "Aura": "Aura"}
        assert body["isTranslating"] is True

    def test_english_lookup_is_pass_through(self, client, session_id, mock_ai):
        response = client.post(f"/api/sessions/{session_id}/i18n/lookup", json={"texts": ["Shop"]})

        assert response.json()["translations"] == {"Shop": "Shop"}
        assert response.json()["isTranslating"] is False
        mock_ai.chat_json.assert_not_awaited()

    def test_state(self, client, session_id):
        response = client.get(f"/api/sessions/{session_id}/i18n")

        assert response.json() == {
            "language": "English",
            "isTranslating": False,
            "pending": [],
            "cached": 0,
            "overlay": None,
        }


class TestCheckout:

    def test_short_zip(self, client, session_id):
        response = client.post(f"/api/sessions/{session_id}/checkout/zip", json={"zipCode": "98"})

        assert response.json()["isLookingUp"] is False
        assert response.json()["suggestions"] == []

    def test_select_location_quotes_shipping(self, client, session_id, mock_ai):
        client.post(f"/api/sessions/{session_id}/cart", json={"productId": "p1"})
        mock_ai.chat_json.return_value = {
            "cost": 40.0,
            "city": "Messina, Italy",
            "distance": "10500 km",
            "currency": "EUR",
            "exchangeRate": 0.5,
        }

        response = client.post(
            f"/api/sessions/{session_id}/checkout/location",
            json={"location": {"zip": "98121", "city": "Messina", "country": "Italy", "region": "Sicily"}},
        )

        body = response.json()
        assert body["isShippingCalculated"] is True
        assert body["shippingCost"] == 40.0
        assert body["currency"] == "EUR"
        assert body["total"] == 389.0
        assert body["formattedTotal"] == "€194.50"

    def test_failed_quote_uses_fallback(self, client, session_id, mock_ai):
        mock_ai.chat_json.side_effect = RuntimeError("boom")

        response = client.post(
            f"/api/sessions/{session_id}/checkout/location",
            json={"location": {"zip": "10001", "city": "New York", "country": "USA"}},
        )

        assert response.json()["shippingCost"] == 25.0
        assert response.json()["isShippingCalculated"] is True
        assert response.json()["formattedShipping"] == "$25.00"


class TestConcierge:

    def test_chat(self, client, mock_ai):
        mock_ai.chat_with_tools.return_value = {"content": "Welcome to Aura.", "tool_calls": [], "messages": []}

        response = client.post(
            "/api/concierge/chat",
            json={"message": "Hi", "history": [{"role": "model", "text": "Hello"}], "productId": "p1"},
        )

        assert response.status_code == 200
        assert response.json() == {"text": "Welcome to Aura.", "imageBase64": None}

    def test_invalid_image(self, client):
        response = client.post("/api/concierge/chat", json={"message": "Hi", "imageBase64": "***"})

        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "INVALID_IMAGE"

    def test_image_forwarded(self, client, mock_ai):
        mock_ai.chat_with_tools.return_value = {"content": "A warm knit texture.", "tool_calls": [], "messages": []}
        encoded = base64.b64encode(b"\xff\xd8jpeg").decode("ascii")

        client.post("/api/concierge/chat", json={"message": "Describe this", "imageBase64": encoded})

        assert mock_ai.chat_with_tools.call_args.kwargs["image_base64"] == encoded
