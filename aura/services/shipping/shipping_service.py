"""
Postal-code lookup and shipping estimation via the AI provider.

All distance, cost and exchange-rate figures come from the model; this
service only builds the prompts and checks the shape of the answers.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from common.ai.base import AIProvider
from aura.schemas.checkout import LocationSuggestion, ShippingEstimate

logger = logging.getLogger(__name__)


LOCATION_SCHEMA: Dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "zip": {"type": "string"},
            "city": {"type": "string"},
            "country": {"type": "string"},
            "region": {"type": "string", "description": "State, Province, or Region"},
        },
        "required": ["zip", "city", "country", "region"],
    },
}

SHIPPING_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "cost": {"type": "number", "description": "Calculated shipping cost in USD"},
        "city": {"type": "string", "description": "City and Country/State of the zip code"},
        "distance": {"type": "string", "description": "Distance in local unit (e.g. '2500 miles' or '4000 km')"},
        "currency": {"type": "string", "description": "Local currency code (e.g. EUR, GBP, JPY)"},
        "exchangeRate": {"type": "number", "description": "Exchange rate from USD to local currency (e.g. 0.92)"},
    },
    "required": ["cost", "city", "distance", "currency", "exchangeRate"],
}

_locations_adapter = TypeAdapter(List[LocationSuggestion])


class ShippingService:
    """
    Asks the AI provider for location candidates and shipping quotes.

    Failures never propagate: lookups return [] and estimates return None.
    """

    def __init__(
        self,
        ai_provider: Optional[AIProvider],
        origin: str = "Cupertino, CA, USA",
        max_suggestions: int = 5,
    ):
        """
        Initialize ShippingService.

        Args:
            ai_provider: AI provider, or None when no key is set
            origin: Where orders ship from
            max_suggestions: Upper bound on returned locations
        """
        self._ai = ai_provider
        self._origin = origin
        self._max_suggestions = max_suggestions

    async def lookup_zip_location(self, zip_code: str) -> List[LocationSuggestion]:
        """
        Find up to max_suggestions places worldwide that use zip_code.

        The same code can exist in several countries (98121 is both
        Seattle, USA and Messina, Italy), so the prompt asks for all of them.
        """
        if self._ai is None:
            return []

        prompt = f"""Identify up to {self._max_suggestions} distinct locations GLOBALLY that use the postal code "{zip_code}".

CRITICAL INSTRUCTIONS:
1. This code might exist in multiple countries simultaneously (e.g. 98121 is both Seattle, USA and Messina, Italy).
2. You MUST check specifically for matches in:
   - Italy (Codice di Avviamento Postale)
   - USA (Zip Code)
   - Europe
   - Asia
3. Do NOT just return the US location if valid international matches exist. Return BOTH.

Return formatted strictly as JSON."""

        try:
            result = await self._ai.chat_json(message=prompt, schema=LOCATION_SCHEMA)
            locations = _locations_adapter.validate_python(result)
        except (ValueError, ValidationError) as e:
            logger.warning(f"Zip lookup returned an unexpected shape: {e}")
            return []
        except Exception as e:
            logger.error(f"Zip Lookup Error: {e}")
            return []

        return locations[: self._max_suggestions]

    async def calculate_shipping_estimate(
        self,
        zip_code: str,
        country: str,
        city: Optional[str] = None,
    ) -> Optional[ShippingEstimate]:
        """
        Quote shipping from the origin to the given destination.

        Returns:
            ShippingEstimate, or None on any failure
        """
        if self._ai is None:
            return None

        destination = f"{city + ', ' if city else ''}{zip_code}, {country}"

        prompt = f"""I need to calculate shipping for an order.
Origin: {self._origin}.
Destination: "{destination}".

1. Use the provided city ("{city}") as the exact destination. Do not guess a different city.
2. Estimate the distance from {self._origin} to this location. Use the UNIT OF MEASUREMENT standard for the destination country (e.g. Kilometers for Italy/Europe, Miles for USA).
3. Calculate shipping cost using this formula:
   - Base fee: $12.00
   - Distance fee: $0.005 per mile (approximate conversion if km)
   - If international (outside US), add flat $25.00 customs fee.
   - Round to 2 decimal places (USD).
4. Identify the local currency used in the destination country (e.g. EUR, GBP).
5. Provide an estimated exchange rate from USD to that currency.

Return the result in JSON format."""

        try:
            result = await self._ai.chat_json(message=prompt, schema=SHIPPING_SCHEMA)
            return ShippingEstimate.model_validate(result)
        except (ValueError, ValidationError) as e:
            logger.warning(f"Shipping estimate returned an unexpected shape: {e}")
            return None
        except Exception as e:
            logger.error(f"Shipping Calculation Error: {e}")
            return None
