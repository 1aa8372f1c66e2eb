"""
Checkout state for one session.

Handles the postal-code field (debounced location lookup), location
selection, the shipping quote and display-currency conversion. Payment is
not part of this flow.
"""

import logging
from typing import Any, Dict, List, Optional

from common.utils.debounce import Debouncer
from aura.schemas.checkout import LocationSuggestion
from aura.services.shipping.shipping_service import ShippingService

logger = logging.getLogger(__name__)

_LOOKUP_KEY = "zip-lookup"

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "CA$",
    "AUD": "A$",
    "CNY": "CN¥",
    "INR": "₹",
    "KRW": "₩",
    "MXN": "MX$",
    "BRL": "R$",
}


def format_price(amount: float, currency: str = "USD") -> str:
    """Format an amount in en-US style with two decimals, e.g. "€1,234.50"."""
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    number = f"{abs(amount):,.2f}"
    sign = "-" if amount < 0 else ""
    if symbol:
        return f"{sign}{symbol}{number}"
    return f"{sign}{currency.upper()}\u00a0{number}"


class CheckoutSession:
    """
    Shipping estimation state behind the checkout page.

    Lookups are debounced per keystroke; a lookup that has already been
    sent is never cancelled, so a slow answer for an older input can
    still overwrite the suggestions.
    """

    def __init__(
        self,
        shipping_service: ShippingService,
        debounce_seconds: float = 0.8,
        min_zip_length: int = 3,
        fallback_cost: float = 25.0,
        fallback_currency: str = "USD",
    ):
        self._shipping = shipping_service
        self._debouncer = Debouncer(debounce_seconds)
        self._min_zip_length = min_zip_length
        self._fallback_cost = fallback_cost
        self._fallback_currency = fallback_currency

        self.zip_code = ""
        self.suggestions: List[LocationSuggestion] = []
        self.show_suggestions = False
        self.selected_country = ""

        self.shipping_cost = 0.0
        self.shipping_details: Optional[Dict[str, Any]] = None
        self.is_shipping_calculated = False
        self.is_calculating = False
        self.is_looking_up = False

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    @property
    def currency(self) -> str:
        if self.shipping_details and self.shipping_details.get("currency"):
            return self.shipping_details["currency"]
        return self._fallback_currency

    @property
    def exchange_rate(self) -> float:
        if self.shipping_details and self.shipping_details.get("exchangeRate"):
            return self.shipping_details["exchangeRate"]
        return 1.0

    def change_zip(self, value: str) -> None:
        """Handle an edit of the postal-code field."""
        self.zip_code = value
        self.is_shipping_calculated = False
        self.shipping_details = None
        self.selected_country = ""

        self._debouncer.cancel(_LOOKUP_KEY)

        if len(value) >= self._min_zip_length:
            self.is_looking_up = True
            self._debouncer.schedule(_LOOKUP_KEY, lambda: self._lookup(value))
        else:
            self.is_looking_up = False
            self.suggestions = []
            self.show_suggestions = False

    async def select_location(self, location: LocationSuggestion) -> None:
        """Use a suggestion as the destination and quote shipping for it."""
        self.zip_code = location.zip
        self.selected_country = location.country
        self.suggestions = []
        self.show_suggestions = False

        # Explicit city avoids ambiguity for codes shared across countries
        await self.calculate_shipping(location.zip, location.country, location.city)

    async def calculate_shipping(self, zip_code: str, country: str, city: str) -> None:
        """
        Quote shipping; falls back to the flat cost when no quote is available.

        Estimation is marked complete either way.
        """
        self.is_calculating = True
        self.shipping_details = None

        try:
            result = await self._shipping.calculate_shipping_estimate(zip_code, country, city)

            if result:
                self.shipping_cost = result.cost
                self.shipping_details = {
                    "city": result.city,
                    "distance": result.distance,
                    "currency": result.currency,
                    "exchangeRate": result.exchangeRate,
                }
            else:
                self.shipping_cost = self._fallback_cost
            self.is_shipping_calculated = True
        except Exception as e:
            logger.error(f"Shipping calculation failed for {zip_code}: {e}")
            self.shipping_cost = self._fallback_cost
            self.is_shipping_calculated = True
        finally:
            self.is_calculating = False

    def format_price(self, amount_usd: float) -> str:
        """Format a USD amount in the active display currency."""
        return format_price(amount_usd * self.exchange_rate, self.currency)

    def total(self, subtotal: float) -> float:
        return subtotal + (self.shipping_cost if self.is_shipping_calculated else 0.0)

    def shipping_label(self) -> str:
        if self.is_calculating:
            return "Calculating..."
        if not self.is_shipping_calculated:
            return "Pending address"
        if self.shipping_cost == 0:
            return "Free"
        return self.format_price(self.shipping_cost)

    def to_dict(self, subtotal: float) -> Dict[str, Any]:
        """Checkout page state for the given cart subtotal (USD)."""
        total = self.total(subtotal)
        return {
            "zipCode": self.zip_code,
            "suggestions": list(self.suggestions),
            "showSuggestions": self.show_suggestions,
            "selectedCountry": self.selected_country,
            "isLookingUp": self.is_looking_up,
            "isCalculating": self.is_calculating,
            "isShippingCalculated": self.is_shipping_calculated,
            "shippingCost": self.shipping_cost,
            "shippingDetails": self.shipping_details,
            "currency": self.currency,
            "exchangeRate": self.exchange_rate,
            "subtotal": subtotal,
            "total": total,
            "formattedSubtotal": self.format_price(subtotal),
            "formattedShipping": self.shipping_label(),
            "formattedTotal": self.format_price(total),
        }

    async def close(self) -> None:
        await self._debouncer.close()

    async def _lookup(self, value: str) -> None:
        results = await self._shipping.lookup_zip_location(value)
        self.suggestions = results
        self.show_suggestions = True
        self.is_looking_up = False
