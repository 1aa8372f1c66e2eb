"""
Pydantic models for checkout and shipping estimation.

Defines the structured answers requested from the AI provider and the
checkout state returned to the storefront.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


class LocationSuggestion(BaseModel):
    """A place that uses a given postal code."""
    zip: str
    city: str
    country: str
    region: str = Field(default="", description="State, Province, or Region")


class ShippingEstimate(BaseModel):
    """Shipping quote computed by the AI provider."""
    cost: float = Field(..., ge=0, description="Calculated shipping cost in USD")
    city: str = Field(..., description="City and Country/State of the zip code")
    distance: str = Field(..., description="Distance in local unit (e.g. '2500 miles' or '4000 km')")
    currency: str = Field(..., description="Local currency code (e.g. EUR, GBP, JPY)")
    exchangeRate: float = Field(..., gt=0, description="Exchange rate from USD to local currency (e.g. 0.92)")


class ZipInputRequest(BaseModel):
    """Current content of the postal code field."""
    zipCode: str = Field(default="", max_length=20)


class SelectLocationRequest(BaseModel):
    """A suggestion picked by the shopper."""
    location: LocationSuggestion


class ShippingDetailsResponse(BaseModel):
    city: str
    distance: str
    currency: Optional[str] = None
    exchangeRate: Optional[float] = None


class CheckoutResponse(BaseModel):
    """Checkout page state."""
    zipCode: str
    suggestions: List[LocationSuggestion]
    showSuggestions: bool
    selectedCountry: str
    isLookingUp: bool
    isCalculating: bool
    isShippingCalculated: bool
    shippingCost: float
    shippingDetails: Optional[ShippingDetailsResponse] = None
    currency: str
    exchangeRate: float
    subtotal: float
    total: float
    formattedSubtotal: str
    formattedShipping: str
    formattedTotal: str
