"""
FastAPI router for the checkout page.

Covers the postal-code field, location selection and the shipping quote.
There is no payment step.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from aura.dependencies import get_session
from aura.schemas.checkout import CheckoutResponse, SelectLocationRequest, ZipInputRequest
from aura.services.session.session_store import StorefrontSession

router = APIRouter(prefix="/sessions/{session_id}/checkout", tags=["checkout"])


def _checkout_response(session: StorefrontSession) -> CheckoutResponse:
    return CheckoutResponse(**session.checkout.to_dict(session.cart.subtotal))


@router.get("", response_model=CheckoutResponse)
async def get_checkout(
    session: Annotated[StorefrontSession, Depends(get_session)],
):
    return _checkout_response(session)


@router.post("/zip", response_model=CheckoutResponse)
async def change_zip(
    body: ZipInputRequest,
    session: Annotated[StorefrontSession, Depends(get_session)],
):
    """
    Update the postal-code field.

    Suggestions arrive after the debounce interval; poll GET /checkout.
    """
    session.checkout.change_zip(body.zipCode)
    return _checkout_response(session)


@router.post("/location", response_model=CheckoutResponse)
async def select_location(
    body: SelectLocationRequest,
    session: Annotated[StorefrontSession, Depends(get_session)],
):
    """Pick a suggested location and quote shipping to it."""
    await session.checkout.select_location(body.location)
    return _checkout_response(session)
