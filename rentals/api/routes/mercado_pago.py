"""Mercado Pago checkout and account-linking routes."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from rentals.api.dependencies import get_payment_gateway
from rentals.core.config import settings
from rentals.core.database import get_db
from rentals.core.exceptions import RentalsError
from rentals.schemas.mercado_pago import PreferenceCreate, PreferenceCreated
from rentals.services import mercado_pago as mercado_pago_service
from rentals.services.mercado_pago import MercadoPagoClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mercado-pago", tags=["mercado pago"])


@router.post(
    "/create-preference",
    response_model=PreferenceCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_preference(
    data: PreferenceCreate,
    db: Session = Depends(get_db),
    gateway: MercadoPagoClient = Depends(get_payment_gateway),
) -> PreferenceCreated:
    """Open a Mercado Pago checkout for one month of rent."""
    init_point = mercado_pago_service.create_rent_checkout(db, gateway, data)
    return PreferenceCreated(
        message="Payment preference created successfully",
        init_point=init_point,
    )


@router.get("/callback")
def oauth_callback(
    code: str | None = None,
    state: str | None = None,
    db: Session = Depends(get_db),
    gateway: MercadoPagoClient = Depends(get_payment_gateway),
) -> RedirectResponse:
    """OAuth redirect target: link the landlord's Mercado Pago account.

    The browser is always sent back to the frontend, to the error page when
    linking fails.
    """
    try:
        mercado_pago_service.link_landlord_account(db, gateway, code, state)
    except RentalsError as exc:
        logger.warning("Linking Mercado Pago account for %s failed: %s", state, exc.detail)
        return RedirectResponse(f"{settings.FRONTEND_URL}/error", status_code=status.HTTP_302_FOUND)
    return RedirectResponse(
        f"{settings.FRONTEND_URL}/arrendador-dashboard/propiedades",
        status_code=status.HTTP_302_FOUND,
    )
