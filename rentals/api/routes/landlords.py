"""Landlord API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.schemas.aggregation import (
    ActiveTenantsResponse,
    PropertyCandidates,
    SubscriptionAmount,
    SubscriptionRequest,
)
from rentals.schemas.landlord import (
    LandlordCreate,
    LandlordDeleted,
    LandlordResponse,
    LandlordUpdate,
)
from rentals.schemas.mercado_pago import AccessTokenStatus
from rentals.services import aggregation
from rentals.services import landlord as landlord_service

router = APIRouter(prefix="/landlords", tags=["landlords"])


@router.post("/", response_model=LandlordResponse, status_code=status.HTTP_201_CREATED)
def create_landlord(
    landlord_data: LandlordCreate,
    db: Session = Depends(get_db),
) -> LandlordResponse:
    """Create a landlord profile."""
    landlord = landlord_service.create_landlord(db, landlord_data)
    return LandlordResponse.model_validate(landlord)


@router.get("/", response_model=list[LandlordResponse])
def list_landlords(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
) -> list[LandlordResponse]:
    """List all landlords."""
    landlords = landlord_service.get_landlords(db, skip, limit)
    return [LandlordResponse.model_validate(landlord) for landlord in landlords]


@router.post("/amount-payment-subscription", response_model=SubscriptionAmount)
def amount_payment_subscription(
    data: SubscriptionRequest,
    db: Session = Depends(get_db),
) -> SubscriptionAmount:
    """Monthly platform fee: a fixed rate per property the landlord owns."""
    amount = aggregation.compute_subscription_fee(db, data.landlord_auth_id)
    return SubscriptionAmount(amount=amount)


@router.get(
    "/mercado-pago/validate-access-token/{auth_id}",
    response_model=AccessTokenStatus,
)
def validate_mercadopago_access_token(
    auth_id: str,
    db: Session = Depends(get_db),
) -> AccessTokenStatus:
    """Check that the landlord has linked a Mercado Pago account."""
    landlord_service.ensure_mercadopago_linked(db, auth_id)
    return AccessTokenStatus(message="Mercado Pago Access Token is set")


@router.get("/{auth_id}", response_model=LandlordResponse)
def get_landlord(
    auth_id: str,
    db: Session = Depends(get_db),
) -> LandlordResponse:
    """Get a landlord by auth ID."""
    return LandlordResponse.model_validate(landlord_service.get_landlord(db, auth_id))


@router.patch("/{auth_id}", response_model=LandlordResponse)
def update_landlord(
    auth_id: str,
    landlord_data: LandlordUpdate,
    db: Session = Depends(get_db),
) -> LandlordResponse:
    """Update a landlord's profile."""
    landlord = landlord_service.update_landlord(db, auth_id, landlord_data)
    return LandlordResponse.model_validate(landlord)


@router.delete("/{auth_id}", response_model=LandlordDeleted)
def delete_landlord(
    auth_id: str,
    db: Session = Depends(get_db),
) -> LandlordDeleted:
    """Delete a landlord."""
    deleted = LandlordResponse.model_validate(landlord_service.get_landlord(db, auth_id))
    landlord_service.delete_landlord(db, auth_id)
    return LandlordDeleted(message="Landlord successfully deleted", deleted_landlord=deleted)


@router.get("/{auth_id}/tenants/active", response_model=ActiveTenantsResponse)
def list_active_tenants(
    auth_id: str,
    db: Session = Depends(get_db),
) -> ActiveTenantsResponse:
    """List tenants with an active contract on any of the landlord's properties."""
    tenants = aggregation.get_active_tenants(db, auth_id)
    return ActiveTenantsResponse(landlord_id=auth_id, tenants=tenants)


@router.get("/{auth_id}/candidates", response_model=list[PropertyCandidates])
def list_candidates(
    auth_id: str,
    db: Session = Depends(get_db),
) -> list[PropertyCandidates]:
    """Available properties of the landlord with their three best-scored applicants."""
    return aggregation.get_candidates_by_landlord(db, auth_id)
