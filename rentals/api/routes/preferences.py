"""Landlord and tenant preference API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.schemas.common import Message
from rentals.schemas.preference import (
    LandlordPreferenceCreate,
    LandlordPreferenceMessage,
    LandlordPreferenceResponse,
    LandlordPreferenceUpdate,
    TenantPreferenceCreate,
    TenantPreferenceMessage,
    TenantPreferenceResponse,
    TenantPreferenceUpdate,
)
from rentals.services import preference as preference_service

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.post(
    "/landlord/",
    response_model=LandlordPreferenceMessage,
    status_code=status.HTTP_201_CREATED,
)
def create_landlord_preference(
    preference_data: LandlordPreferenceCreate,
    db: Session = Depends(get_db),
) -> LandlordPreferenceMessage:
    """Create a landlord preference."""
    preference = preference_service.create_landlord_preference(db, preference_data)
    return LandlordPreferenceMessage(
        message="Preference created successfully",
        preference=LandlordPreferenceResponse.model_validate(preference),
    )


@router.get("/landlord/by-landlord/{landlord_auth_id}", response_model=list[LandlordPreferenceResponse])
def list_landlord_preferences(
    landlord_auth_id: str,
    db: Session = Depends(get_db),
) -> list[LandlordPreferenceResponse]:
    """List a landlord's preferences."""
    preferences = preference_service.get_landlord_preferences(db, landlord_auth_id)
    return [LandlordPreferenceResponse.model_validate(p) for p in preferences]


@router.get("/landlord/{preference_id}", response_model=LandlordPreferenceResponse)
def get_landlord_preference(
    preference_id: int,
    db: Session = Depends(get_db),
) -> LandlordPreferenceResponse:
    """Get a landlord preference."""
    return LandlordPreferenceResponse.model_validate(
        preference_service.get_landlord_preference(db, preference_id)
    )


@router.patch("/landlord/{preference_id}", response_model=LandlordPreferenceMessage)
def update_landlord_preference(
    preference_id: int,
    preference_data: LandlordPreferenceUpdate,
    db: Session = Depends(get_db),
) -> LandlordPreferenceMessage:
    """Update a landlord preference."""
    preference = preference_service.update_landlord_preference(db, preference_id, preference_data)
    return LandlordPreferenceMessage(
        message="Preference updated successfully",
        preference=LandlordPreferenceResponse.model_validate(preference),
    )


@router.delete("/landlord/{preference_id}", response_model=Message)
def delete_landlord_preference(preference_id: int, db: Session = Depends(get_db)) -> Message:
    """Delete a landlord preference."""
    preference_service.delete_landlord_preference(db, preference_id)
    return Message(message="Preference deleted successfully")


@router.post(
    "/tenant/",
    response_model=TenantPreferenceMessage,
    status_code=status.HTTP_201_CREATED,
)
def create_tenant_preference(
    preference_data: TenantPreferenceCreate,
    db: Session = Depends(get_db),
) -> TenantPreferenceMessage:
    """Create a tenant preference."""
    preference = preference_service.create_tenant_preference(db, preference_data)
    return TenantPreferenceMessage(
        message="Preference created successfully",
        preference=TenantPreferenceResponse.model_validate(preference),
    )


@router.get("/tenant/by-tenant/{tenant_auth_id}", response_model=list[TenantPreferenceResponse])
def list_tenant_preferences(
    tenant_auth_id: str,
    db: Session = Depends(get_db),
) -> list[TenantPreferenceResponse]:
    """List a tenant's preferences."""
    preferences = preference_service.get_tenant_preferences(db, tenant_auth_id)
    return [TenantPreferenceResponse.model_validate(p) for p in preferences]


@router.get("/tenant/{preference_id}", response_model=TenantPreferenceResponse)
def get_tenant_preference(
    preference_id: int,
    db: Session = Depends(get_db),
) -> TenantPreferenceResponse:
    """Get a tenant preference."""
    return TenantPreferenceResponse.model_validate(
        preference_service.get_tenant_preference(db, preference_id)
    )


@router.patch("/tenant/{preference_id}", response_model=TenantPreferenceMessage)
def update_tenant_preference(
    preference_id: int,
    preference_data: TenantPreferenceUpdate,
    db: Session = Depends(get_db),
) -> TenantPreferenceMessage:
    """Update a tenant preference."""
    preference = preference_service.update_tenant_preference(db, preference_id, preference_data)
    return TenantPreferenceMessage(
        message="Preference updated successfully",
        preference=TenantPreferenceResponse.model_validate(preference),
    )


@router.delete("/tenant/{preference_id}", response_model=Message)
def delete_tenant_preference(preference_id: int, db: Session = Depends(get_db)) -> Message:
    """Delete a tenant preference."""
    preference_service.delete_tenant_preference(db, preference_id)
    return Message(message="Preference deleted successfully")
