"""Landlord and tenant preference services."""

from sqlalchemy.orm import Session, joinedload

from rentals.core.exceptions import NotFoundError
from rentals.models.preference import LandlordPreference, TenantPreference
from rentals.schemas.preference import (
    LandlordPreferenceCreate,
    LandlordPreferenceUpdate,
    TenantPreferenceCreate,
    TenantPreferenceUpdate,
)
from rentals.services.landlord import get_landlord
from rentals.services.tenant import get_tenant


def create_landlord_preference(
    db: Session,
    preference_data: LandlordPreferenceCreate,
) -> LandlordPreference:
    """Create a preference for a landlord."""
    get_landlord(db, preference_data.landlord_auth_id)
    preference = LandlordPreference(**preference_data.model_dump())
    db.add(preference)
    db.commit()
    db.refresh(preference)
    return preference


def get_landlord_preference(db: Session, preference_id: int) -> LandlordPreference:
    """Get a landlord preference with the landlord's name."""
    preference = (
        db.query(LandlordPreference)
        .filter(LandlordPreference.id == preference_id)
        .options(joinedload(LandlordPreference.landlord))
        .first()
    )
    if not preference:
        raise NotFoundError(f"Preference with ID {preference_id} not found")
    return preference


def get_landlord_preferences(db: Session, landlord_auth_id: str) -> list[LandlordPreference]:
    """Get all preferences of a landlord."""
    preferences = (
        db.query(LandlordPreference)
        .filter(LandlordPreference.landlord_auth_id == landlord_auth_id)
        .options(joinedload(LandlordPreference.landlord))
        .order_by(LandlordPreference.id)
        .all()
    )
    if not preferences:
        raise NotFoundError(f"Preferences for landlord with ID {landlord_auth_id} not found")
    return preferences


def update_landlord_preference(
    db: Session,
    preference_id: int,
    preference_data: LandlordPreferenceUpdate,
) -> LandlordPreference:
    """Update a landlord preference."""
    preference = get_landlord_preference(db, preference_id)
    for field, value in preference_data.model_dump(exclude_unset=True).items():
        setattr(preference, field, value)
    db.commit()
    db.refresh(preference)
    return preference


def delete_landlord_preference(db: Session, preference_id: int) -> None:
    """Delete a landlord preference."""
    preference = get_landlord_preference(db, preference_id)
    db.delete(preference)
    db.commit()


def create_tenant_preference(
    db: Session,
    preference_data: TenantPreferenceCreate,
) -> TenantPreference:
    """Create a preference for a tenant."""
    get_tenant(db, preference_data.tenant_auth_id)
    preference = TenantPreference(**preference_data.model_dump())
    db.add(preference)
    db.commit()
    db.refresh(preference)
    return preference


def get_tenant_preference(db: Session, preference_id: int) -> TenantPreference:
    """Get a tenant preference with the tenant's name and email."""
    preference = (
        db.query(TenantPreference)
        .filter(TenantPreference.id == preference_id)
        .options(joinedload(TenantPreference.tenant))
        .first()
    )
    if not preference:
        raise NotFoundError(f"Preference with ID {preference_id} not found")
    return preference


def get_tenant_preferences(db: Session, tenant_auth_id: str) -> list[TenantPreference]:
    """Get all preferences of a tenant."""
    preferences = (
        db.query(TenantPreference)
        .filter(TenantPreference.tenant_auth_id == tenant_auth_id)
        .options(joinedload(TenantPreference.tenant))
        .order_by(TenantPreference.id)
        .all()
    )
    if not preferences:
        raise NotFoundError(f"Preferences for tenant with ID {tenant_auth_id} not found")
    return preferences


def update_tenant_preference(
    db: Session,
    preference_id: int,
    preference_data: TenantPreferenceUpdate,
) -> TenantPreference:
    """Update a tenant preference."""
    preference = get_tenant_preference(db, preference_id)
    for field, value in preference_data.model_dump(exclude_unset=True).items():
        setattr(preference, field, value)
    db.commit()
    db.refresh(preference)
    return preference


def delete_tenant_preference(db: Session, preference_id: int) -> None:
    """Delete a tenant preference."""
    preference = get_tenant_preference(db, preference_id)
    db.delete(preference)
    db.commit()
