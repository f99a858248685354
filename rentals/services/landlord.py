"""Landlord service for business logic."""

import logging

from sqlalchemy.orm import Session

from rentals.core.exceptions import ConflictError, NotFoundError
from rentals.models.landlord import Landlord
from rentals.schemas.landlord import LandlordCreate, LandlordUpdate

logger = logging.getLogger(__name__)


def create_landlord(db: Session, landlord_data: LandlordCreate) -> Landlord:
    """Create a landlord profile for an authenticated user."""
    existing = db.query(Landlord).filter(Landlord.auth_id == landlord_data.auth_id).first()
    if existing:
        raise ConflictError("ID Already Taken")

    db_landlord = Landlord(
        auth_id=landlord_data.auth_id,
        first_name=landlord_data.first_name,
        last_name=landlord_data.last_name,
        phone=landlord_data.phone,
        email=landlord_data.email,
        gender=landlord_data.gender.value,
        avg_rating=landlord_data.avg_rating,
        avatar=landlord_data.avatar or "",
    )
    db.add(db_landlord)
    db.commit()
    db.refresh(db_landlord)
    logger.info("Created landlord %s", db_landlord.auth_id)
    return db_landlord


def get_landlord(db: Session, auth_id: str) -> Landlord:
    """Get a landlord by auth ID."""
    landlord = db.query(Landlord).filter(Landlord.auth_id == auth_id).first()
    if not landlord:
        raise NotFoundError(f"Landlord with ID {auth_id} not found")
    return landlord


def get_landlords(db: Session, skip: int = 0, limit: int = 100) -> list[Landlord]:
    """Get all landlords with pagination."""
    landlords = db.query(Landlord).order_by(Landlord.created_at).offset(skip).limit(limit).all()
    if not landlords:
        raise NotFoundError("No landlords found")
    return landlords


def update_landlord(db: Session, auth_id: str, landlord_data: LandlordUpdate) -> Landlord:
    """Update a landlord's profile."""
    landlord = get_landlord(db, auth_id)

    update_data = landlord_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(landlord, field, value)

    db.commit()
    db.refresh(landlord)
    return landlord


def delete_landlord(db: Session, auth_id: str) -> None:
    """Delete a landlord."""
    landlord = get_landlord(db, auth_id)
    db.delete(landlord)
    db.commit()
    logger.info("Deleted landlord %s", auth_id)


def ensure_mercadopago_linked(db: Session, auth_id: str) -> Landlord:
    """Check that a landlord has linked a Mercado Pago account."""
    landlord = get_landlord(db, auth_id)
    if landlord.mercadopago_access_token is None:
        raise NotFoundError("Mercado Pago Access Token not set")
    return landlord
