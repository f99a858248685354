"""Property service for business logic."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session, selectinload

from rentals.core.exceptions import NotFoundError
from rentals.models.contract import Contract
from rentals.models.landlord import Landlord
from rentals.models.property import Property, PropertyMedia
from rentals.schemas.property import PropertyCreate, PropertySearch, PropertyUpdate
from rentals.services.queries import active_contract_clause

logger = logging.getLogger(__name__)

TEXT_SEARCH_FIELDS = ("address", "city", "state", "type", "description")


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def create_property(db: Session, property_data: PropertyCreate) -> Property:
    """Create a property along with its initial media items."""
    landlord = (
        db.query(Landlord).filter(Landlord.auth_id == property_data.landlord_auth_id).first()
    )
    if not landlord:
        raise NotFoundError(f"Landlord with ID {property_data.landlord_auth_id} not found")

    db_property = Property(**property_data.model_dump(exclude={"media"}))
    db.add(db_property)
    db.flush()  # Get property.id

    uploaded_at = datetime.now(UTC)
    for item in property_data.media:
        db.add(
            PropertyMedia(
                property_id=db_property.id,
                media_type=item.media_type,
                media_url=item.media_url,
                description=item.description,
                upload_date=uploaded_at,
            )
        )

    db.commit()
    db.refresh(db_property)
    logger.info("Created property %d for landlord %s", db_property.id, landlord.auth_id)
    return db_property


def get_property(db: Session, property_id: int) -> Property:
    """Get a property by ID."""
    db_property = db.query(Property).filter(Property.id == property_id).first()
    if not db_property:
        raise NotFoundError(f"Property with ID {property_id} not found")
    return db_property


def get_property_with_active_contract(
    db: Session,
    property_id: int,
) -> tuple[Property, Contract | None]:
    """Get a property and the contract currently in force on it, if any."""
    db_property = get_property(db, property_id)
    contract = (
        db.query(Contract)
        .filter(Contract.property_id == property_id, active_contract_clause())
        .options(selectinload(Contract.tenant))
        .order_by(Contract.id)
        .first()
    )
    return db_property, contract


def get_properties(db: Session, skip: int = 0, limit: int = 100) -> list[Property]:
    """Get all properties with pagination."""
    properties = db.query(Property).order_by(Property.id).offset(skip).limit(limit).all()
    if not properties:
        raise NotFoundError("No properties found")
    return properties


def get_properties_for_landlord(
    db: Session,
    landlord_auth_id: str,
) -> list[tuple[Property, Contract | None]]:
    """Get all properties owned by a landlord with their media and active contract."""
    properties = (
        db.query(Property)
        .filter(Property.landlord_auth_id == landlord_auth_id)
        .options(selectinload(Property.media))
        .order_by(Property.id)
        .all()
    )
    if not properties:
        raise NotFoundError("No properties found")

    active_contracts = (
        db.query(Contract)
        .filter(
            Contract.property_id.in_([p.id for p in properties]),
            active_contract_clause(),
        )
        .options(selectinload(Contract.tenant))
        .order_by(Contract.id)
        .all()
    )
    contract_by_property: dict[int, Contract] = {}
    for contract in active_contracts:
        contract_by_property.setdefault(contract.property_id, contract)
    return [(p, contract_by_property.get(p.id)) for p in properties]


def get_available_properties(db: Session) -> list[Property]:
    """Get all properties open for applications, with their media."""
    properties = (
        db.query(Property)
        .filter(Property.is_available.is_(True))
        .options(selectinload(Property.media))
        .order_by(Property.id)
        .all()
    )
    if not properties:
        raise NotFoundError("No properties found")
    return properties


def search_properties(db: Session, filters: PropertySearch) -> list[tuple[Property, list[PropertyMedia]]]:
    """Search properties, newest first, each with its latest media item.

    Text filters match a case-insensitive substring; all other filters match
    exactly.
    """
    criteria = filters.model_dump(exclude_none=True)
    query = db.query(Property)
    for field, value in criteria.items():
        column = getattr(Property, field)
        if field in TEXT_SEARCH_FIELDS:
            query = query.filter(column.ilike(f"%{_escape_like(value)}%", escape="\\"))
        else:
            query = query.filter(column == value)

    properties = (
        query.options(selectinload(Property.media))
        .order_by(Property.created_at.desc(), Property.id.desc())
        .all()
    )
    if not properties:
        raise NotFoundError("No properties found")

    result = []
    for prop in properties:
        latest = sorted(prop.media, key=lambda m: (m.upload_date, m.id), reverse=True)[:1]
        result.append((prop, latest))
    return result


def update_property(
    db: Session,
    property_id: int,
    property_data: PropertyUpdate,
) -> Property:
    """Update a property."""
    db_property = get_property(db, property_id)

    update_data = property_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_property, field, value)

    db.commit()
    db.refresh(db_property)
    return db_property


def delete_property(db: Session, property_id: int) -> None:
    """Delete a property."""
    db_property = get_property(db, property_id)
    db.delete(db_property)
    db.commit()
    logger.info("Deleted property %d", property_id)
