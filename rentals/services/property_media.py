"""Property media service for business logic."""

from datetime import UTC, datetime

from sqlalchemy.orm import Session

from rentals.core.exceptions import NotFoundError
from rentals.models.property import PropertyMedia
from rentals.schemas.property import PropertyMediaCreate, PropertyMediaUpdate
from rentals.services.property import get_property


def create_media(db: Session, media_data: PropertyMediaCreate) -> PropertyMedia:
    """Attach a media item to an existing property."""
    get_property(db, media_data.property_id)

    media = PropertyMedia(
        property_id=media_data.property_id,
        media_type=media_data.media_type,
        media_url=media_data.media_url,
        description=media_data.description,
        upload_date=media_data.upload_date or datetime.now(UTC),
    )
    db.add(media)
    db.commit()
    db.refresh(media)
    return media


def get_media(db: Session, media_id: int) -> PropertyMedia:
    """Get a media item by ID."""
    media = db.query(PropertyMedia).filter(PropertyMedia.id == media_id).first()
    if not media:
        raise NotFoundError(f"Media with ID {media_id} not found")
    return media


def get_all_media(db: Session) -> list[PropertyMedia]:
    """Get every media item."""
    items = db.query(PropertyMedia).order_by(PropertyMedia.id).all()
    if not items:
        raise NotFoundError("No property media found")
    return items


def update_media(db: Session, media_id: int, media_data: PropertyMediaUpdate) -> PropertyMedia:
    """Update a media item."""
    media = get_media(db, media_id)

    for field, value in media_data.model_dump(exclude_unset=True).items():
        setattr(media, field, value)

    db.commit()
    db.refresh(media)
    return media


def delete_media(db: Session, media_id: int) -> None:
    """Delete a media item."""
    media = get_media(db, media_id)
    db.delete(media)
    db.commit()
