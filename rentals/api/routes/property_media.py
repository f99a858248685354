"""Property media API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.schemas.common import Message
from rentals.schemas.property import (
    PropertyMediaCreate,
    PropertyMediaResponse,
    PropertyMediaUpdate,
)
from rentals.services import property_media as media_service

router = APIRouter(prefix="/property-media", tags=["property media"])


@router.post("/", response_model=PropertyMediaResponse, status_code=status.HTTP_201_CREATED)
def create_media(
    media_data: PropertyMediaCreate,
    db: Session = Depends(get_db),
) -> PropertyMediaResponse:
    """Attach a media item to a property."""
    return PropertyMediaResponse.model_validate(media_service.create_media(db, media_data))


@router.get("/", response_model=list[PropertyMediaResponse])
def list_media(db: Session = Depends(get_db)) -> list[PropertyMediaResponse]:
    """List all media items."""
    return [PropertyMediaResponse.model_validate(m) for m in media_service.get_all_media(db)]


@router.get("/{media_id}", response_model=PropertyMediaResponse)
def get_media(media_id: int, db: Session = Depends(get_db)) -> PropertyMediaResponse:
    """Get a media item by ID."""
    return PropertyMediaResponse.model_validate(media_service.get_media(db, media_id))


@router.patch("/{media_id}", response_model=PropertyMediaResponse)
def update_media(
    media_id: int,
    media_data: PropertyMediaUpdate,
    db: Session = Depends(get_db),
) -> PropertyMediaResponse:
    """Update a media item."""
    return PropertyMediaResponse.model_validate(
        media_service.update_media(db, media_id, media_data)
    )


@router.delete("/{media_id}", response_model=Message)
def delete_media(media_id: int, db: Session = Depends(get_db)) -> Message:
    """Delete a media item."""
    media_service.delete_media(db, media_id)
    return Message(message="Property Media deleted successfully")
