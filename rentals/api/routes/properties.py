"""Property API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.schemas.common import Message
from rentals.schemas.contract import ActiveContractResponse, PropertyDetailResponse
from rentals.schemas.property import (
    PropertyCreate,
    PropertyCreated,
    PropertyMediaResponse,
    PropertyResponse,
    PropertySearch,
    PropertyUpdate,
    PropertyWithMediaResponse,
)
from rentals.services import property as property_service

router = APIRouter(prefix="/properties", tags=["properties"])


@router.post("/", response_model=PropertyCreated, status_code=status.HTTP_201_CREATED)
def create_property(
    property_data: PropertyCreate,
    db: Session = Depends(get_db),
) -> PropertyCreated:
    """Create a property with its initial media."""
    db_property = property_service.create_property(db, property_data)
    return PropertyCreated(
        message="Property created successfully",
        property=PropertyWithMediaResponse.model_validate(db_property),
    )


@router.get("/", response_model=list[PropertyResponse])
def list_properties(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
) -> list[PropertyResponse]:
    """List all properties."""
    properties = property_service.get_properties(db, skip, limit)
    return [PropertyResponse.model_validate(p) for p in properties]


@router.get("/available", response_model=list[PropertyWithMediaResponse])
def list_available_properties(db: Session = Depends(get_db)) -> list[PropertyWithMediaResponse]:
    """List properties open for applications, with all their media."""
    properties = property_service.get_available_properties(db)
    return [PropertyWithMediaResponse.model_validate(p) for p in properties]


@router.post("/search", response_model=list[PropertyWithMediaResponse])
def search_properties(
    filters: PropertySearch,
    db: Session = Depends(get_db),
) -> list[PropertyWithMediaResponse]:
    """Search properties, newest first, each with its latest media item."""
    results = property_service.search_properties(db, filters)
    return [
        PropertyWithMediaResponse(
            **PropertyResponse.model_validate(prop).model_dump(),
            media=[PropertyMediaResponse.model_validate(m) for m in latest],
        )
        for prop, latest in results
    ]


@router.get("/landlord/{landlord_auth_id}", response_model=list[PropertyDetailResponse])
def list_properties_for_landlord(
    landlord_auth_id: str,
    db: Session = Depends(get_db),
) -> list[PropertyDetailResponse]:
    """List a landlord's properties with media and active contract."""
    rows = property_service.get_properties_for_landlord(db, landlord_auth_id)
    return [
        PropertyDetailResponse(
            property=PropertyWithMediaResponse.model_validate(prop),
            contract=ActiveContractResponse.model_validate(contract) if contract else None,
        )
        for prop, contract in rows
    ]


@router.get("/{property_id}", response_model=PropertyDetailResponse)
def get_property(property_id: int, db: Session = Depends(get_db)) -> PropertyDetailResponse:
    """Get a property with its media and active contract."""
    db_property, contract = property_service.get_property_with_active_contract(db, property_id)
    return PropertyDetailResponse(
        property=PropertyWithMediaResponse.model_validate(db_property),
        contract=ActiveContractResponse.model_validate(contract) if contract else None,
    )


@router.patch("/{property_id}", response_model=PropertyResponse)
def update_property(
    property_id: int,
    property_data: PropertyUpdate,
    db: Session = Depends(get_db),
) -> PropertyResponse:
    """Update a property."""
    db_property = property_service.update_property(db, property_id, property_data)
    return PropertyResponse.model_validate(db_property)


@router.delete("/{property_id}", response_model=Message)
def delete_property(property_id: int, db: Session = Depends(get_db)) -> Message:
    """Delete a property."""
    property_service.delete_property(db, property_id)
    return Message(message="Property successfully deleted")
