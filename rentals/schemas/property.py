"""Property Pydantic schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class PropertyMediaBase(BaseModel):
    """Base property media schema."""

    media_type: str
    media_url: str
    description: str = ""


class PropertyMediaCreate(PropertyMediaBase):
    """Schema for attaching a media item to an existing property."""

    property_id: int
    upload_date: datetime | None = None


class PropertyMediaUpdate(BaseModel):
    """Schema for updating a media item."""

    media_type: str | None = None
    media_url: str | None = None
    description: str | None = None


class PropertyMediaResponse(PropertyMediaBase):
    """Schema for property media response."""

    id: int
    property_id: int
    upload_date: datetime

    model_config = {"from_attributes": True}


class PropertyBase(BaseModel):
    """Base property schema."""

    address: str
    city: str | None = None
    state: str | None = None
    type: str | None = None
    rooms: int | None = Field(default=None, ge=0)
    parking: int | None = Field(default=None, ge=0)
    square_meters: float | None = Field(default=None, ge=0)
    tier: int | None = None
    bathrooms: int | None = Field(default=None, ge=0)
    age: int | None = Field(default=None, ge=0)
    floors: int | None = Field(default=None, ge=0)
    description: str | None = None
    rent_price: Decimal | None = Field(default=None, ge=0)


class PropertyCreate(PropertyBase):
    """Schema for creating a new property with its initial media."""

    landlord_auth_id: str
    media: list[PropertyMediaBase] = []


class PropertyUpdate(BaseModel):
    """Schema for updating a property."""

    address: str | None = None
    city: str | None = None
    state: str | None = None
    type: str | None = None
    rooms: int | None = Field(default=None, ge=0)
    parking: int | None = Field(default=None, ge=0)
    square_meters: float | None = Field(default=None, ge=0)
    tier: int | None = None
    bathrooms: int | None = Field(default=None, ge=0)
    age: int | None = Field(default=None, ge=0)
    floors: int | None = Field(default=None, ge=0)
    description: str | None = None
    rent_price: Decimal | None = Field(default=None, ge=0)
    is_available: bool | None = None


class PropertyResponse(PropertyBase):
    """Schema for property response."""

    id: int
    landlord_auth_id: str
    is_available: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class PropertyWithMediaResponse(PropertyResponse):
    """Property together with its media items."""

    media: list[PropertyMediaResponse]


class PropertySearch(BaseModel):
    """Filters for searching properties.

    Numeric fields and availability match exactly; text fields match as a
    case-insensitive substring.
    """

    address: str | None = None
    city: str | None = None
    state: str | None = None
    type: str | None = None
    description: str | None = None
    rooms: int | None = None
    parking: int | None = None
    square_meters: float | None = None
    tier: int | None = None
    bathrooms: int | None = None
    age: int | None = None
    floors: int | None = None
    is_available: bool | None = None


class PropertyCreated(BaseModel):
    """Created property with its media."""

    message: str
    property: PropertyWithMediaResponse
