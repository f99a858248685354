"""Landlord Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from rentals.models.enums import Gender


class LandlordBase(BaseModel):
    """Base landlord schema."""

    first_name: str
    last_name: str
    phone: str | None = None
    email: EmailStr | None = None


class LandlordCreate(LandlordBase):
    """Schema for creating a new landlord."""

    auth_id: str = Field(min_length=1)
    gender: Gender
    avg_rating: float = Field(default=0.0, ge=0)
    avatar: str | None = None


class LandlordUpdate(BaseModel):
    """Schema for updating a landlord."""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    email: EmailStr | None = None
    avg_rating: float | None = Field(default=None, ge=0)
    avatar: str | None = None


class LandlordResponse(LandlordBase):
    """Schema for landlord response. The Mercado Pago token is never exposed."""

    auth_id: str
    gender: str | None
    avg_rating: float
    avatar: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class LandlordSummary(BaseModel):
    """Landlord name as embedded in preference responses."""

    first_name: str
    last_name: str

    model_config = {"from_attributes": True}


class LandlordDeleted(BaseModel):
    """Confirmation of a deleted landlord with the removed record."""

    message: str
    deleted_landlord: LandlordResponse
