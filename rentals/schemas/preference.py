"""Landlord and tenant preference schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from rentals.schemas.landlord import LandlordSummary


class LandlordPreferenceBase(BaseModel):
    """Base landlord preference schema."""

    preferred_industry: str | None = None
    min_age: int | None = Field(default=None, ge=18)
    max_age: int | None = Field(default=None, ge=18)
    min_score: float | None = None

    @model_validator(mode="after")
    def validate_age_range(self) -> "LandlordPreferenceBase":
        """Validate that the age range is not inverted."""
        if self.min_age is not None and self.max_age is not None and self.min_age > self.max_age:
            raise ValueError("min_age must not be greater than max_age")
        return self


class LandlordPreferenceCreate(LandlordPreferenceBase):
    """Schema for creating a landlord preference."""

    landlord_auth_id: str


class LandlordPreferenceUpdate(LandlordPreferenceBase):
    """Schema for updating a landlord preference."""


class LandlordPreferenceResponse(LandlordPreferenceBase):
    """Schema for landlord preference response."""

    id: int
    landlord_auth_id: str
    landlord: LandlordSummary

    model_config = {"from_attributes": True}


class TenantSummary(BaseModel):
    """Tenant name and email as embedded in preference responses."""

    first_name: str
    last_name: str
    email: str | None

    model_config = {"from_attributes": True}


class TenantPreferenceBase(BaseModel):
    """Base tenant preference schema."""

    city: str | None = None
    property_type: str | None = None
    max_rent: Decimal | None = Field(default=None, ge=0)
    min_rooms: int | None = Field(default=None, ge=0)


class TenantPreferenceCreate(TenantPreferenceBase):
    """Schema for creating a tenant preference."""

    tenant_auth_id: str


class TenantPreferenceUpdate(TenantPreferenceBase):
    """Schema for updating a tenant preference."""


class TenantPreferenceResponse(TenantPreferenceBase):
    """Schema for tenant preference response."""

    id: int
    tenant_auth_id: str
    tenant: TenantSummary

    model_config = {"from_attributes": True}


class LandlordPreferenceMessage(BaseModel):
    """Landlord preference wrapped with a confirmation message."""

    message: str
    preference: LandlordPreferenceResponse


class TenantPreferenceMessage(BaseModel):
    """Tenant preference wrapped with a confirmation message."""

    message: str
    preference: TenantPreferenceResponse
