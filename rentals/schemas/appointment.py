"""Appointment Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from rentals.schemas.landlord import LandlordResponse
from rentals.schemas.property import PropertyResponse
from rentals.schemas.tenant import TenantResponse


class AppointmentCreate(BaseModel):
    """Schema for scheduling an appointment."""

    landlord_auth_id: str
    tenant_auth_id: str
    property_id: int
    title: str
    date: datetime
    time: str | None = None
    description: str | None = None


class AppointmentUpdate(BaseModel):
    """Schema for updating an appointment."""

    title: str | None = None
    date: datetime | None = None
    time: str | None = None
    description: str | None = None


class AppointmentResponse(BaseModel):
    """Schema for appointment response."""

    id: int
    landlord_auth_id: str
    tenant_auth_id: str
    property_id: int
    title: str
    date: datetime
    time: str | None
    description: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class AppointmentDetailResponse(AppointmentResponse):
    """Appointment with the landlord, tenant and property it involves."""

    landlord: LandlordResponse
    tenant: TenantResponse
    parent_property: PropertyResponse = Field(
        validation_alias=AliasChoices("parent_property", "property"),
        serialization_alias="property",
    )

    model_config = {"from_attributes": True}


class AppointmentMessageResponse(BaseModel):
    """Appointment wrapped with a confirmation message."""

    message: str
    appointment: AppointmentResponse
