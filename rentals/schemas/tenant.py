"""Tenant Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from rentals.models.enums import Gender


class TenantBase(BaseModel):
    """Base tenant schema."""

    first_name: str
    last_name: str
    phone: str | None = None
    email: EmailStr | None = None
    industry: str | None = None


class TenantCreate(TenantBase):
    """Schema for creating a new tenant.

    Ages below 18 are rejected here so that demographic buckets only ever see
    adult applicants.
    """

    auth_id: str = Field(min_length=1)
    gender: Gender | None = None
    age: int | None = Field(default=None, ge=18, le=120)
    avatar: str | None = None


class TenantUpdate(BaseModel):
    """Schema for updating a tenant."""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    email: EmailStr | None = None
    gender: Gender | None = None
    age: int | None = Field(default=None, ge=18, le=120)
    industry: str | None = None
    avatar: str | None = None


class TenantResponse(TenantBase):
    """Schema for tenant response."""

    auth_id: str
    gender: str | None
    age: int | None
    avatar: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TenantContact(BaseModel):
    """Tenant name and email as embedded in contract listings."""

    name: str
    email: str | None


class TenantDeleted(BaseModel):
    """Confirmation of a deleted tenant with the removed record."""

    message: str
    deleted_tenant: TenantResponse
