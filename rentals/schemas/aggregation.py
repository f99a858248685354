"""Schemas for the composite landlord and applicant views."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from rentals.schemas.tenant import TenantResponse


class ActiveTenant(TenantResponse):
    """Tenant holding an active contract, with the rent and the property address."""

    monthly_rent: Decimal
    current_property: str


class ActiveTenantsResponse(BaseModel):
    """Active tenants across all properties of one landlord."""

    landlord_id: str
    tenants: list[ActiveTenant]


class Candidate(BaseModel):
    """Application ranked for a property, with the applicant's profile."""

    id: int
    property_id: int
    tenant_auth_id: str | None
    status: str
    score: float
    personal_description: str | None
    created_at: datetime
    tenant: TenantResponse | None

    model_config = {"from_attributes": True}


class PropertyCandidates(BaseModel):
    """Summary of an available property and its top-scoring candidates."""

    id: int
    media: str | None
    address: str
    rooms: int | None
    square_meters: float | None
    total_applications: int
    rent_price: Decimal | None
    bathrooms: int | None
    candidates: list[Candidate]


class AgeGroupCount(BaseModel):
    """Number of applicants in one age bucket."""

    group: str
    count: int


class IndustryCount(BaseModel):
    """Number of applicants working in one industry."""

    industry: str
    count: int


class Demographics(BaseModel):
    """Age and industry breakdown of a set of applicants."""

    age_groups: list[AgeGroupCount]
    industries: list[IndustryCount]


class SubscriptionRequest(BaseModel):
    """Request for a landlord's monthly platform fee."""

    landlord_auth_id: str | None = None


class SubscriptionAmount(BaseModel):
    """Monthly platform fee owed by a landlord."""

    amount: Decimal
