"""Application Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from rentals.models.enums import ApplicationStatus
from rentals.schemas.aggregation import Demographics
from rentals.schemas.tenant import TenantResponse


class ApplicationMediaBase(BaseModel):
    """Base application media schema."""

    media_type: str
    media_url: str


class ApplicationMediaResponse(ApplicationMediaBase):
    """Schema for application media response."""

    id: int
    application_id: int

    model_config = {"from_attributes": True}


class ApplicationReferenceBase(BaseModel):
    """Base application reference schema."""

    name: str
    phone: str | None = None
    email: str | None = None
    relationship_type: str | None = None


class ApplicationReferenceResponse(ApplicationReferenceBase):
    """Schema for application reference response."""

    id: int
    application_id: int

    model_config = {"from_attributes": True}


class ApplicationCreate(BaseModel):
    """Schema for creating an application with its media and references."""

    property_id: int
    tenant_auth_id: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    score: float = 0.0
    personal_description: str | None = None
    media: list[ApplicationMediaBase] = []
    references: list[ApplicationReferenceBase] = []


class ApplicationUpdate(BaseModel):
    """Schema for updating an application."""

    status: ApplicationStatus | None = None
    score: float | None = None
    personal_description: str | None = None


class ApplicationStatusUpdate(BaseModel):
    """Schema for changing only the status of an application."""

    status: ApplicationStatus


class ApplicationResponse(BaseModel):
    """Schema for application response."""

    id: int
    property_id: int
    tenant_auth_id: str | None
    status: str
    score: float
    personal_description: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class ApplicationCreateResponse(BaseModel):
    """Created application with its media and references."""

    application: ApplicationResponse
    media: list[ApplicationMediaResponse]
    references: list[ApplicationReferenceResponse]


class ApplicationDetailResponse(ApplicationResponse):
    """Application with references, media and the applicant."""

    references: list[ApplicationReferenceResponse]
    media: list[ApplicationMediaResponse]
    tenant: TenantResponse | None


class ApplicationsByPropertyResponse(BaseModel):
    """Applications received by a property and their demographic breakdown."""

    applications: list[ApplicationDetailResponse]
    demographics: Demographics


class TenantApplicationResponse(BaseModel):
    """A tenant's application together with its references and documents."""

    application: ApplicationResponse
    references: list[ApplicationReferenceResponse]
    documents: list[ApplicationMediaResponse] = Field(default_factory=list)


class TenantApplicationsResponse(BaseModel):
    """Applications a tenant submitted during one year."""

    applications: list[TenantApplicationResponse]
