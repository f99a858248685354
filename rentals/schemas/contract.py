"""Contract Pydantic schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, Field, model_validator

from rentals.models.enums import ContractStatus
from rentals.schemas.property import PropertyResponse, PropertyWithMediaResponse
from rentals.schemas.tenant import TenantContact, TenantResponse


class ContractDocumentBase(BaseModel):
    """Base contract document schema."""

    document_type: str
    document_url: str


class ContractDocumentResponse(ContractDocumentBase):
    """Schema for contract document response."""

    id: int
    contract_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ContractCreate(BaseModel):
    """Schema for creating a contract."""

    property_id: int
    tenant_auth_id: str
    start_date: datetime
    end_date: datetime
    monthly_rent: Decimal = Field(ge=0)
    documents: list[ContractDocumentBase] = []

    @model_validator(mode="after")
    def validate_dates(self) -> "ContractCreate":
        """Validate that the contract does not end before it starts."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ContractUpdate(BaseModel):
    """Schema for updating a contract."""

    start_date: datetime | None = None
    end_date: datetime | None = None
    monthly_rent: Decimal | None = Field(default=None, ge=0)
    status: ContractStatus | None = None


class ContractResponse(BaseModel):
    """Schema for contract response."""

    id: int
    property_id: int
    tenant_auth_id: str
    start_date: datetime
    end_date: datetime
    monthly_rent: Decimal
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ContractCreateResponse(BaseModel):
    """Created contract and its documents."""

    contract: ContractResponse
    documents: list[ContractDocumentResponse]


class ContractDetailResponse(ContractResponse):
    """Contract with its property (including media) and documents."""

    parent_property: PropertyWithMediaResponse = Field(
        validation_alias=AliasChoices("parent_property", "property"),
        serialization_alias="property",
    )
    documents: list[ContractDocumentResponse]


class ContractWithPropertyResponse(ContractResponse):
    """Contract with its property."""

    parent_property: PropertyResponse = Field(
        validation_alias=AliasChoices("parent_property", "property"),
        serialization_alias="property",
    )


class ContractWithTenantResponse(ContractWithPropertyResponse):
    """Contract with its property and full tenant record."""

    tenant: TenantResponse | None


class ContractWithTenantContactResponse(ContractWithPropertyResponse):
    """Contract with its property and the tenant's name and email."""

    tenant: TenantContact | None


class ContractUpdateResponse(BaseModel):
    """Result of updating a contract."""

    message: str
    contract: ContractWithPropertyResponse


class ContractTenantSummary(BaseModel):
    """Tenant fields shown next to a property's active contract."""

    auth_id: str
    first_name: str
    email: str | None

    model_config = {"from_attributes": True}


class ActiveContractResponse(ContractResponse):
    """Contract currently in force on a property, with its tenant."""

    tenant: ContractTenantSummary | None


class PropertyDetailResponse(BaseModel):
    """Property with its media and the contract currently in force, if any."""

    property: PropertyWithMediaResponse
    contract: ActiveContractResponse | None
