"""Contract API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.schemas.common import Message
from rentals.schemas.contract import (
    ContractCreate,
    ContractCreateResponse,
    ContractDetailResponse,
    ContractDocumentResponse,
    ContractResponse,
    ContractUpdate,
    ContractUpdateResponse,
    ContractWithPropertyResponse,
    ContractWithTenantContactResponse,
    ContractWithTenantResponse,
)
from rentals.services import contract as contract_service

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.post("/", response_model=ContractCreateResponse, status_code=status.HTTP_201_CREATED)
def create_contract(
    contract_data: ContractCreate,
    db: Session = Depends(get_db),
) -> ContractCreateResponse:
    """Sign a contract; the property is marked unavailable."""
    contract, documents = contract_service.create_contract(db, contract_data)
    return ContractCreateResponse(
        contract=ContractResponse.model_validate(contract),
        documents=[ContractDocumentResponse.model_validate(d) for d in documents],
    )


@router.get("/", response_model=list[ContractResponse])
def list_contracts(db: Session = Depends(get_db)) -> list[ContractResponse]:
    """List all contracts."""
    return [ContractResponse.model_validate(c) for c in contract_service.get_contracts(db)]


@router.get("/tenant/active/{tenant_auth_id}", response_model=list[ContractWithTenantResponse])
def list_active_contracts_for_tenant(
    tenant_auth_id: str,
    db: Session = Depends(get_db),
) -> list[ContractWithTenantResponse]:
    """List a tenant's active contracts."""
    contracts = contract_service.get_contracts_for_tenant(db, tenant_auth_id, active_only=True)
    return [ContractWithTenantResponse.model_validate(c) for c in contracts]


@router.get("/tenant/{tenant_auth_id}", response_model=list[ContractWithTenantResponse])
def list_contracts_for_tenant(
    tenant_auth_id: str,
    db: Session = Depends(get_db),
) -> list[ContractWithTenantResponse]:
    """List all contracts of a tenant."""
    contracts = contract_service.get_contracts_for_tenant(db, tenant_auth_id)
    return [ContractWithTenantResponse.model_validate(c) for c in contracts]


@router.get(
    "/property/{property_id}/user/{tenant_auth_id}",
    response_model=list[ContractWithPropertyResponse],
)
def list_contracts_for_property_and_tenant(
    property_id: int,
    tenant_auth_id: str,
    db: Session = Depends(get_db),
) -> list[ContractWithPropertyResponse]:
    """List the contracts a tenant holds on a property."""
    contracts = contract_service.get_contracts_for_property_and_tenant(
        db, property_id, tenant_auth_id
    )
    return [ContractWithPropertyResponse.model_validate(c) for c in contracts]


@router.get(
    "/property/{property_id}",
    response_model=list[ContractWithTenantContactResponse],
)
def list_contracts_for_property(
    property_id: int,
    db: Session = Depends(get_db),
) -> list[ContractWithTenantContactResponse]:
    """List a property's contracts with each tenant's name and email."""
    rows = contract_service.get_contracts_for_property(db, property_id)
    return [
        ContractWithTenantContactResponse(
            **ContractWithPropertyResponse.model_validate(contract).model_dump(),
            tenant=contact,
        )
        for contract, contact in rows
    ]


@router.get("/{contract_id}", response_model=ContractDetailResponse)
def get_contract(contract_id: int, db: Session = Depends(get_db)) -> ContractDetailResponse:
    """Get a contract with its property and documents."""
    return ContractDetailResponse.model_validate(
        contract_service.get_contract_detail(db, contract_id)
    )


@router.put("/{contract_id}", response_model=ContractUpdateResponse)
def update_contract(
    contract_id: int,
    contract_data: ContractUpdate,
    db: Session = Depends(get_db),
) -> ContractUpdateResponse:
    """Update a contract."""
    contract = contract_service.update_contract(db, contract_id, contract_data)
    return ContractUpdateResponse(
        message="Contract updated successfully",
        contract=ContractWithPropertyResponse.model_validate(contract),
    )


@router.delete("/{contract_id}", response_model=Message)
def delete_contract(contract_id: int, db: Session = Depends(get_db)) -> Message:
    """Delete a contract together with its documents and payments."""
    contract_service.delete_contract(db, contract_id)
    return Message(message="Contract deleted successfully")
