"""Tenant API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.schemas.tenant import TenantCreate, TenantDeleted, TenantResponse, TenantUpdate
from rentals.services import tenant as tenant_service

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.post("/", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
def create_tenant(tenant_data: TenantCreate, db: Session = Depends(get_db)) -> TenantResponse:
    """Create a tenant profile."""
    return TenantResponse.model_validate(tenant_service.create_tenant(db, tenant_data))


@router.get("/", response_model=list[TenantResponse])
def list_tenants(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
) -> list[TenantResponse]:
    """List all tenants."""
    return [TenantResponse.model_validate(t) for t in tenant_service.get_tenants(db, skip, limit)]


@router.get("/{auth_id}", response_model=TenantResponse)
def get_tenant(auth_id: str, db: Session = Depends(get_db)) -> TenantResponse:
    """Get a tenant by auth ID."""
    return TenantResponse.model_validate(tenant_service.get_tenant(db, auth_id))


@router.patch("/{auth_id}", response_model=TenantResponse)
def update_tenant(
    auth_id: str,
    tenant_data: TenantUpdate,
    db: Session = Depends(get_db),
) -> TenantResponse:
    """Update a tenant's profile."""
    return TenantResponse.model_validate(tenant_service.update_tenant(db, auth_id, tenant_data))


@router.delete("/{auth_id}", response_model=TenantDeleted)
def delete_tenant(auth_id: str, db: Session = Depends(get_db)) -> TenantDeleted:
    """Delete a tenant."""
    deleted = TenantResponse.model_validate(tenant_service.get_tenant(db, auth_id))
    tenant_service.delete_tenant(db, auth_id)
    return TenantDeleted(message="Tenant successfully deleted", deleted_tenant=deleted)
