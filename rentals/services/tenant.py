"""Tenant service for business logic."""

import logging

from sqlalchemy.orm import Session

from rentals.core.exceptions import ConflictError, NotFoundError
from rentals.models.tenant import Tenant
from rentals.schemas.tenant import TenantCreate, TenantUpdate

logger = logging.getLogger(__name__)


def create_tenant(db: Session, tenant_data: TenantCreate) -> Tenant:
    """Create a tenant profile for an authenticated user."""
    existing = db.query(Tenant).filter(Tenant.auth_id == tenant_data.auth_id).first()
    if existing:
        raise ConflictError("ID Already Taken")

    values = tenant_data.model_dump()
    values["gender"] = tenant_data.gender.value if tenant_data.gender else None
    values["avatar"] = tenant_data.avatar or ""
    db_tenant = Tenant(**values)
    db.add(db_tenant)
    db.commit()
    db.refresh(db_tenant)
    logger.info("Created tenant %s", db_tenant.auth_id)
    return db_tenant


def get_tenant(db: Session, auth_id: str) -> Tenant:
    """Get a tenant by auth ID."""
    tenant = db.query(Tenant).filter(Tenant.auth_id == auth_id).first()
    if not tenant:
        raise NotFoundError(f"Tenant with ID {auth_id} not found")
    return tenant


def get_tenants(db: Session, skip: int = 0, limit: int = 100) -> list[Tenant]:
    """Get all tenants with pagination."""
    tenants = db.query(Tenant).order_by(Tenant.created_at).offset(skip).limit(limit).all()
    if not tenants:
        raise NotFoundError("No tenants found")
    return tenants


def update_tenant(db: Session, auth_id: str, tenant_data: TenantUpdate) -> Tenant:
    """Update a tenant's profile."""
    tenant = get_tenant(db, auth_id)

    update_data = tenant_data.model_dump(exclude_unset=True)
    if update_data.get("gender") is not None:
        update_data["gender"] = update_data["gender"].value
    for field, value in update_data.items():
        setattr(tenant, field, value)

    db.commit()
    db.refresh(tenant)
    return tenant


def delete_tenant(db: Session, auth_id: str) -> None:
    """Delete a tenant."""
    tenant = get_tenant(db, auth_id)
    db.delete(tenant)
    db.commit()
    logger.info("Deleted tenant %s", auth_id)
