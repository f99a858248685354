"""Contract service for business logic."""

import logging

from sqlalchemy.orm import Session, joinedload, selectinload

from rentals.core.exceptions import BadRequestError, NotFoundError
from rentals.models.contract import Contract, ContractDocument
from rentals.models.enums import ContractStatus
from rentals.models.payment import Payment
from rentals.models.property import Property
from rentals.schemas.contract import ContractCreate, ContractUpdate
from rentals.schemas.tenant import TenantContact
from rentals.services.property import get_property
from rentals.services.queries import active_contract_clause
from rentals.services.tenant import get_tenant

logger = logging.getLogger(__name__)


def create_contract(
    db: Session,
    contract_data: ContractCreate,
) -> tuple[Contract, list[ContractDocument]]:
    """Sign a contract and take the property off the market.

    A property may hold only one active contract at a time. The contract, its
    documents and the availability change are committed together.
    """
    db_property = get_property(db, contract_data.property_id)
    get_tenant(db, contract_data.tenant_auth_id)

    existing = (
        db.query(Contract)
        .filter(Contract.property_id == db_property.id, active_contract_clause())
        .first()
    )
    if existing:
        raise BadRequestError("The property already has an active contract")

    contract = Contract(
        property_id=db_property.id,
        tenant_auth_id=contract_data.tenant_auth_id,
        start_date=contract_data.start_date,
        end_date=contract_data.end_date,
        monthly_rent=contract_data.monthly_rent,
    )
    db.add(contract)
    db.flush()  # Get contract.id

    documents = [
        ContractDocument(
            contract_id=contract.id,
            document_type=doc.document_type,
            document_url=doc.document_url,
        )
        for doc in contract_data.documents
    ]
    db.add_all(documents)

    db_property.is_available = False

    db.commit()
    db.refresh(contract)
    for doc in documents:
        db.refresh(doc)
    logger.info(
        "Created contract %d for property %d and tenant %s",
        contract.id,
        db_property.id,
        contract.tenant_auth_id,
    )
    return contract, documents


def get_contracts(db: Session) -> list[Contract]:
    """Get all contracts."""
    return db.query(Contract).order_by(Contract.id).all()


def get_contract(db: Session, contract_id: int) -> Contract:
    """Get a contract by ID."""
    contract = db.query(Contract).filter(Contract.id == contract_id).first()
    if not contract:
        raise NotFoundError(f"Contract with ID {contract_id} not found")
    return contract


def get_contract_detail(db: Session, contract_id: int) -> Contract:
    """Get a contract with its property (including media) and documents."""
    contract = (
        db.query(Contract)
        .filter(Contract.id == contract_id)
        .options(
            joinedload(Contract.parent_property).selectinload(Property.media),
            selectinload(Contract.documents),
        )
        .first()
    )
    if not contract:
        raise NotFoundError(f"Contract with ID {contract_id} not found")
    return contract


def get_contracts_for_tenant(
    db: Session,
    tenant_auth_id: str,
    active_only: bool = False,
) -> list[Contract]:
    """Get a tenant's contracts with property and tenant loaded."""
    query = (
        db.query(Contract)
        .filter(Contract.tenant_auth_id == tenant_auth_id)
        .options(joinedload(Contract.parent_property), joinedload(Contract.tenant))
    )
    if active_only:
        query = query.filter(active_contract_clause())

    contracts = query.order_by(Contract.id).all()
    if not contracts:
        qualifier = "active contracts" if active_only else "contracts"
        raise NotFoundError(f"No {qualifier} found for tenant ID {tenant_auth_id}")
    return contracts


def get_contracts_for_property(
    db: Session,
    property_id: int,
) -> list[tuple[Contract, TenantContact | None]]:
    """Get a property's contracts, each with the tenant's name and email."""
    contracts = (
        db.query(Contract)
        .filter(Contract.property_id == property_id)
        .options(joinedload(Contract.parent_property), joinedload(Contract.tenant))
        .order_by(Contract.id)
        .all()
    )
    if not contracts:
        raise NotFoundError(f"Contracts for property with ID {property_id} not found")

    result = []
    for contract in contracts:
        contact = None
        if contract.tenant:
            contact = TenantContact(
                name=f"{contract.tenant.first_name} {contract.tenant.last_name}",
                email=contract.tenant.email,
            )
        result.append((contract, contact))
    return result


def get_contracts_for_property_and_tenant(
    db: Session,
    property_id: int,
    tenant_auth_id: str,
) -> list[Contract]:
    """Get the contracts a tenant holds on one property."""
    contracts = (
        db.query(Contract)
        .filter(
            Contract.property_id == property_id,
            Contract.tenant_auth_id == tenant_auth_id,
        )
        .options(joinedload(Contract.parent_property))
        .order_by(Contract.id)
        .all()
    )
    if not contracts:
        raise NotFoundError(f"Contract for property ID {property_id} not found")
    return contracts


def update_contract(db: Session, contract_id: int, contract_data: ContractUpdate) -> Contract:
    """Update a contract.

    Reactivating a contract is refused while another contract on the same
    property is active.
    """
    contract = get_contract(db, contract_id)

    update_data = contract_data.model_dump(exclude_unset=True)
    if update_data.get("status") is not None:
        update_data["status"] = update_data["status"].value

    activating = (
        update_data.get("status") == ContractStatus.ACTIVE.value
        and contract.status != ContractStatus.ACTIVE.value
    )
    if activating:
        other = (
            db.query(Contract)
            .filter(
                Contract.property_id == contract.property_id,
                Contract.id != contract_id,
                active_contract_clause(),
            )
            .first()
        )
        if other:
            raise BadRequestError("The property already has an active contract")

    for field, value in update_data.items():
        setattr(contract, field, value)

    db.commit()
    db.refresh(contract)
    return contract


def delete_contract(db: Session, contract_id: int) -> None:
    """Delete a contract after removing its documents and payments."""
    contract = get_contract(db, contract_id)

    db.query(ContractDocument).filter(ContractDocument.contract_id == contract_id).delete(
        synchronize_session=False
    )
    db.query(Payment).filter(Payment.contract_id == contract_id).delete(
        synchronize_session=False
    )
    db.expire(contract, ["documents", "payments"])
    db.delete(contract)
    db.commit()
    logger.info("Deleted contract %d", contract_id)
