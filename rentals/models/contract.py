"""Contract and contract document database models."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base
from rentals.models.enums import ContractStatus

if TYPE_CHECKING:
    from rentals.models.payment import Payment
    from rentals.models.property import Property
    from rentals.models.tenant import Tenant


class Contract(Base):
    """Lease linking a tenant to a property."""

    __tablename__ = "contracts"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    start_date: Mapped[datetime]
    end_date: Mapped[datetime]
    monthly_rent: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2))
    status: Mapped[str] = mapped_column(String(10), default=ContractStatus.ACTIVE.value, index=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    # Foreign keys
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.id"), index=True)
    tenant_auth_id: Mapped[str] = mapped_column(ForeignKey("tenants.auth_id"), index=True)

    # Relationships
    parent_property: Mapped["Property"] = relationship(back_populates="contracts")
    tenant: Mapped["Tenant"] = relationship(back_populates="contracts")
    documents: Mapped[list["ContractDocument"]] = relationship(back_populates="contract")
    payments: Mapped[list["Payment"]] = relationship(back_populates="contract")


class ContractDocument(Base):
    """Signed contract file, stored by public URL."""

    __tablename__ = "contract_documents"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    contract_id: Mapped[int] = mapped_column(ForeignKey("contracts.id"), index=True)
    document_type: Mapped[str] = mapped_column(String(100))
    document_url: Mapped[str] = mapped_column(String(500))
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    contract: Mapped["Contract"] = relationship(back_populates="documents")
