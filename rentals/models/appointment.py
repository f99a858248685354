"""Appointment database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.landlord import Landlord
    from rentals.models.property import Property
    from rentals.models.tenant import Tenant


class Appointment(Base):
    """Property visit scheduled between a landlord and a tenant."""

    __tablename__ = "appointments"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(200))
    date: Mapped[datetime] = mapped_column(index=True)
    time: Mapped[str | None] = mapped_column(String(20), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    # Foreign keys
    landlord_auth_id: Mapped[str] = mapped_column(ForeignKey("landlords.auth_id"), index=True)
    tenant_auth_id: Mapped[str] = mapped_column(ForeignKey("tenants.auth_id"), index=True)
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.id"), index=True)

    # Relationships
    landlord: Mapped["Landlord"] = relationship(back_populates="appointments")
    tenant: Mapped["Tenant"] = relationship()
    parent_property: Mapped["Property"] = relationship()
