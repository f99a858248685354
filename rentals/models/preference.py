"""Landlord and tenant preference database models."""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.landlord import Landlord
    from rentals.models.tenant import Tenant


class LandlordPreference(Base):
    """Applicant profile a landlord is looking for."""

    __tablename__ = "landlord_preferences"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    landlord_auth_id: Mapped[str] = mapped_column(ForeignKey("landlords.auth_id"), index=True)
    preferred_industry: Mapped[str | None] = mapped_column(String(100), nullable=True)
    min_age: Mapped[int | None] = mapped_column(nullable=True)
    max_age: Mapped[int | None] = mapped_column(nullable=True)
    min_score: Mapped[float | None] = mapped_column(nullable=True)

    landlord: Mapped["Landlord"] = relationship(back_populates="preferences")


class TenantPreference(Base):
    """Kind of property a tenant is looking for."""

    __tablename__ = "tenant_preferences"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    tenant_auth_id: Mapped[str] = mapped_column(ForeignKey("tenants.auth_id"), index=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    property_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    max_rent: Mapped[Decimal | None] = mapped_column(Numeric(precision=12, scale=2), nullable=True)
    min_rooms: Mapped[int | None] = mapped_column(nullable=True)

    tenant: Mapped["Tenant"] = relationship(back_populates="preferences")
