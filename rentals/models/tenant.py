"""Tenant database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.application import Application
    from rentals.models.contract import Contract
    from rentals.models.preference import TenantPreference


class Tenant(Base):
    """Prospective or current renter."""

    __tablename__ = "tenants"

    auth_id: Mapped[str] = mapped_column(String(128), primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    age: Mapped[int | None] = mapped_column(nullable=True)
    industry: Mapped[str | None] = mapped_column(String(100), nullable=True)
    avatar: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    # Relationships
    applications: Mapped[list["Application"]] = relationship(back_populates="tenant")
    contracts: Mapped[list["Contract"]] = relationship(back_populates="tenant")
    preferences: Mapped[list["TenantPreference"]] = relationship(back_populates="tenant")
