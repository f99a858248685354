"""Landlord database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.appointment import Appointment
    from rentals.models.preference import LandlordPreference
    from rentals.models.property import Property


class Landlord(Base):
    """Property owner, keyed by the id issued by the external auth provider."""

    __tablename__ = "landlords"

    auth_id: Mapped[str] = mapped_column(String(128), primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    avg_rating: Mapped[float] = mapped_column(default=0.0)
    avatar: Mapped[str | None] = mapped_column(String(500), nullable=True)
    mercadopago_access_token: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    # Relationships
    properties: Mapped[list["Property"]] = relationship(
        back_populates="landlord",
        order_by="Property.id",
    )
    preferences: Mapped[list["LandlordPreference"]] = relationship(back_populates="landlord")
    appointments: Mapped[list["Appointment"]] = relationship(back_populates="landlord")
