"""Property and property media database models."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.application import Application
    from rentals.models.contract import Contract
    from rentals.models.landlord import Landlord


class Property(Base):
    """Rentable unit owned by a landlord."""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    address: Mapped[str] = mapped_column(String(255))
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    rooms: Mapped[int | None] = mapped_column(nullable=True)
    parking: Mapped[int | None] = mapped_column(nullable=True)
    square_meters: Mapped[float | None] = mapped_column(nullable=True)
    tier: Mapped[int | None] = mapped_column(nullable=True)
    bathrooms: Mapped[int | None] = mapped_column(nullable=True)
    age: Mapped[int | None] = mapped_column(nullable=True)
    floors: Mapped[int | None] = mapped_column(nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rent_price: Mapped[Decimal | None] = mapped_column(Numeric(precision=12, scale=2), nullable=True)
    is_available: Mapped[bool] = mapped_column(default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC), index=True)

    # Foreign keys
    landlord_auth_id: Mapped[str] = mapped_column(ForeignKey("landlords.auth_id"), index=True)

    # Relationships
    landlord: Mapped["Landlord"] = relationship(back_populates="properties")
    media: Mapped[list["PropertyMedia"]] = relationship(
        back_populates="parent_property",
        order_by="PropertyMedia.id",
    )
    applications: Mapped[list["Application"]] = relationship(back_populates="parent_property")
    contracts: Mapped[list["Contract"]] = relationship(back_populates="parent_property")


class PropertyMedia(Base):
    """Photo or video of a property, stored by public URL."""

    __tablename__ = "property_media"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.id"), index=True)
    media_type: Mapped[str] = mapped_column(String(100))
    media_url: Mapped[str] = mapped_column(String(500))
    description: Mapped[str] = mapped_column(String(500), default="")
    upload_date: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC), index=True)

    parent_property: Mapped["Property"] = relationship(back_populates="media")
