"""Application, application media and reference database models."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base
from rentals.models.enums import ApplicationStatus

if TYPE_CHECKING:
    from rentals.models.property import Property
    from rentals.models.tenant import Tenant


class Application(Base):
    """A tenant's bid on a property; candidates are ranked by score."""

    __tablename__ = "applications"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    status: Mapped[str] = mapped_column(String(20), default=ApplicationStatus.PENDING.value)
    score: Mapped[float] = mapped_column(default=0.0, index=True)
    personal_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC), index=True)

    # Foreign keys
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.id"), index=True)
    tenant_auth_id: Mapped[str | None] = mapped_column(
        ForeignKey("tenants.auth_id"),
        nullable=True,
        index=True,
    )

    # Relationships
    parent_property: Mapped["Property"] = relationship(back_populates="applications")
    tenant: Mapped["Tenant | None"] = relationship(back_populates="applications")
    media: Mapped[list["ApplicationMedia"]] = relationship(
        back_populates="application",
        order_by="ApplicationMedia.id",
    )
    references: Mapped[list["ApplicationReference"]] = relationship(
        back_populates="application",
        order_by="ApplicationReference.id",
    )


class ApplicationMedia(Base):
    """Supporting document attached to an application."""

    __tablename__ = "application_media"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    application_id: Mapped[int] = mapped_column(ForeignKey("applications.id"), index=True)
    media_type: Mapped[str] = mapped_column(String(100))
    media_url: Mapped[str] = mapped_column(String(500))

    application: Mapped["Application"] = relationship(back_populates="media")


class ApplicationReference(Base):
    """Personal or professional reference given by the applicant."""

    __tablename__ = "application_references"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    application_id: Mapped[int] = mapped_column(ForeignKey("applications.id"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    relationship_type: Mapped[str | None] = mapped_column("relationship", String(100), nullable=True)

    application: Mapped["Application"] = relationship(back_populates="references")
