"""Appointment service for business logic."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session, joinedload

from rentals.core.exceptions import NotFoundError
from rentals.models.appointment import Appointment
from rentals.models.landlord import Landlord
from rentals.models.property import Property
from rentals.models.tenant import Tenant
from rentals.schemas.appointment import AppointmentCreate, AppointmentUpdate

logger = logging.getLogger(__name__)


def create_appointment(db: Session, appointment_data: AppointmentCreate) -> Appointment:
    """Schedule a visit; landlord, tenant and property must all exist."""
    if not db.query(Landlord).filter(Landlord.auth_id == appointment_data.landlord_auth_id).first():
        raise NotFoundError("Landlord does not exist")
    if not db.query(Tenant).filter(Tenant.auth_id == appointment_data.tenant_auth_id).first():
        raise NotFoundError("Tenant does not exist")
    if not db.query(Property).filter(Property.id == appointment_data.property_id).first():
        raise NotFoundError("Property does not exist")

    appointment = Appointment(**appointment_data.model_dump())
    db.add(appointment)
    db.commit()
    db.refresh(appointment)
    logger.info("Scheduled appointment %d on property %d", appointment.id, appointment.property_id)
    return appointment


def get_appointment(db: Session, appointment_id: int) -> Appointment:
    """Get an appointment with its landlord, tenant and property."""
    appointment = (
        db.query(Appointment)
        .filter(Appointment.id == appointment_id)
        .options(
            joinedload(Appointment.landlord),
            joinedload(Appointment.tenant),
            joinedload(Appointment.parent_property),
        )
        .first()
    )
    if not appointment:
        raise NotFoundError(f"Appointment with ID {appointment_id} not found")
    return appointment


def _year_bounds(year: int | None) -> tuple[datetime, datetime]:
    year = year or datetime.now(UTC).year
    return datetime(year, 1, 1, tzinfo=UTC), datetime(year + 1, 1, 1, tzinfo=UTC)


def get_appointments_for_landlord(
    db: Session,
    landlord_auth_id: str,
    year: int | None = None,
) -> list[Appointment]:
    """Get a landlord's appointments within a year (the current one by default)."""
    start, end = _year_bounds(year)
    return (
        db.query(Appointment)
        .filter(
            Appointment.landlord_auth_id == landlord_auth_id,
            Appointment.date >= start,
            Appointment.date < end,
        )
        .options(
            joinedload(Appointment.landlord),
            joinedload(Appointment.tenant),
            joinedload(Appointment.parent_property),
        )
        .order_by(Appointment.date, Appointment.id)
        .all()
    )


def get_appointments_for_tenant(
    db: Session,
    tenant_auth_id: str,
    year: int | None = None,
) -> list[Appointment]:
    """Get a tenant's appointments within a year (the current one by default)."""
    start, end = _year_bounds(year)
    return (
        db.query(Appointment)
        .filter(
            Appointment.tenant_auth_id == tenant_auth_id,
            Appointment.date >= start,
            Appointment.date < end,
        )
        .options(
            joinedload(Appointment.landlord),
            joinedload(Appointment.tenant),
            joinedload(Appointment.parent_property),
        )
        .order_by(Appointment.date, Appointment.id)
        .all()
    )


def update_appointment(
    db: Session,
    appointment_id: int,
    appointment_data: AppointmentUpdate,
) -> Appointment:
    """Reschedule or edit an appointment."""
    appointment = db.query(Appointment).filter(Appointment.id == appointment_id).first()
    if not appointment:
        raise NotFoundError(f"Appointment with ID {appointment_id} not found")

    for field, value in appointment_data.model_dump(exclude_unset=True).items():
        setattr(appointment, field, value)

    db.commit()
    db.refresh(appointment)
    return appointment


def delete_appointment(db: Session, appointment_id: int) -> None:
    """Cancel an appointment."""
    appointment = db.query(Appointment).filter(Appointment.id == appointment_id).first()
    if not appointment:
        raise NotFoundError(f"Appointment with ID {appointment_id} not found")
    db.delete(appointment)
    db.commit()
