"""Appointment API routes."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.schemas.appointment import (
    AppointmentCreate,
    AppointmentDetailResponse,
    AppointmentMessageResponse,
    AppointmentResponse,
    AppointmentUpdate,
)
from rentals.schemas.common import Message
from rentals.services import appointment as appointment_service

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post("/", response_model=AppointmentMessageResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(
    appointment_data: AppointmentCreate,
    db: Session = Depends(get_db),
) -> AppointmentMessageResponse:
    """Schedule a property visit."""
    appointment = appointment_service.create_appointment(db, appointment_data)
    return AppointmentMessageResponse(
        message="Appointment created successfully",
        appointment=AppointmentResponse.model_validate(appointment),
    )


@router.get("/landlord/{landlord_auth_id}", response_model=list[AppointmentDetailResponse])
def list_landlord_appointments(
    landlord_auth_id: str,
    year: int | None = Query(None, description="Defaults to the current year"),
    db: Session = Depends(get_db),
) -> list[AppointmentDetailResponse]:
    """List a landlord's appointments for the year."""
    appointments = appointment_service.get_appointments_for_landlord(db, landlord_auth_id, year)
    return [AppointmentDetailResponse.model_validate(a) for a in appointments]


@router.get("/tenant/{tenant_auth_id}", response_model=list[AppointmentDetailResponse])
def list_tenant_appointments(
    tenant_auth_id: str,
    year: int | None = Query(None, description="Defaults to the current year"),
    db: Session = Depends(get_db),
) -> list[AppointmentDetailResponse]:
    """List a tenant's appointments for the year."""
    appointments = appointment_service.get_appointments_for_tenant(db, tenant_auth_id, year)
    return [AppointmentDetailResponse.model_validate(a) for a in appointments]


@router.get("/{appointment_id}", response_model=AppointmentDetailResponse)
def get_appointment(
    appointment_id: int,
    db: Session = Depends(get_db),
) -> AppointmentDetailResponse:
    """Get an appointment with its landlord, tenant and property."""
    return AppointmentDetailResponse.model_validate(
        appointment_service.get_appointment(db, appointment_id)
    )


@router.patch("/{appointment_id}", response_model=AppointmentMessageResponse)
def update_appointment(
    appointment_id: int,
    appointment_data: AppointmentUpdate,
    db: Session = Depends(get_db),
) -> AppointmentMessageResponse:
    """Reschedule or edit an appointment."""
    appointment = appointment_service.update_appointment(db, appointment_id, appointment_data)
    return AppointmentMessageResponse(
        message="Appointment updated successfully",
        appointment=AppointmentResponse.model_validate(appointment),
    )


@router.delete("/{appointment_id}", response_model=Message)
def delete_appointment(appointment_id: int, db: Session = Depends(get_db)) -> Message:
    """Cancel an appointment."""
    appointment_service.delete_appointment(db, appointment_id)
    return Message(message="Appointment deleted successfully")
