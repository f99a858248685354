"""Payment API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.schemas.common import Message
from rentals.schemas.payment import (
    MonthlyPaymentQuery,
    MonthlyPaymentStatus,
    PaymentCreate,
    PaymentResponse,
    PaymentUpdate,
)
from rentals.services import payment as payment_service

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def create_payment(
    payment_data: PaymentCreate,
    db: Session = Depends(get_db),
) -> PaymentResponse:
    """Record a payment confirmed by Mercado Pago."""
    return PaymentResponse.model_validate(payment_service.create_payment(db, payment_data))


@router.post("/this-month", response_model=MonthlyPaymentStatus)
def already_paid_this_month(
    query: MonthlyPaymentQuery,
    db: Session = Depends(get_db),
) -> MonthlyPaymentStatus:
    """Tell whether this month's rent is already paid."""
    return MonthlyPaymentStatus(exists=payment_service.has_paid_this_month(db, query))


@router.get("/", response_model=list[PaymentResponse])
def list_payments(db: Session = Depends(get_db)) -> list[PaymentResponse]:
    """List all payments."""
    return [PaymentResponse.model_validate(p) for p in payment_service.get_payments(db)]


@router.get("/{payment_id}", response_model=PaymentResponse)
def get_payment(payment_id: int, db: Session = Depends(get_db)) -> PaymentResponse:
    """Get a payment by ID."""
    return PaymentResponse.model_validate(payment_service.get_payment(db, payment_id))


@router.patch("/{payment_id}", response_model=PaymentResponse)
def update_payment(
    payment_id: int,
    payment_data: PaymentUpdate,
    db: Session = Depends(get_db),
) -> PaymentResponse:
    """Correct a recorded payment."""
    return PaymentResponse.model_validate(
        payment_service.update_payment(db, payment_id, payment_data)
    )


@router.delete("/{payment_id}", response_model=Message)
def delete_payment(payment_id: int, db: Session = Depends(get_db)) -> Message:
    """Delete a payment."""
    payment_service.delete_payment(db, payment_id)
    return Message(message="Payment successfully deleted")
