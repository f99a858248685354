"""Payment service for business logic."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from rentals.core.exceptions import ConflictError, NotFoundError
from rentals.models.payment import Payment
from rentals.schemas.payment import MonthlyPaymentQuery, PaymentCreate, PaymentUpdate
from rentals.services.contract import get_contract
from rentals.services.tenant import get_tenant

logger = logging.getLogger(__name__)


def create_payment(db: Session, payment_data: PaymentCreate) -> Payment:
    """Record a confirmed payment for one month of a contract's rent."""
    contract = get_contract(db, payment_data.contract_id)

    duplicate = (
        db.query(Payment)
        .filter(Payment.mercadopago_payment_id == payment_data.payment_id)
        .first()
    )
    if duplicate:
        raise ConflictError(f"Payment {payment_data.payment_id} already recorded")

    payment = Payment(
        tenant_auth_id=payment_data.tenant_auth_id,
        contract_id=contract.id,
        amount=contract.monthly_rent,
        payment_date=datetime.now(UTC),
        mercadopago_payment_id=payment_data.payment_id,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    logger.info("Recorded payment %s for contract %d", payment.mercadopago_payment_id, contract.id)
    return payment


def _month_bounds(now: datetime) -> tuple[datetime, datetime]:
    start = datetime(now.year, now.month, 1, tzinfo=UTC)
    if now.month == 12:
        end = datetime(now.year + 1, 1, 1, tzinfo=UTC)
    else:
        end = datetime(now.year, now.month + 1, 1, tzinfo=UTC)
    return start, end


def has_paid_this_month(
    db: Session,
    query: MonthlyPaymentQuery,
    now: datetime | None = None,
) -> bool:
    """Check whether a tenant already paid a contract during the current UTC month."""
    tenant = get_tenant(db, query.tenant_auth_id)
    contract = get_contract(db, query.contract_id)

    start, end = _month_bounds(now or datetime.now(UTC))
    already = (
        db.query(Payment)
        .filter(
            Payment.tenant_auth_id == tenant.auth_id,
            Payment.contract_id == contract.id,
            Payment.payment_date >= start,
            Payment.payment_date < end,
        )
        .first()
    )
    return already is not None


def get_payment(db: Session, payment_id: int) -> Payment:
    """Get a payment by ID."""
    payment = db.query(Payment).filter(Payment.id == payment_id).first()
    if not payment:
        raise NotFoundError(f"Payment with ID {payment_id} not found")
    return payment


def get_payments(db: Session) -> list[Payment]:
    """Get all payments."""
    payments = db.query(Payment).order_by(Payment.payment_date, Payment.id).all()
    if not payments:
        raise NotFoundError("No payments found")
    return payments


def update_payment(db: Session, payment_id: int, payment_data: PaymentUpdate) -> Payment:
    """Correct a recorded payment."""
    payment = get_payment(db, payment_id)
    for field, value in payment_data.model_dump(exclude_unset=True).items():
        setattr(payment, field, value)
    db.commit()
    db.refresh(payment)
    return payment


def delete_payment(db: Session, payment_id: int) -> None:
    """Delete a payment."""
    payment = get_payment(db, payment_id)
    db.delete(payment)
    db.commit()
    logger.info("Deleted payment %d", payment_id)
