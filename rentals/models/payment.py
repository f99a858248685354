"""Payment database model - the rent payment ledger."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.contract import Contract


class Payment(Base):
    """Rent payment confirmed by Mercado Pago."""

    __tablename__ = "payments"
    __table_args__ = (CheckConstraint("amount >= 0", name="ck_payment_amount_positive"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    mercadopago_payment_id: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2))
    payment_date: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC), index=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    # Foreign keys
    tenant_auth_id: Mapped[str] = mapped_column(ForeignKey("tenants.auth_id"), index=True)
    contract_id: Mapped[int] = mapped_column(ForeignKey("contracts.id"), index=True)

    contract: Mapped["Contract"] = relationship(back_populates="payments")
