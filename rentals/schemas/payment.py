"""Payment Pydantic schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class PaymentCreate(BaseModel):
    """Schema for recording a payment confirmed by Mercado Pago."""

    payment_id: str = Field(min_length=1, max_length=50)
    contract_id: int
    tenant_auth_id: str


class PaymentUpdate(BaseModel):
    """Schema for correcting a recorded payment."""

    amount: Decimal | None = Field(default=None, ge=0)
    payment_date: datetime | None = None


class PaymentResponse(BaseModel):
    """Schema for payment response."""

    id: int
    mercadopago_payment_id: str
    tenant_auth_id: str
    contract_id: int
    amount: Decimal
    payment_date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MonthlyPaymentQuery(BaseModel):
    """Tenant and contract whose current-month payment is being checked."""

    tenant_auth_id: str
    contract_id: int


class MonthlyPaymentStatus(BaseModel):
    """Whether a payment was already recorded this month."""

    exists: bool
