"""Mercado Pago request/response schemas."""

from pydantic import BaseModel


class PreferenceCreate(BaseModel):
    """Request to open a checkout for one month of rent."""

    contract_id: int
    tenant_id: str


class PreferenceCreated(BaseModel):
    """Checkout opened on Mercado Pago."""

    message: str
    init_point: str


class AccessTokenStatus(BaseModel):
    """Confirmation that a landlord has linked a Mercado Pago account."""

    message: str
