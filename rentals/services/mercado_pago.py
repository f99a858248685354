"""Mercado Pago integration: checkout preferences and merchant account linking.

Authentication Flow:
1. A landlord authorises the marketplace on Mercado Pago, which redirects back
   to the callback with an authorization `code` and the landlord id as `state`.
2. The code is exchanged (POST /oauth/token) for the landlord's access token,
   stored on the landlord.
3. Checkout preferences for rent are created with that landlord's token so the
   money lands in the landlord's account.
"""

import logging
from typing import Any

import httpx
from sqlalchemy.orm import Session

from rentals.core.config import settings
from rentals.core.exceptions import BadRequestError, NotFoundError, PaymentGatewayError
from rentals.models.contract import Contract
from rentals.models.landlord import Landlord
from rentals.models.tenant import Tenant
from rentals.schemas.mercado_pago import PreferenceCreate

logger = logging.getLogger(__name__)


class MercadoPagoClient:
    """Thin HTTP client for the Mercado Pago REST API."""

    def __init__(
        self,
        base_url: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        platform_token: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API base URL (uses settings if not provided)
            client_id: Marketplace application id, for OAuth
            client_secret: Marketplace application secret, for OAuth
            platform_token: Marketplace access token, for OAuth
            timeout: Request timeout in seconds
            transport: Custom httpx transport, e.g. a mock in tests

        """
        self.base_url = (base_url or settings.MERCADO_PAGO_API_URL).rstrip("/")
        self.client_id = client_id or settings.MP_CLIENT_ID
        self.client_secret = client_secret or settings.MP_CLIENT_SECRET
        self.platform_token = platform_token or settings.MERCADO_PAGO_ACCESS_TOKEN
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout or settings.MERCADO_PAGO_TIMEOUT,
            transport=transport,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._http.close()

    def _request(
        self,
        method: str,
        path: str,
        access_token: str | None = None,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        headers = {}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        try:
            response = self._http.request(method, path, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise PaymentGatewayError(f"Mercado Pago request failed: {exc}") from exc

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {"message": response.text}
            raise PaymentGatewayError(
                f"Mercado Pago returned {response.status_code} for {path}",
                upstream_status=response.status_code,
                response=body,
            )
        return response.json()

    def create_preference(self, access_token: str, preference: dict[str, Any]) -> dict[str, Any]:
        """Create a checkout preference on behalf of a merchant."""
        return self._request(
            "POST", "/checkout/preferences", access_token=access_token, payload=preference
        )

    def exchange_code(self, code: str, redirect_uri: str) -> dict[str, Any]:
        """Exchange an OAuth authorization code for a merchant access token."""
        if not self.platform_token:
            raise PaymentGatewayError("MERCADO_PAGO_ACCESS_TOKEN is not defined")
        return self._request(
            "POST",
            "/oauth/token",
            access_token=self.platform_token,
            payload={
                "client_secret": self.client_secret,
                "client_id": self.client_id,
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
            },
        )


def build_rent_preference(contract: Contract, tenant: Tenant) -> dict[str, Any]:
    """Build a one-item checkout preference for one month of a contract's rent."""
    prop = contract.parent_property
    back_url = f"{settings.FRONTEND_URL}/inquilino-dashboard/payment"
    return {
        "items": [
            {
                "id": str(contract.id),
                "title": f"Pago de renta de {prop.address}, {prop.city}, {prop.state}",
                "unit_price": float(contract.monthly_rent),
                "quantity": 1,
                "currency_id": settings.CURRENCY_ID,
            }
        ],
        "payer": {
            "email": tenant.email,
            "name": tenant.first_name,
            "surname": tenant.last_name,
        },
        "marketplace": settings.MARKETPLACE_NAME,
        "external_reference": str(contract.id),
        "auto_return": "approved",
        "back_urls": {
            "success": f"{back_url}/success?contractId={contract.id}",
            "failure": f"{back_url}/failed?contractId={contract.id}",
            "pending": f"{back_url}/pending?contractId={contract.id}",
        },
    }


def create_rent_checkout(
    db: Session,
    gateway: MercadoPagoClient,
    data: PreferenceCreate,
) -> str:
    """Open a rent checkout for a tenant and return its init point URL."""
    contract = db.query(Contract).filter(Contract.id == data.contract_id).first()
    if not contract:
        raise NotFoundError("Contract does not exist")

    landlord = (
        db.query(Landlord)
        .filter(Landlord.auth_id == contract.parent_property.landlord_auth_id)
        .first()
    )
    if not landlord:
        raise NotFoundError("Landlord does not exist")

    tenant = db.query(Tenant).filter(Tenant.auth_id == data.tenant_id).first()
    if not tenant:
        raise NotFoundError("Tenant does not exist")

    if not landlord.mercadopago_access_token:
        raise BadRequestError("Landlord has no Mercado Pago access token")

    response = gateway.create_preference(
        landlord.mercadopago_access_token,
        build_rent_preference(contract, tenant),
    )
    init_point = response.get("init_point")
    if not init_point:
        raise PaymentGatewayError("Mercado Pago did not return an init point", response=response)

    logger.info("Opened checkout %s for contract %d", response.get("id"), contract.id)
    return init_point


def link_landlord_account(
    db: Session,
    gateway: MercadoPagoClient,
    code: str | None,
    state: str | None,
) -> None:
    """Store the merchant token for the landlord that authorised the marketplace.

    Nothing is exchanged when the landlord is unknown or already has a token.
    """
    if not code:
        raise BadRequestError("Mercado Pago did not return an authorization code")

    landlord = db.query(Landlord).filter(Landlord.auth_id == state).first()
    if not landlord:
        raise NotFoundError(f"Landlord with ID {state} not found")
    if landlord.mercadopago_access_token is not None:
        return

    data = gateway.exchange_code(code, settings.MP_REDIRECT_URI)
    access_token = data.get("access_token")
    if not access_token:
        raise PaymentGatewayError("No access token received", response=data)

    landlord.mercadopago_access_token = access_token
    db.commit()
    logger.info("Linked Mercado Pago user %s to landlord %s", data.get("user_id"), state)
