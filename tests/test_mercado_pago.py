"""Tests for the Mercado Pago client, checkout and account linking."""

import json

import httpx
import pytest

from factories import make_contract, make_landlord, make_property, make_tenant
from rentals.api.dependencies import get_payment_gateway
from rentals.core.config import settings
from rentals.core.exceptions import PaymentGatewayError
from rentals.main import app
from rentals.models import Landlord
from rentals.services.mercado_pago import MercadoPagoClient


class RecordingHandler:
    """Mock transport handler that records requests and replays a canned response."""

    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.payload = payload if payload is not None else {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)


def _gateway(handler):
    return MercadoPagoClient(
        base_url="https://api.mercadopago.test",
        client_id="client-id",
        client_secret="client-secret",
        platform_token="platform-token",
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def use_gateway():
    """Route the API's Mercado Pago dependency to a mock-backed client."""

    def install(handler):
        gateway = _gateway(handler)
        app.dependency_overrides[get_payment_gateway] = lambda: gateway
        return gateway

    yield install
    app.dependency_overrides.pop(get_payment_gateway, None)


# =============================================================================
# Client
# =============================================================================


class TestMercadoPagoClient:
    """Tests for the HTTP client."""

    def test_create_preference_sends_merchant_token(self):
        handler = RecordingHandler(payload={"id": "pref-1", "init_point": "https://mp.test/init"})
        gateway = _gateway(handler)

        result = gateway.create_preference("merchant-token", {"items": []})

        assert result["init_point"] == "https://mp.test/init"
        [request] = handler.requests
        assert request.url.path == "/checkout/preferences"
        assert request.headers["Authorization"] == "Bearer merchant-token"

    def test_exchange_code_payload(self):
        handler = RecordingHandler(payload={"access_token": "APP_USR-merchant"})
        gateway = _gateway(handler)

        gateway.exchange_code("auth-code", "https://rentals.test/callback")

        [request] = handler.requests
        assert request.url.path == "/oauth/token"
        assert request.headers["Authorization"] == "Bearer platform-token"
        body = json.loads(request.content)
        assert body["grant_type"] == "authorization_code"
        assert body["code"] == "auth-code"
        assert body["client_id"] == "client-id"

    def test_error_status_raises(self):
        gateway = _gateway(RecordingHandler(status_code=401, payload={"message": "invalid token"}))

        with pytest.raises(PaymentGatewayError) as exc_info:
            gateway.create_preference("bad", {})

        assert exc_info.value.upstream_status == 401
        assert exc_info.value.response == {"message": "invalid token"}
        assert exc_info.value.status_code == 502

    def test_transport_failure_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        gateway = _gateway(handler)

        with pytest.raises(PaymentGatewayError):
            gateway.create_preference("token", {})


# =============================================================================
# Checkout
# =============================================================================


class TestCreatePreferenceEndpoint:
    """Tests for POST /api/mercado-pago/create-preference."""

    def _setup(self, test_db, token="APP_USR-merchant"):
        make_landlord(test_db, mercadopago_access_token=token)
        make_tenant(test_db)
        prop = make_property(test_db, address="Calle 45 #13-20")
        return make_contract(test_db, prop.id)

    def test_creates_checkout(self, client, test_db, use_gateway):
        contract = self._setup(test_db)
        handler = RecordingHandler(payload={"id": "pref-1", "init_point": "https://mp.test/init"})
        use_gateway(handler)

        response = client.post(
            "/api/mercado-pago/create-preference",
            json={"contract_id": contract.id, "tenant_id": "tenant-1"},
        )

        assert response.status_code == 201
        assert response.json()["init_point"] == "https://mp.test/init"
        [request] = handler.requests
        assert request.headers["Authorization"] == "Bearer APP_USR-merchant"
        preference = json.loads(request.content)
        [item] = preference["items"]
        assert item["unit_price"] == 1500000.0
        assert item["currency_id"] == settings.CURRENCY_ID
        assert "Calle 45 #13-20" in item["title"]
        assert preference["external_reference"] == str(contract.id)
        assert preference["payer"]["email"] == "tenant-1@example.com"

    def test_landlord_without_token(self, client, test_db, use_gateway):
        contract = self._setup(test_db, token=None)
        handler = RecordingHandler()
        use_gateway(handler)

        response = client.post(
            "/api/mercado-pago/create-preference",
            json={"contract_id": contract.id, "tenant_id": "tenant-1"},
        )

        assert response.status_code == 400
        assert handler.requests == []

    def test_unknown_contract(self, client, use_gateway):
        use_gateway(RecordingHandler())

        response = client.post(
            "/api/mercado-pago/create-preference",
            json={"contract_id": 77, "tenant_id": "tenant-1"},
        )

        assert response.status_code == 404

    def test_gateway_rejection(self, client, test_db, use_gateway):
        contract = self._setup(test_db)
        use_gateway(RecordingHandler(status_code=400, payload={"message": "invalid items"}))

        response = client.post(
            "/api/mercado-pago/create-preference",
            json={"contract_id": contract.id, "tenant_id": "tenant-1"},
        )

        assert response.status_code == 502


# =============================================================================
# Account linking
# =============================================================================


class TestOAuthCallback:
    """Tests for GET /api/mercado-pago/callback."""

    def test_stores_token_and_redirects(self, client, test_db, use_gateway):
        make_landlord(test_db)
        use_gateway(RecordingHandler(payload={"access_token": "APP_USR-new", "user_id": 99}))

        response = client.get(
            "/api/mercado-pago/callback",
            params={"code": "auth-code", "state": "landlord-1"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"].endswith("/arrendador-dashboard/propiedades")
        test_db.expire_all()
        assert test_db.get(Landlord, "landlord-1").mercadopago_access_token == "APP_USR-new"

    def test_existing_token_skips_exchange(self, client, test_db, use_gateway):
        make_landlord(test_db, mercadopago_access_token="APP_USR-old")
        handler = RecordingHandler(payload={"access_token": "APP_USR-new"})
        use_gateway(handler)

        response = client.get(
            "/api/mercado-pago/callback",
            params={"code": "auth-code", "state": "landlord-1"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert handler.requests == []
        test_db.expire_all()
        assert test_db.get(Landlord, "landlord-1").mercadopago_access_token == "APP_USR-old"

    def test_failed_exchange_redirects_to_error_page(self, client, test_db, use_gateway):
        make_landlord(test_db)
        use_gateway(RecordingHandler(status_code=400, payload={"error": "invalid_grant"}))

        response = client.get(
            "/api/mercado-pago/callback",
            params={"code": "stale", "state": "landlord-1"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == f"{settings.FRONTEND_URL}/error"

    def test_missing_code_redirects_to_error_page(self, client, use_gateway):
        use_gateway(RecordingHandler())

        response = client.get(
            "/api/mercado-pago/callback",
            params={"state": "landlord-1"},
            follow_redirects=False,
        )

        assert response.headers["location"] == f"{settings.FRONTEND_URL}/error"

    def test_unknown_landlord_keeps_code_unused(self, client, use_gateway):
        handler = RecordingHandler(payload={"access_token": "APP_USR-new"})
        use_gateway(handler)

        response = client.get(
            "/api/mercado-pago/callback",
            params={"code": "auth-code", "state": "ghost"},
            follow_redirects=False,
        )

        assert response.headers["location"] == f"{settings.FRONTEND_URL}/error"
        assert handler.requests == []
