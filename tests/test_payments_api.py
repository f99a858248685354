"""Tests for payment endpoints and the monthly payment check."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from factories import make_contract, make_landlord, make_property, make_tenant
from rentals.models import Payment
from rentals.schemas.payment import MonthlyPaymentQuery
from rentals.services.payment import has_paid_this_month


@pytest.fixture
def contract(test_db):
    """An active contract with a 1,500,000 monthly rent."""
    make_landlord(test_db)
    make_tenant(test_db)
    prop = make_property(test_db)
    return make_contract(test_db, prop.id, monthly_rent=Decimal("1500000"))


class TestPaymentEndpoints:
    """Tests for /api/payments."""

    def test_amount_comes_from_contract(self, client, contract):
        response = client.post(
            "/api/payments/",
            json={"payment_id": "mp-123", "contract_id": contract.id, "tenant_auth_id": "tenant-1"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["mercadopago_payment_id"] == "mp-123"
        assert Decimal(data["amount"]) == Decimal("1500000")

    def test_duplicate_payment_id(self, client, contract):
        body = {"payment_id": "mp-123", "contract_id": contract.id, "tenant_auth_id": "tenant-1"}
        client.post("/api/payments/", json=body)

        response = client.post("/api/payments/", json=body)

        assert response.status_code == 409

    def test_unknown_contract(self, client, contract):
        response = client.post(
            "/api/payments/",
            json={"payment_id": "mp-1", "contract_id": 999, "tenant_auth_id": "tenant-1"},
        )
        assert response.status_code == 404

    def test_paid_this_month(self, client, contract):
        query = {"tenant_auth_id": "tenant-1", "contract_id": contract.id}
        assert client.post("/api/payments/this-month", json=query).json() == {"exists": False}

        client.post(
            "/api/payments/",
            json={"payment_id": "mp-9", "contract_id": contract.id, "tenant_auth_id": "tenant-1"},
        )

        assert client.post("/api/payments/this-month", json=query).json() == {"exists": True}

    def test_get_update_delete(self, client, contract):
        payment_id = client.post(
            "/api/payments/",
            json={"payment_id": "mp-5", "contract_id": contract.id, "tenant_auth_id": "tenant-1"},
        ).json()["id"]

        response = client.patch(f"/api/payments/{payment_id}", json={"amount": "1400000"})
        assert Decimal(response.json()["amount"]) == Decimal("1400000")

        assert len(client.get("/api/payments/").json()) == 1

        assert client.delete(f"/api/payments/{payment_id}").status_code == 200
        assert client.get(f"/api/payments/{payment_id}").status_code == 404
        assert client.get("/api/payments/").status_code == 404

    def test_negative_amount_rejected(self, client, contract):
        payment_id = client.post(
            "/api/payments/",
            json={"payment_id": "mp-6", "contract_id": contract.id, "tenant_auth_id": "tenant-1"},
        ).json()["id"]

        response = client.patch(f"/api/payments/{payment_id}", json={"amount": "-1"})

        assert response.status_code == 422


class TestMonthWindow:
    """Tests for the UTC month window of the monthly payment check."""

    def _pay(self, db, contract, when, mp_id):
        db.add(
            Payment(
                contract_id=contract.id,
                tenant_auth_id="tenant-1",
                amount=contract.monthly_rent,
                payment_date=when,
                mercadopago_payment_id=mp_id,
            )
        )
        db.commit()

    def test_previous_month_does_not_count(self, test_db, contract):
        self._pay(test_db, contract, datetime(2026, 4, 30, 23, 59, tzinfo=UTC), "mp-apr")
        query = MonthlyPaymentQuery(tenant_auth_id="tenant-1", contract_id=contract.id)

        assert has_paid_this_month(test_db, query, now=datetime(2026, 5, 10, tzinfo=UTC)) is False
        assert has_paid_this_month(test_db, query, now=datetime(2026, 4, 2, tzinfo=UTC)) is True

    def test_december_window(self, test_db, contract):
        self._pay(test_db, contract, datetime(2026, 12, 31, 12, tzinfo=UTC), "mp-dec")
        query = MonthlyPaymentQuery(tenant_auth_id="tenant-1", contract_id=contract.id)

        assert has_paid_this_month(test_db, query, now=datetime(2026, 12, 1, tzinfo=UTC)) is True
        assert has_paid_this_month(test_db, query, now=datetime(2027, 1, 1, tzinfo=UTC)) is False
