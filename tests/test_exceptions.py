"""Tests for the exception hierarchy and its HTTP rendering."""

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from rentals.core.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    PaymentGatewayError,
    RentalsError,
    register_exception_handlers,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain and status codes."""

    def test_rentals_error_is_exception(self) -> None:
        assert isinstance(RentalsError("test"), Exception)
        assert RentalsError("test").status_code == 500

    def test_status_codes(self) -> None:
        assert NotFoundError("x").status_code == 404
        assert BadRequestError("x").status_code == 400
        assert ConflictError("x").status_code == 409
        assert PaymentGatewayError("x").status_code == 502

    def test_subclasses_are_rentals_errors(self) -> None:
        for cls in (NotFoundError, BadRequestError, ConflictError, PaymentGatewayError):
            assert isinstance(cls("x"), RentalsError)

    def test_exception_message(self) -> None:
        err = NotFoundError("Landlord with ID l-1 not found")
        assert str(err) == "Landlord with ID l-1 not found"
        assert err.detail == "Landlord with ID l-1 not found"

    def test_gateway_error_keeps_upstream_details(self) -> None:
        err = PaymentGatewayError("rejected", upstream_status=401, response={"message": "no"})
        assert err.upstream_status == 401
        assert err.response == {"message": "no"}


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/missing")
    def missing():
        raise NotFoundError("No active tenants found")

    @app.get("/duplicate")
    def duplicate():
        raise IntegrityError("INSERT INTO payments", {}, Exception("UNIQUE constraint failed"))

    @app.get("/gateway")
    def gateway():
        raise PaymentGatewayError("Mercado Pago returned 500")

    return app


class TestExceptionHandlers:
    """Test the JSON rendering of handled errors."""

    def test_domain_error(self) -> None:
        response = TestClient(_app()).get("/missing")
        assert response.status_code == 404
        assert response.json() == {"detail": "No active tenants found"}

    def test_integrity_error_is_conflict(self) -> None:
        response = TestClient(_app()).get("/duplicate")
        assert response.status_code == 409
        assert response.json() == {"detail": "Duplicate key error"}

    def test_gateway_error(self) -> None:
        response = TestClient(_app()).get("/gateway")
        assert response.status_code == 502
