"""Shared FastAPI dependencies."""

from collections.abc import Iterator

from rentals.services.mercado_pago import MercadoPagoClient


def get_payment_gateway() -> Iterator[MercadoPagoClient]:
    """Dependency for getting a Mercado Pago client."""
    client = MercadoPagoClient()
    try:
        yield client
    finally:
        client.close()
