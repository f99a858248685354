"""API routes."""

from fastapi import APIRouter

from rentals.api.routes import (
    applications,
    appointments,
    auth,
    contracts,
    health,
    landlords,
    mercado_pago,
    payments,
    preferences,
    properties,
    property_media,
    tenants,
)

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router)
api_router.include_router(landlords.router)
api_router.include_router(tenants.router)
api_router.include_router(properties.router)
api_router.include_router(property_media.router)
api_router.include_router(contracts.router)
api_router.include_router(applications.router)
api_router.include_router(appointments.router)
api_router.include_router(preferences.router)
api_router.include_router(payments.router)
api_router.include_router(mercado_pago.router)
