"""Database models."""

from rentals.models.application import Application, ApplicationMedia, ApplicationReference
from rentals.models.appointment import Appointment
from rentals.models.contract import Contract, ContractDocument
from rentals.models.landlord import Landlord
from rentals.models.payment import Payment
from rentals.models.preference import LandlordPreference, TenantPreference
from rentals.models.property import Property, PropertyMedia
from rentals.models.tenant import Tenant

__all__ = [
    "Application",
    "ApplicationMedia",
    "ApplicationReference",
    "Appointment",
    "Contract",
    "ContractDocument",
    "Landlord",
    "LandlordPreference",
    "Payment",
    "Property",
    "PropertyMedia",
    "Tenant",
    "TenantPreference",
]
