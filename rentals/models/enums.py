"""Enum definitions for contracts, applications and profiles."""

from enum import Enum


class ContractStatus(str, Enum):
    """Contract lifecycle flag as stored on the contract row."""

    ACTIVE = "1"
    INACTIVE = "0"


class ApplicationStatus(str, Enum):
    """Review state of a tenant's application."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Gender(str, Enum):
    """Accepted landlord/tenant gender values."""

    MALE = "Masculino"
    FEMALE = "Femenino"


class ProfileRole(str, Enum):
    """Role a signed-in user has a profile for."""

    TENANT = "Tenant"
    LANDLORD = "Landlord"
