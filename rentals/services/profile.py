"""Profile lookup for users signed in through the external auth provider."""

from sqlalchemy.orm import Session

from rentals.models.enums import ProfileRole
from rentals.models.landlord import Landlord
from rentals.models.tenant import Tenant
from rentals.schemas.profile import ProfileStatus


def verify_profile(db: Session, user_id: str) -> ProfileStatus:
    """Report whether a user has a tenant or landlord profile.

    A tenant profile takes precedence when both exist.
    """
    if db.query(Tenant).filter(Tenant.auth_id == user_id).first():
        return ProfileStatus(has_profile=True, role=ProfileRole.TENANT)
    if db.query(Landlord).filter(Landlord.auth_id == user_id).first():
        return ProfileStatus(has_profile=True, role=ProfileRole.LANDLORD)
    return ProfileStatus(has_profile=False, role=None)
