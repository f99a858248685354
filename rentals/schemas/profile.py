"""Profile lookup schemas."""

from pydantic import BaseModel

from rentals.models.enums import ProfileRole


class ProfileQuery(BaseModel):
    """User id issued by the external auth provider."""

    user_id: str


class ProfileStatus(BaseModel):
    """Whether the user has a tenant or landlord profile."""

    has_profile: bool
    role: ProfileRole | None
