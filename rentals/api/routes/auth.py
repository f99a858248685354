"""Profile lookup for users authenticated by the external provider."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.schemas.profile import ProfileQuery, ProfileStatus
from rentals.services.profile import verify_profile

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/verify-profile", response_model=ProfileStatus)
def verify_user_profile(query: ProfileQuery, db: Session = Depends(get_db)) -> ProfileStatus:
    """Tell whether the user has already created a tenant or landlord profile."""
    return verify_profile(db, query.user_id)
