"""Application service for business logic."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session, joinedload, selectinload

from rentals.core.exceptions import BadRequestError, NotFoundError
from rentals.models.application import Application, ApplicationMedia, ApplicationReference
from rentals.schemas.aggregation import Demographics
from rentals.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    ApplicationUpdate,
)
from rentals.services.aggregation import compute_demographics
from rentals.services.property import get_property
from rentals.services.tenant import get_tenant

logger = logging.getLogger(__name__)


def create_application(
    db: Session,
    application_data: ApplicationCreate,
) -> tuple[Application, list[ApplicationMedia], list[ApplicationReference]]:
    """Submit an application together with its media and references."""
    get_property(db, application_data.property_id)
    get_tenant(db, application_data.tenant_auth_id)

    application = Application(
        property_id=application_data.property_id,
        tenant_auth_id=application_data.tenant_auth_id,
        status=application_data.status.value,
        score=application_data.score,
        personal_description=application_data.personal_description,
    )
    db.add(application)
    db.flush()  # Get application.id

    media = [
        ApplicationMedia(
            application_id=application.id,
            media_type=item.media_type,
            media_url=item.media_url,
        )
        for item in application_data.media
    ]
    references = [
        ApplicationReference(application_id=application.id, **ref.model_dump())
        for ref in application_data.references
    ]
    db.add_all(media)
    db.add_all(references)

    db.commit()
    db.refresh(application)
    for row in (*media, *references):
        db.refresh(row)
    logger.info(
        "Tenant %s applied to property %d (application %d)",
        application.tenant_auth_id,
        application.property_id,
        application.id,
    )
    return application, media, references


def get_application(db: Session, application_id: int) -> Application:
    """Get an application by ID."""
    application = db.query(Application).filter(Application.id == application_id).first()
    if not application:
        raise NotFoundError(f"Application with ID {application_id} not found")
    return application


def get_application_detail(db: Session, application_id: int) -> Application:
    """Get an application with its references, media and applicant."""
    application = (
        db.query(Application)
        .filter(Application.id == application_id)
        .options(
            selectinload(Application.references),
            selectinload(Application.media),
            joinedload(Application.tenant),
        )
        .first()
    )
    if not application:
        raise NotFoundError(f"Application with ID {application_id} not found")
    return application


def get_applications(db: Session) -> list[Application]:
    """Get all applications."""
    applications = db.query(Application).order_by(Application.id).all()
    if not applications:
        raise NotFoundError("No applications found")
    return applications


def get_applications_for_property(
    db: Session,
    property_id: int,
) -> tuple[list[Application], Demographics]:
    """Get a property's applications and the demographics of their applicants.

    Applications without a tenant are listed but left out of the demographics.
    """
    applications = (
        db.query(Application)
        .filter(Application.property_id == property_id)
        .options(
            selectinload(Application.references),
            selectinload(Application.media),
            joinedload(Application.tenant),
        )
        .order_by(Application.id)
        .all()
    )
    if not applications:
        raise NotFoundError("No applications found for the property")

    demographics = compute_demographics(a for a in applications if a.tenant is not None)
    return applications, demographics


def get_applications_for_tenant_in_year(
    db: Session,
    tenant_auth_id: str,
    year: int | None,
) -> list[Application]:
    """Get the applications a tenant submitted during a calendar year (UTC)."""
    if year is None:
        raise BadRequestError("Year is required")

    year_start = datetime(year, 1, 1, tzinfo=UTC)
    next_year_start = datetime(year + 1, 1, 1, tzinfo=UTC)
    return (
        db.query(Application)
        .filter(
            Application.tenant_auth_id == tenant_auth_id,
            Application.created_at >= year_start,
            Application.created_at < next_year_start,
        )
        .options(selectinload(Application.references), selectinload(Application.media))
        .order_by(Application.created_at, Application.id)
        .all()
    )


def update_application(
    db: Session,
    application_id: int,
    application_data: ApplicationUpdate | ApplicationStatusUpdate,
) -> Application:
    """Update an application (or only its status)."""
    application = get_application(db, application_id)

    update_data = application_data.model_dump(exclude_unset=True)
    if update_data.get("status") is not None:
        update_data["status"] = update_data["status"].value
    for field, value in update_data.items():
        setattr(application, field, value)

    db.commit()
    db.refresh(application)
    return application


def delete_application(db: Session, application_id: int) -> None:
    """Delete an application with its media and references."""
    application = get_application(db, application_id)

    db.query(ApplicationMedia).filter(ApplicationMedia.application_id == application_id).delete(
        synchronize_session=False
    )
    db.query(ApplicationReference).filter(
        ApplicationReference.application_id == application_id
    ).delete(synchronize_session=False)
    db.expire(application, ["media", "references"])
    db.delete(application)
    db.commit()
