"""Application API routes."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.schemas.application import (
    ApplicationCreate,
    ApplicationCreateResponse,
    ApplicationDetailResponse,
    ApplicationMediaResponse,
    ApplicationReferenceResponse,
    ApplicationResponse,
    ApplicationsByPropertyResponse,
    ApplicationStatusUpdate,
    ApplicationUpdate,
    TenantApplicationResponse,
    TenantApplicationsResponse,
)
from rentals.schemas.common import Message
from rentals.services import application as application_service

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("/", response_model=ApplicationCreateResponse, status_code=status.HTTP_201_CREATED)
def create_application(
    application_data: ApplicationCreate,
    db: Session = Depends(get_db),
) -> ApplicationCreateResponse:
    """Submit an application with its media and references."""
    application, media, references = application_service.create_application(db, application_data)
    return ApplicationCreateResponse(
        application=ApplicationResponse.model_validate(application),
        media=[ApplicationMediaResponse.model_validate(m) for m in media],
        references=[ApplicationReferenceResponse.model_validate(r) for r in references],
    )


@router.get("/", response_model=list[ApplicationResponse])
def list_applications(db: Session = Depends(get_db)) -> list[ApplicationResponse]:
    """List all applications."""
    applications = application_service.get_applications(db)
    return [ApplicationResponse.model_validate(a) for a in applications]


@router.get("/property/{property_id}", response_model=ApplicationsByPropertyResponse)
def list_applications_for_property(
    property_id: int,
    db: Session = Depends(get_db),
) -> ApplicationsByPropertyResponse:
    """List a property's applications with the applicants' demographics."""
    applications, demographics = application_service.get_applications_for_property(
        db, property_id
    )
    return ApplicationsByPropertyResponse(
        applications=[ApplicationDetailResponse.model_validate(a) for a in applications],
        demographics=demographics,
    )


@router.get("/tenant/{tenant_auth_id}", response_model=TenantApplicationsResponse)
def list_applications_for_tenant(
    tenant_auth_id: str,
    year: int | None = Query(None, description="Calendar year the applications were submitted"),
    db: Session = Depends(get_db),
) -> TenantApplicationsResponse:
    """List the applications a tenant submitted in a given year."""
    applications = application_service.get_applications_for_tenant_in_year(
        db, tenant_auth_id, year
    )
    return TenantApplicationsResponse(
        applications=[
            TenantApplicationResponse(
                application=ApplicationResponse.model_validate(a),
                references=[ApplicationReferenceResponse.model_validate(r) for r in a.references],
                documents=[ApplicationMediaResponse.model_validate(m) for m in a.media],
            )
            for a in applications
        ]
    )


@router.patch("/status/{application_id}", response_model=ApplicationResponse)
def update_application_status(
    application_id: int,
    status_data: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
) -> ApplicationResponse:
    """Accept, reject or reopen an application."""
    application = application_service.update_application(db, application_id, status_data)
    return ApplicationResponse.model_validate(application)


@router.get("/{application_id}", response_model=ApplicationDetailResponse)
def get_application(
    application_id: int,
    db: Session = Depends(get_db),
) -> ApplicationDetailResponse:
    """Get an application with references, media and applicant."""
    application = application_service.get_application_detail(db, application_id)
    return ApplicationDetailResponse.model_validate(application)


@router.patch("/{application_id}", response_model=ApplicationResponse)
def update_application(
    application_id: int,
    application_data: ApplicationUpdate,
    db: Session = Depends(get_db),
) -> ApplicationResponse:
    """Update an application."""
    application = application_service.update_application(db, application_id, application_data)
    return ApplicationResponse.model_validate(application)


@router.delete("/{application_id}", response_model=Message)
def delete_application(application_id: int, db: Session = Depends(get_db)) -> Message:
    """Withdraw an application."""
    application_service.delete_application(db, application_id)
    return Message(message="Application successfully deleted")
