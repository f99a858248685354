"""Composite reads backing the landlord and applicant aggregations.

Related rows are loaded in bulk and grouped in Python, so the order of every
returned collection follows the driving query and never depends on how the
database interleaves joined rows.
"""

from dataclasses import dataclass, field

from sqlalchemy import func
from sqlalchemy.orm import Session, contains_eager, joinedload

from rentals.core.exceptions import NotFoundError
from rentals.models.application import Application
from rentals.models.contract import Contract
from rentals.models.enums import ContractStatus
from rentals.models.landlord import Landlord
from rentals.models.property import Property, PropertyMedia


@dataclass(frozen=True)
class LandlordActiveContracts:
    """A landlord and the active contracts on its properties."""

    landlord: Landlord
    contracts: list[Contract] = field(default_factory=list)


@dataclass(frozen=True)
class PropertyApplicants:
    """An available property with its latest media and best-scored applications."""

    property: Property
    media: list[PropertyMedia]
    top_applications: list[Application]
    application_count: int


def active_contract_clause():
    """SQL condition selecting contracts currently in force.

    A contract is active when its status flag is set; start and end dates are
    informational only.
    """
    return Contract.status == ContractStatus.ACTIVE.value


def find_landlord_with_active_contracts(
    db: Session,
    landlord_auth_id: str,
) -> LandlordActiveContracts:
    """Load a landlord and its active contracts with property and tenant.

    Contracts are ordered by property id, then contract id.

    Raises:
        NotFoundError: If the landlord does not exist.

    """
    landlord = db.get(Landlord, landlord_auth_id)
    if not landlord:
        raise NotFoundError(f"Landlord with ID {landlord_auth_id} not found")

    contracts = (
        db.query(Contract)
        .join(Contract.parent_property)
        .filter(
            Property.landlord_auth_id == landlord_auth_id,
            active_contract_clause(),
        )
        .options(
            contains_eager(Contract.parent_property),
            joinedload(Contract.tenant),
        )
        .order_by(Property.id, Contract.id)
        .all()
    )
    return LandlordActiveContracts(landlord=landlord, contracts=contracts)


def find_available_properties_with_top_applicants(
    db: Session,
    landlord_auth_id: str,
    media_limit: int = 1,
    applicant_limit: int = 3,
) -> list[PropertyApplicants]:
    """Load a landlord's available properties with media and ranked applications.

    Properties come newest first. Media are the most recently uploaded
    `media_limit` items. Applications are ordered by score descending with ties
    kept in insertion order, and cut to `applicant_limit`; the full count is
    reported separately.
    """
    properties = (
        db.query(Property)
        .filter(
            Property.landlord_auth_id == landlord_auth_id,
            Property.is_available.is_(True),
        )
        .order_by(Property.created_at.desc(), Property.id.desc())
        .all()
    )
    if not properties:
        return []

    property_ids = [p.id for p in properties]

    media_by_property: dict[int, list[PropertyMedia]] = {}
    media_rows = (
        db.query(PropertyMedia)
        .filter(PropertyMedia.property_id.in_(property_ids))
        .order_by(PropertyMedia.upload_date.desc(), PropertyMedia.id.desc())
    )
    for media in media_rows:
        bucket = media_by_property.setdefault(media.property_id, [])
        if len(bucket) < media_limit:
            bucket.append(media)

    applications_by_property: dict[int, list[Application]] = {}
    application_rows = (
        db.query(Application)
        .filter(Application.property_id.in_(property_ids))
        .options(joinedload(Application.tenant))
        .order_by(Application.score.desc(), Application.id)
    )
    for application in application_rows:
        applications_by_property.setdefault(application.property_id, []).append(application)

    result: list[PropertyApplicants] = []
    for prop in properties:
        applications = applications_by_property.get(prop.id, [])
        result.append(
            PropertyApplicants(
                property=prop,
                media=media_by_property.get(prop.id, []),
                top_applications=applications[:applicant_limit],
                application_count=len(applications),
            )
        )
    return result


def count_properties_by_landlord(db: Session, landlord_auth_id: str) -> int:
    """Count every property owned by a landlord, available or not."""
    return (
        db.query(func.count(Property.id))
        .filter(Property.landlord_auth_id == landlord_auth_id)
        .scalar()
    ) or 0
