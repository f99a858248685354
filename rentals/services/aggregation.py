"""Composite views over landlords, tenants, properties and applications."""

import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from sqlalchemy.orm import Session

from rentals.core.config import settings
from rentals.core.exceptions import BadRequestError, NotFoundError
from rentals.models.landlord import Landlord
from rentals.schemas.aggregation import (
    ActiveTenant,
    AgeGroupCount,
    Candidate,
    Demographics,
    IndustryCount,
    PropertyCandidates,
)
from rentals.schemas.tenant import TenantResponse
from rentals.services.queries import (
    count_properties_by_landlord,
    find_available_properties_with_top_applicants,
    find_landlord_with_active_contracts,
)

logger = logging.getLogger(__name__)

# (label, exclusive upper bound); the last bucket is open-ended
AGE_BUCKETS: tuple[tuple[str, int | None], ...] = (
    ("18-25", 26),
    ("26-35", 36),
    ("36-45", 46),
    ("46+", None),
)
DEFAULT_INDUSTRY = "Otros"
CANDIDATES_PER_PROPERTY = 3


def get_active_tenants(db: Session, landlord_auth_id: str) -> list[ActiveTenant]:
    """List tenants holding an active contract on any of the landlord's properties.

    Each record carries the tenant's profile, the contract's monthly rent and
    the address of the rented property, in property then contract order.

    Raises:
        NotFoundError: If the landlord does not exist or has no active tenants.

    """
    found = find_landlord_with_active_contracts(db, landlord_auth_id)

    tenants = [
        ActiveTenant(
            **TenantResponse.model_validate(contract.tenant).model_dump(),
            monthly_rent=contract.monthly_rent,
            current_property=contract.parent_property.address,
        )
        for contract in found.contracts
    ]
    if not tenants:
        raise NotFoundError("No active tenants found")

    logger.debug("Landlord %s has %d active tenants", landlord_auth_id, len(tenants))
    return tenants


def get_candidates_by_landlord(
    db: Session,
    landlord_auth_id: str | None,
) -> list[PropertyCandidates]:
    """Summarise each available property of a landlord with its top candidates.

    Raises:
        BadRequestError: If no landlord id is given.
        NotFoundError: If the landlord has no available properties.

    """
    if not landlord_auth_id or not landlord_auth_id.strip():
        raise BadRequestError("Landlord ID is required")

    rows = find_available_properties_with_top_applicants(
        db,
        landlord_auth_id,
        media_limit=1,
        applicant_limit=CANDIDATES_PER_PROPERTY,
    )
    if not rows:
        raise NotFoundError("No properties found for landlord")

    return [
        PropertyCandidates(
            id=row.property.id,
            media=row.media[0].media_url if row.media else None,
            address=row.property.address,
            rooms=row.property.rooms,
            square_meters=row.property.square_meters,
            total_applications=row.application_count,
            rent_price=row.property.rent_price,
            bathrooms=row.property.bathrooms,
            candidates=[Candidate.model_validate(a) for a in row.top_applications],
        )
        for row in rows
    ]


def _age_group(age: int) -> str:
    for label, upper in AGE_BUCKETS:
        if upper is None or age < upper:
            return label
    return AGE_BUCKETS[-1][0]


def compute_demographics(applications: Iterable[Any]) -> Demographics:
    """Break a set of applicants down by age group and industry.

    Every item must expose a non-null `tenant` with `age` and `industry`.
    Ages below 18 count towards the youngest bucket. Tenants without a recorded
    age are left out of the age table on purpose instead of being counted as
    "18-25", so the age totals can be lower than the industry totals. A missing
    industry counts as "Otros".
    Industries are listed in the order they are first seen.
    """
    age_counts = {label: 0 for label, _ in AGE_BUCKETS}
    industry_counts: dict[str, int] = {}

    for application in applications:
        tenant = application.tenant
        if tenant.age is not None:
            age_counts[_age_group(tenant.age)] += 1
        industry = tenant.industry or DEFAULT_INDUSTRY
        industry_counts[industry] = industry_counts.get(industry, 0) + 1

    return Demographics(
        age_groups=[AgeGroupCount(group=g, count=c) for g, c in age_counts.items()],
        industries=[IndustryCount(industry=i, count=c) for i, c in industry_counts.items()],
    )


def compute_subscription_fee(db: Session, landlord_auth_id: str | None) -> Decimal:
    """Compute a landlord's monthly platform fee.

    The fee is the unit rate times the number of properties the landlord owns,
    counting unavailable properties too.

    Raises:
        BadRequestError: If no landlord id is given.
        NotFoundError: If the landlord does not exist.

    """
    if not landlord_auth_id:
        raise BadRequestError("Landlord ID is required")

    if not db.get(Landlord, landlord_auth_id):
        raise NotFoundError(f"Landlord with ID {landlord_auth_id} not found")

    property_count = count_properties_by_landlord(db, landlord_auth_id)
    return settings.SUBSCRIPTION_UNIT_RATE * property_count
