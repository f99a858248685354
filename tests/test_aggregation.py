"""Tests for the landlord and applicant aggregations."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytest

from factories import (
    make_application,
    make_contract,
    make_landlord,
    make_media,
    make_property,
    make_tenant,
)
from rentals.core.exceptions import BadRequestError, NotFoundError
from rentals.services.aggregation import (
    compute_demographics,
    compute_subscription_fee,
    get_active_tenants,
    get_candidates_by_landlord,
)
from rentals.services.queries import count_properties_by_landlord


def _applicant(age, industry):
    return SimpleNamespace(tenant=SimpleNamespace(age=age, industry=industry))


# =============================================================================
# Demographics
# =============================================================================


class TestComputeDemographics:
    """Tests for the age and industry breakdown."""

    def test_empty_input_yields_zero_buckets(self):
        result = compute_demographics([])

        assert [(g.group, g.count) for g in result.age_groups] == [
            ("18-25", 0),
            ("26-35", 0),
            ("36-45", 0),
            ("46+", 0),
        ]
        assert result.industries == []

    def test_one_applicant_per_bucket(self):
        applicants = [
            _applicant(20, None),
            _applicant(30, "Tech"),
            _applicant(40, "Tech"),
            _applicant(50, None),
        ]

        result = compute_demographics(applicants)

        assert [g.count for g in result.age_groups] == [1, 1, 1, 1]
        assert [(i.industry, i.count) for i in result.industries] == [("Otros", 2), ("Tech", 2)]

    def test_bucket_boundaries(self):
        ages = [18, 25, 26, 35, 36, 45, 46, 90]

        result = compute_demographics(_applicant(age, "Salud") for age in ages)

        assert [g.count for g in result.age_groups] == [2, 2, 2, 2]

    def test_underage_counts_as_youngest_bucket(self):
        result = compute_demographics([_applicant(16, "Tech")])

        assert result.age_groups[0].group == "18-25"
        assert result.age_groups[0].count == 1

    def test_missing_age_is_not_bucketed(self):
        result = compute_demographics([_applicant(None, "Tech")])

        assert sum(g.count for g in result.age_groups) == 0
        assert [(i.industry, i.count) for i in result.industries] == [("Tech", 1)]

    def test_industries_in_first_seen_order(self):
        applicants = [
            _applicant(30, "Salud"),
            _applicant(30, "Tech"),
            _applicant(30, ""),
            _applicant(30, "Salud"),
        ]

        result = compute_demographics(applicants)

        assert [(i.industry, i.count) for i in result.industries] == [
            ("Salud", 2),
            ("Tech", 1),
            ("Otros", 1),
        ]

    def test_totals_match_input(self):
        applicants = [_applicant(age, None) for age in (19, 22, 33, 47, 61)]

        result = compute_demographics(applicants)

        assert sum(g.count for g in result.age_groups) == 5
        assert sum(i.count for i in result.industries) == 5


# =============================================================================
# Subscription fee
# =============================================================================


class TestSubscriptionFee:
    """Tests for the per-property platform fee."""

    def test_fee_scales_with_property_count(self, test_db):
        make_landlord(test_db)
        for n in range(3):
            make_property(test_db, address=f"Carrera {n}")

        assert compute_subscription_fee(test_db, "landlord-1") == Decimal("300000")

    def test_unavailable_properties_are_billed(self, test_db):
        make_landlord(test_db)
        make_property(test_db, is_available=False)
        make_property(test_db)

        assert compute_subscription_fee(test_db, "landlord-1") == Decimal("200000")

    def test_no_properties_is_zero(self, test_db):
        make_landlord(test_db)

        assert compute_subscription_fee(test_db, "landlord-1") == 0

    def test_missing_id(self, test_db):
        with pytest.raises(BadRequestError):
            compute_subscription_fee(test_db, None)

    def test_unknown_landlord(self, test_db):
        with pytest.raises(NotFoundError):
            compute_subscription_fee(test_db, "ghost")

    def test_count_ignores_other_landlords(self, test_db):
        make_landlord(test_db)
        make_landlord(test_db, auth_id="landlord-2")
        make_property(test_db)
        make_property(test_db, landlord_auth_id="landlord-2")

        assert count_properties_by_landlord(test_db, "landlord-1") == 1


# =============================================================================
# Active tenants
# =============================================================================


class TestActiveTenants:
    """Tests for the active-tenant listing."""

    def test_one_record_per_active_contract(self, test_db):
        make_landlord(test_db)
        make_tenant(test_db, auth_id="tenant-1")
        make_tenant(test_db, auth_id="tenant-2")
        first = make_property(test_db, address="Calle 1")
        second = make_property(test_db, address="Calle 2")
        make_contract(test_db, first.id, tenant_auth_id="tenant-1", monthly_rent=Decimal("900000"))
        make_contract(test_db, second.id, tenant_auth_id="tenant-2")
        make_contract(test_db, second.id, tenant_auth_id="tenant-1", status="0")

        tenants = get_active_tenants(test_db, "landlord-1")

        assert len(tenants) == 2
        assert [t.auth_id for t in tenants] == ["tenant-1", "tenant-2"]
        assert tenants[0].current_property == "Calle 1"
        assert tenants[0].monthly_rent == Decimal("900000")
        assert tenants[1].current_property == "Calle 2"

    def test_dates_do_not_decide_activity(self, test_db):
        make_landlord(test_db)
        make_tenant(test_db)
        prop = make_property(test_db)
        past = datetime.now(UTC) - timedelta(days=800)
        make_contract(test_db, prop.id, start_date=past, end_date=past + timedelta(days=30))

        assert len(get_active_tenants(test_db, "landlord-1")) == 1

    def test_only_inactive_contracts(self, test_db):
        make_landlord(test_db)
        make_tenant(test_db)
        prop = make_property(test_db)
        make_contract(test_db, prop.id, status="0")

        with pytest.raises(NotFoundError, match="No active tenants found"):
            get_active_tenants(test_db, "landlord-1")

    def test_unknown_landlord(self, test_db):
        with pytest.raises(NotFoundError):
            get_active_tenants(test_db, "ghost")

    def test_other_landlords_contracts_excluded(self, test_db):
        make_landlord(test_db)
        make_landlord(test_db, auth_id="landlord-2")
        make_tenant(test_db)
        mine = make_property(test_db)
        theirs = make_property(test_db, landlord_auth_id="landlord-2")
        make_contract(test_db, mine.id)
        make_contract(test_db, theirs.id)

        assert len(get_active_tenants(test_db, "landlord-1")) == 1

    def test_repeated_calls_agree(self, test_db):
        make_landlord(test_db)
        make_tenant(test_db)
        prop = make_property(test_db)
        make_contract(test_db, prop.id)

        assert get_active_tenants(test_db, "landlord-1") == get_active_tenants(test_db, "landlord-1")


# =============================================================================
# Candidates
# =============================================================================


class TestCandidates:
    """Tests for the per-property candidate ranking."""

    def test_top_three_by_score_with_stable_ties(self, test_db):
        make_landlord(test_db)
        prop = make_property(test_db)
        ids = []
        for n, score in enumerate([0.5, 0.9, 0.7, 0.9, 0.1]):
            make_tenant(test_db, auth_id=f"tenant-{n}")
            ids.append(make_application(test_db, prop.id, tenant_auth_id=f"tenant-{n}", score=score).id)

        [summary] = get_candidates_by_landlord(test_db, "landlord-1")

        assert summary.total_applications == 5
        assert [c.id for c in summary.candidates] == [ids[1], ids[3], ids[2]]
        assert [c.score for c in summary.candidates] == [0.9, 0.9, 0.7]
        assert summary.candidates[0].tenant.auth_id == "tenant-1"

    def test_latest_media_and_summary_fields(self, test_db):
        make_landlord(test_db)
        prop = make_property(test_db, rooms=4, bathrooms=3, square_meters=120.0)
        now = datetime.now(UTC)
        make_media(test_db, prop.id, "https://cdn.example.com/new.jpg", upload_date=now)
        make_media(test_db, prop.id, "https://cdn.example.com/old.jpg", upload_date=now - timedelta(days=2))

        [summary] = get_candidates_by_landlord(test_db, "landlord-1")

        assert summary.media == "https://cdn.example.com/new.jpg"
        assert summary.address == prop.address
        assert summary.rooms == 4
        assert summary.bathrooms == 3
        assert summary.square_meters == 120.0
        assert summary.rent_price == Decimal("1500000")
        assert summary.total_applications == 0
        assert summary.candidates == []

    def test_no_media(self, test_db):
        make_landlord(test_db)
        make_property(test_db)

        [summary] = get_candidates_by_landlord(test_db, "landlord-1")

        assert summary.media is None

    def test_newest_property_first_and_unavailable_skipped(self, test_db):
        make_landlord(test_db)
        now = datetime.now(UTC)
        older = make_property(test_db, address="Old", created_at=now - timedelta(days=3))
        newer = make_property(test_db, address="New", created_at=now)
        make_property(test_db, address="Rented", is_available=False)

        summaries = get_candidates_by_landlord(test_db, "landlord-1")

        assert [s.id for s in summaries] == [newer.id, older.id]

    def test_applicant_without_tenant(self, test_db):
        make_landlord(test_db)
        prop = make_property(test_db)
        make_application(test_db, prop.id, tenant_auth_id=None, score=0.4)

        [summary] = get_candidates_by_landlord(test_db, "landlord-1")

        assert summary.candidates[0].tenant is None

    def test_blank_id(self, test_db):
        with pytest.raises(BadRequestError):
            get_candidates_by_landlord(test_db, "  ")

    def test_no_available_properties(self, test_db):
        make_landlord(test_db)
        make_property(test_db, is_available=False)

        with pytest.raises(NotFoundError):
            get_candidates_by_landlord(test_db, "landlord-1")

    def test_repeated_calls_agree(self, test_db):
        make_landlord(test_db)
        make_tenant(test_db)
        prop = make_property(test_db)
        make_application(test_db, prop.id, score=0.8)

        first = get_candidates_by_landlord(test_db, "landlord-1")
        second = get_candidates_by_landlord(test_db, "landlord-1")

        assert first == second
