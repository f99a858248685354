"""Tests for landlord and tenant preference endpoints."""

from decimal import Decimal

from factories import make_landlord, make_tenant


class TestLandlordPreferences:
    """Tests for /api/preferences/landlord."""

    def test_crud(self, client, test_db):
        make_landlord(test_db)

        response = client.post(
            "/api/preferences/landlord/",
            json={
                "landlord_auth_id": "landlord-1",
                "preferred_industry": "Tech",
                "min_age": 25,
                "max_age": 40,
            },
        )
        assert response.status_code == 201
        preference = response.json()["preference"]
        assert preference["landlord"] == {"first_name": "Laura", "last_name": "Gomez"}

        response = client.patch(
            f"/api/preferences/landlord/{preference['id']}", json={"min_score": 0.6}
        )
        assert response.json()["preference"]["min_score"] == 0.6

        listed = client.get("/api/preferences/landlord/by-landlord/landlord-1").json()
        assert [p["id"] for p in listed] == [preference["id"]]

        assert client.delete(f"/api/preferences/landlord/{preference['id']}").status_code == 200
        assert client.get(f"/api/preferences/landlord/{preference['id']}").status_code == 404

    def test_inverted_age_range(self, client, test_db):
        make_landlord(test_db)
        response = client.post(
            "/api/preferences/landlord/",
            json={"landlord_auth_id": "landlord-1", "min_age": 50, "max_age": 30},
        )
        assert response.status_code == 422

    def test_unknown_landlord(self, client):
        response = client.post(
            "/api/preferences/landlord/", json={"landlord_auth_id": "ghost"}
        )
        assert response.status_code == 404

    def test_list_empty(self, client, test_db):
        make_landlord(test_db)
        response = client.get("/api/preferences/landlord/by-landlord/landlord-1")
        assert response.status_code == 404


class TestTenantPreferences:
    """Tests for /api/preferences/tenant."""

    def test_crud(self, client, test_db):
        make_tenant(test_db)

        response = client.post(
            "/api/preferences/tenant/",
            json={
                "tenant_auth_id": "tenant-1",
                "city": "Bogota",
                "property_type": "Apartamento",
                "max_rent": "2000000",
                "min_rooms": 2,
            },
        )
        assert response.status_code == 201
        preference = response.json()["preference"]
        assert preference["tenant"]["email"] == "tenant-1@example.com"
        assert Decimal(preference["max_rent"]) == Decimal("2000000")

        response = client.patch(f"/api/preferences/tenant/{preference['id']}", json={"city": "Cali"})
        assert response.json()["preference"]["city"] == "Cali"

        listed = client.get("/api/preferences/tenant/by-tenant/tenant-1").json()
        assert len(listed) == 1

        assert client.delete(f"/api/preferences/tenant/{preference['id']}").status_code == 200
        assert client.get("/api/preferences/tenant/by-tenant/tenant-1").status_code == 404
