"""
Integration tests for the Wirelib API.

Validates:
1. Health endpoint
2. Catalog listing, filtering, pagination and 404s
3. Pairwise and grouped compatibility
4. Ampacity lookup and its error codes
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from fastapi.testclient import TestClient

from backend.main import app


@pytest.fixture(scope="module")
def client():
    """Test client with catalogs loaded by the lifespan handler."""
    with TestClient(app) as client:
        yield client


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "wirelib-backend"}


class TestProtocolRoutes:
    """Test /api/library/protocols endpoints."""

    def test_list_all(self, client):
        data = client.get("/api/library/protocols").json()
        assert data["total"] == 31
        assert len(data["protocols"]) == 31

    def test_pagination(self, client):
        data = client.get("/api/library/protocols", params={"limit": 5, "offset": 5}).json()
        assert data["total"] == 31
        assert len(data["protocols"]) == 5
        assert data["protocols"][0]["protocol_id"] == "PROFIBUS-DP-001"

    def test_limit_out_of_range(self, client):
        assert client.get("/api/library/protocols", params={"limit": 0}).status_code == 422
        assert client.get("/api/library/protocols", params={"offset": -1}).status_code == 422

    def test_filter_by_category(self, client):
        data = client.get("/api/library/protocols", params={"category": "POWER_SYSTEM"}).json()
        assert data["total"] == 10

    def test_filter_by_media(self, client):
        data = client.get("/api/library/protocols", params={"media_type": "FIELDBUS_H1"}).json()
        assert [p["protocol_id"] for p in data["protocols"]] == ["FF-H1-001"]

    def test_unknown_category_rejected(self, client):
        response = client.get("/api/library/protocols", params={"category": "NOT_A_CATEGORY"})
        assert response.status_code == 422

    def test_get_protocol(self, client):
        data = client.get("/api/library/protocols/MODBUS-RTU-001").json()
        assert data["abbreviation"] == "MB-RTU"
        assert data["supported_media"] == ["RS485", "RS232"]
        assert data["max_distance"] == {"RS485": 1200, "RS232": 15}
        assert data["characteristic_impedance"] == 120

    def test_get_protocol_not_found(self, client):
        response = client.get("/api/library/protocols/NOPE-001")
        assert response.status_code == 404
        assert response.json()["detail"] == "Protocol not found"

    def test_protocol_categories(self, client):
        data = client.get("/api/library/protocol-categories").json()
        assert {"value": "FIELDBUS_ETHERNET", "display_name": "Industrial Ethernet"} in data["categories"]
        assert data["groups"]["Industrial Communication"] == ["FIELDBUS_SERIAL", "FIELDBUS_ETHERNET"]


class TestCableRoutes:
    """Test /api/library/cables endpoints."""

    def test_list_all(self, client):
        data = client.get("/api/library/cables").json()
        assert data["total"] == 40

    def test_search(self, client):
        data = client.get("/api/library/cables", params={"q": "thermocouple"}).json()
        assert data["total"] == 3

    def test_get_cable(self, client):
        data = client.get("/api/library/cables/CABLE-CAT6A-001").json()
        assert data["media_type"] == "COPPER_ETHERNET"
        assert data["shielding"] == "S/FTP"
        assert data["max_data_rate"] == 10_000_000_000
        assert data["pair_count"] == 4

    def test_get_cable_with_text_conductor_count(self, client):
        data = client.get("/api/library/cables/CABLE-GENERIC-001").json()
        assert data["conductor_count"] == "TBD"
        assert data["is_generic"] is True

    def test_get_cable_not_found(self, client):
        response = client.get("/api/library/cables/CABLE-NOPE")
        assert response.status_code == 404
        assert response.json()["detail"] == "Cable not found"

    def test_cable_categories(self, client):
        data = client.get("/api/library/cable-categories").json()
        assert len(data["categories"]) == 13
        assert data["groups"]["Power"] == ["POWER_LV", "POWER_MV", "POWER_HV"]


class TestCompatibilityRoutes:
    """Test /api/compatibility endpoints."""

    def test_verified_pair(self, client):
        data = client.get(
            "/api/compatibility",
            params={"protocol_id": "MODBUS-RTU-001", "cable_id": "CABLE-MB485-001"},
        ).json()
        assert data["level"] == "VERIFIED"
        assert data["display_name"] == "Verified Compatible"
        assert data["icon"] == "✅"
        assert data["requires_confirmation"] is False

    def test_impedance_mismatch(self, client):
        data = client.get(
            "/api/compatibility",
            params={"protocol_id": "PROFIBUS-DP-001", "cable_id": "CABLE-MB485-001"},
        ).json()
        assert data["level"] == "COMPATIBLE"
        assert "Protocol expects: 150Ω" in data["details"]

    def test_media_mismatch_requires_confirmation(self, client):
        data = client.get(
            "/api/compatibility",
            params={"protocol_id": "MODBUS-RTU-001", "cable_id": "CABLE-CAT6-001"},
        ).json()
        assert data["level"] == "UNLIKELY"
        assert data["requires_confirmation"] is True

    def test_missing_parameter(self, client):
        response = client.get("/api/compatibility", params={"protocol_id": "MODBUS-RTU-001"})
        assert response.status_code == 422

    def test_unknown_ids(self, client):
        response = client.get(
            "/api/compatibility",
            params={"protocol_id": "NOPE", "cable_id": "CABLE-MB485-001"},
        )
        assert response.status_code == 404
        response = client.get(
            "/api/compatibility",
            params={"protocol_id": "MODBUS-RTU-001", "cable_id": "NOPE"},
        )
        assert response.json()["detail"] == "Cable not found"

    def test_cables_for_protocol(self, client):
        data = client.get("/api/compatibility/protocols/PROFINET-001/cables").json()
        assert data["subject_id"] == "PROFINET-001"
        levels = [g["level"] for g in data["groups"]]
        assert sorted(levels) == sorted(["VERIFIED", "COMPATIBLE", "UNVERIFIED", "UNLIKELY", "PENDING"])
        entries = [e["id"] for g in data["groups"] for e in g["entries"]]
        assert len(entries) == 39
        assert "CABLE-GENERIC-001" not in entries

    def test_protocols_for_cable(self, client):
        data = client.get("/api/compatibility/cables/CABLE-MB485-001/protocols").json()
        groups = {g["level"]: [e["id"] for e in g["entries"]] for g in data["groups"]}
        assert "MODBUS-RTU-001" in groups["VERIFIED"]
        assert "PROFIBUS-DP-001" in groups["COMPATIBLE"]
        assert groups["UNVERIFIED"] == ["PROTO-USER-001"]
        assert groups["PENDING"] == []

    def test_grouped_unknown_id(self, client):
        assert client.get("/api/compatibility/cables/NOPE/protocols").status_code == 404


class TestAmpacityRoutes:
    """Test /api/ampacity."""

    def test_awg_default_unit(self, client):
        data = client.get("/api/ampacity", params={"size": "12"}).json()
        assert data["ampacity"] == 20
        assert data["installation_method"] == "IN_CONDUIT"

    def test_metric(self, client):
        data = client.get("/api/ampacity", params={"size": "2.5", "size_unit": "mm²"}).json()
        assert data["ampacity"] == 19
        assert data["conductor_temp_c"] == 70

    def test_no_rating(self, client):
        response = client.get("/api/ampacity", params={"size": "18", "size_unit": "AWG"})
        assert response.status_code == 404

    def test_bad_unit(self, client):
        response = client.get("/api/ampacity", params={"size": "12", "size_unit": "inches"})
        assert response.status_code == 400


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
