"""Tests for the bridges API and the bridge repository queries."""

from sqlalchemy.exc import SQLAlchemyError

from bridgeclear.domain.models.bridge import Bridge
from bridgeclear.domain.schemas.bridge import BridgeCreate
from bridgeclear.infrastructure.repositories.bridge_repository import SQLAlchemyBridgeRepository
from bridgeclear.interfaces.deps import get_bridge_repository
from bridgeclear.main import app


NEW_BRIDGE = {
    "name": "Storrow Drive Overpass",
    "latitude": 42.3550,
    "longitude": -71.0700,
    "clearanceHeight": "10' 0\"",
    "clearanceInches": 120,
    "state": "MA",
    "city": "Boston",
    "roadName": "Storrow Drive",
}


class TestBridgeRepository:
    """Geofence and clearance predicates."""

    def test_below_clearance_is_inclusive(self, seeded_db):
        repo = SQLAlchemyBridgeRepository(seeded_db, Bridge)
        all_bridges = repo.get_all()

        for threshold in (0, 138, 145, 150, 152, 156, 200):
            expected = {b.id for b in all_bridges if b.clearance_inches <= threshold}
            assert {b.id for b in repo.get_below_clearance(threshold)} == expected

    def test_in_bounds_includes_edges(self, seeded_db):
        repo = SQLAlchemyBridgeRepository(seeded_db, Bridge)

        # Box whose corners sit exactly on the Holland Tunnel Approach
        bridges = repo.get_in_bounds(40.7128, 40.7128, -74.0060, -74.0060)
        assert [b.name for b in bridges] == ["Holland Tunnel Approach"]

    def test_in_bounds_matches_brute_force(self, seeded_db):
        repo = SQLAlchemyBridgeRepository(seeded_db, Bridge)
        box = (40.70, 40.76, -74.01, -73.96)

        expected = {
            b.id for b in repo.get_all()
            if box[0] <= b.latitude <= box[1] and box[2] <= b.longitude <= box[3]
        }
        assert {b.id for b in repo.get_in_bounds(*box)} == expected
        assert expected  # box is not empty

    def test_create_bridge(self, db):
        repo = SQLAlchemyBridgeRepository(db, Bridge)
        bridge = repo.create_bridge(BridgeCreate.model_validate(NEW_BRIDGE))

        assert bridge.id is not None
        assert repo.count() == 1
        assert repo.get_by_id(bridge.id).road_name == "Storrow Drive"


class TestBridgesAPI:
    """HTTP contract for /api/bridges."""

    def test_list_bridges(self, client):
        response = client.get("/api/bridges")
        assert response.status_code == 200
        assert len(response.json()) == 8

    def test_camel_case_fields(self, client):
        bridge = client.get("/api/bridges").json()[0]
        assert {"id", "clearanceHeight", "clearanceInches", "roadName"} <= set(bridge)

    def test_below_clearance_150(self, client):
        response = client.get("/api/bridges/below-clearance/150")
        assert response.status_code == 200
        inches = sorted(b["clearanceInches"] for b in response.json())
        assert inches == [138, 140, 144, 145, 148]

    def test_below_clearance_non_numeric(self, client):
        response = client.get("/api/bridges/below-clearance/tall")
        assert response.status_code == 400

    def test_in_bounds(self, client):
        response = client.get(
            "/api/bridges/in-bounds",
            params={"minLat": 40.67, "maxLat": 40.70, "minLng": -74.02, "maxLng": -73.94},
        )
        assert response.status_code == 200
        names = {b["name"] for b in response.json()}
        assert names == {"Atlantic Ave Overpass", "Brooklyn Battery Tunnel"}

    def test_in_bounds_missing_parameter(self, client):
        response = client.get(
            "/api/bridges/in-bounds",
            params={"minLat": 40.67, "maxLat": 40.70, "minLng": -74.02},
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ValidationException"

    def test_create_bridge(self, client):
        response = client.post("/api/bridges", json=NEW_BRIDGE)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] > 0
        assert body["clearanceHeight"] == "10' 0\""
        assert len(client.get("/api/bridges").json()) == 9

    def test_create_bridge_requires_display_height(self, client):
        payload = {k: v for k, v in NEW_BRIDGE.items() if k != "clearanceHeight"}
        response = client.post("/api/bridges", json=payload)
        assert response.status_code == 400
        details = response.json()["error"]["details"]
        assert any("clearanceHeight" in d["loc"] for d in details)
        assert len(client.get("/api/bridges").json()) == 8

    def test_create_bridge_missing_field(self, client):
        payload = {k: v for k, v in NEW_BRIDGE.items() if k != "roadName"}
        response = client.post("/api/bridges", json=payload)
        assert response.status_code == 400
        details = response.json()["error"]["details"]
        assert any("roadName" in d["loc"] for d in details)

    def test_create_bridge_wrong_type(self, client):
        response = client.post("/api/bridges", json={**NEW_BRIDGE, "clearanceInches": "very low"})
        assert response.status_code == 400

    def test_storage_error_is_500(self, client):
        class BrokenRepository:
            def get_all(self):
                raise SQLAlchemyError("connection lost")

        app.dependency_overrides[get_bridge_repository] = lambda: BrokenRepository()
        response = client.get("/api/bridges")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "StorageException"
        assert "connection lost" not in error["message"]
