"""Tests for vehicle profile persistence and API."""

import pytest

from bridgeclear.core.exceptions import EntityNotFoundException
from bridgeclear.domain.models.vehicle_profile import VehicleProfile
from bridgeclear.domain.schemas.vehicle_profile import VehicleProfileCreate, VehicleProfileUpdate
from bridgeclear.infrastructure.repositories.vehicle_profile_repository import SQLAlchemyVehicleProfileRepository


MY_TRUCK = {
    "name": "My Truck",
    "height": "13' 6\"",
    "heightInches": 162,
    "weight": "80,000",
    "length": "53'",
    "width": "8' 6\"",
}


@pytest.fixture
def repo(db):
    return SQLAlchemyVehicleProfileRepository(db, VehicleProfile)


class TestVehicleProfileRepository:

    def test_create_then_read_back(self, repo):
        created = repo.create_for_user(VehicleProfileCreate.model_validate(MY_TRUCK), "driver-1")

        profiles = repo.get_for_user("driver-1")
        assert len(profiles) == 1
        stored = profiles[0]
        assert stored.id == created.id
        assert stored.user_id == "driver-1"
        assert stored.name == "My Truck"
        assert stored.height == "13' 6\""
        assert stored.height_inches == 162
        assert stored.weight == "80,000"
        assert stored.length == "53'"
        assert stored.width == "8' 6\""

    def test_profiles_are_scoped_to_owner(self, repo):
        repo.create_for_user(VehicleProfileCreate.model_validate(MY_TRUCK), "driver-1")
        repo.create_for_user(VehicleProfileCreate.model_validate({**MY_TRUCK, "name": "Van"}), "driver-2")

        assert [p.name for p in repo.get_for_user("driver-2")] == ["Van"]
        assert repo.get_for_user("nobody") == []

    def test_partial_update_keeps_other_fields(self, repo):
        created = repo.create_for_user(VehicleProfileCreate.model_validate(MY_TRUCK), "driver-1")

        updated = repo.update_profile(created.id, VehicleProfileUpdate(name="Big Rig"))

        assert updated.name == "Big Rig"
        assert updated.height == "13' 6\""
        assert updated.height_inches == 162
        assert updated.width == "8' 6\""
        assert updated.user_id == "driver-1"

    def test_update_unknown_id(self, repo):
        with pytest.raises(EntityNotFoundException):
            repo.update_profile(999, VehicleProfileUpdate(name="Ghost"))

    def test_get_missing_profile(self, repo):
        assert repo.get_profile(42) is None


class TestVehicleProfilesAPI:

    def test_create_and_list(self, client):
        response = client.post("/api/vehicle-profiles", json=MY_TRUCK)
        assert response.status_code == 201
        created = response.json()
        assert created["id"] > 0
        assert created["userId"] == "demo-user"

        listed = client.get("/api/vehicle-profiles").json()
        assert created in listed

    def test_owner_cannot_be_set_by_client(self, client):
        response = client.post("/api/vehicle-profiles", json={**MY_TRUCK, "userId": "someone-else"})
        assert response.status_code == 201
        assert response.json()["userId"] == "demo-user"

    def test_get_by_id(self, client):
        created = client.post("/api/vehicle-profiles", json=MY_TRUCK).json()

        response = client.get(f"/api/vehicle-profiles/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing(self, client):
        response = client.get("/api/vehicle-profiles/12345")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "EntityNotFoundException"

    def test_get_non_numeric_id(self, client):
        assert client.get("/api/vehicle-profiles/abc").status_code == 400

    def test_create_missing_field(self, client):
        payload = {k: v for k, v in MY_TRUCK.items() if k != "heightInches"}
        assert client.post("/api/vehicle-profiles", json=payload).status_code == 400

    def test_create_requires_height_display(self, client):
        payload = {k: v for k, v in MY_TRUCK.items() if k != "height"}
        response = client.post("/api/vehicle-profiles", json=payload)
        assert response.status_code == 400
        assert client.get("/api/vehicle-profiles").json() == []

    def test_patch(self, client):
        created = client.post("/api/vehicle-profiles", json=MY_TRUCK).json()

        response = client.patch(f"/api/vehicle-profiles/{created['id']}", json={"heightInches": 150, "height": "12' 6\""})
        assert response.status_code == 200
        body = response.json()
        assert body["heightInches"] == 150
        assert body["height"] == "12' 6\""
        assert body["name"] == "My Truck"

    def test_patch_invalid(self, client):
        created = client.post("/api/vehicle-profiles", json=MY_TRUCK).json()
        response = client.patch(f"/api/vehicle-profiles/{created['id']}", json={"heightInches": "tall"})
        assert response.status_code == 400

    def test_patch_unknown_id_is_500(self, client):
        response = client.patch("/api/vehicle-profiles/999", json={"name": "Ghost"})
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "StorageException"

    def test_patch_null_rejected(self, client):
        created = client.post("/api/vehicle-profiles", json=MY_TRUCK).json()
        response = client.patch(f"/api/vehicle-profiles/{created['id']}", json={"name": None})
        assert response.status_code == 400
