"""Vehicle profile API routes — CRUD for the caller's vehicles."""

from typing import List

from fastapi import APIRouter, Depends, status

from bridgeclear.core.exceptions import EntityNotFoundException, StorageException
from bridgeclear.domain.repositories.vehicle_profile_repository import VehicleProfileRepository
from bridgeclear.domain.schemas.vehicle_profile import (
    VehicleProfileCreate,
    VehicleProfileRead,
    VehicleProfileUpdate,
)
from bridgeclear.interfaces.deps import get_current_user_id, get_vehicle_profile_repository

router = APIRouter(prefix="/vehicle-profiles", tags=["Vehicle Profiles"])


@router.get("", response_model=List[VehicleProfileRead])
def list_vehicle_profiles(
    repo: VehicleProfileRepository = Depends(get_vehicle_profile_repository),
    user_id: str = Depends(get_current_user_id),
):
    return [VehicleProfileRead.model_validate(p) for p in repo.get_for_user(user_id)]


@router.get("/{profile_id}", response_model=VehicleProfileRead)
def get_vehicle_profile(
    profile_id: int,
    repo: VehicleProfileRepository = Depends(get_vehicle_profile_repository),
):
    profile = repo.get_profile(profile_id)
    if profile is None:
        raise EntityNotFoundException("Vehicle profile not found", details={"id": profile_id})
    return VehicleProfileRead.model_validate(profile)


@router.post("", response_model=VehicleProfileRead, status_code=status.HTTP_201_CREATED)
def create_vehicle_profile(
    body: VehicleProfileCreate,
    repo: VehicleProfileRepository = Depends(get_vehicle_profile_repository),
    user_id: str = Depends(get_current_user_id),
):
    return VehicleProfileRead.model_validate(repo.create_for_user(body, user_id))


@router.patch("/{profile_id}", response_model=VehicleProfileRead)
def update_vehicle_profile(
    profile_id: int,
    body: VehicleProfileUpdate,
    repo: VehicleProfileRepository = Depends(get_vehicle_profile_repository),
):
    # Unknown ids are reported as a failed update (500), not 404
    try:
        profile = repo.update_profile(profile_id, body)
    except EntityNotFoundException as e:
        raise StorageException("Failed to update vehicle profile") from e
    return VehicleProfileRead.model_validate(profile)
