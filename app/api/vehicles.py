"""API endpoints for customer vehicles."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.api.schemas import VehicleCreate, VehicleRead, VehicleUpdate
from app.database import get_db
from app.services.auth.dependencies import ensure_owner_or_admin, require_auth
from app.services.auth.sessions import SessionUser
from app.services.vehicle_service import vehicle_service

router = APIRouter(prefix="/api/vehicles", tags=["vehicles"])


def _get_owned_vehicle(db: Session, vehicle_id: UUID, user: SessionUser):
    vehicle = vehicle_service.get_vehicle(db, vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    ensure_owner_or_admin(user, vehicle.user_id)
    return vehicle


@router.get("", response_model=List[VehicleRead])
async def list_vehicles(
    user_id: Optional[UUID] = Query(None),
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """List the caller's vehicles. Admins may list another user's."""
    target = user_id or user.id
    ensure_owner_or_admin(user, target)
    return vehicle_service.get_user_vehicles(db, target)


@router.get("/{vehicle_id}", response_model=VehicleRead)
async def get_vehicle(
    vehicle_id: UUID,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    return _get_owned_vehicle(db, vehicle_id, user)


@router.post("", response_model=VehicleRead, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    body: VehicleCreate,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """Add a vehicle owned by the caller."""
    return vehicle_service.create_vehicle(db, user.id, **body.model_dump())


@router.patch("/{vehicle_id}", response_model=VehicleRead)
async def update_vehicle(
    vehicle_id: UUID,
    body: VehicleUpdate,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    _get_owned_vehicle(db, vehicle_id, user)
    return vehicle_service.update_vehicle(
        db, vehicle_id, **body.model_dump(exclude_unset=True)
    )


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(
    vehicle_id: UUID,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    _get_owned_vehicle(db, vehicle_id, user)
    vehicle_service.delete_vehicle(db, vehicle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
