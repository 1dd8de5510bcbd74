"""API endpoints for booking appointments."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.schemas import BookingCreate, BookingRead, BookingUpdate
from app.database import get_db
from app.models.booking import BookingStatus
from app.services.auth.dependencies import ensure_owner_or_admin, require_auth
from app.services.auth.sessions import SessionUser
from app.services.booking_service import booking_service
from app.services.catalog_service import catalog_service
from app.services.vehicle_service import vehicle_service

router = APIRouter(prefix="/api/bookings", tags=["bookings"])

# Fields only staff may change on an existing booking
ADMIN_ONLY_FIELDS = {"progress", "status"}


def _get_owned_booking(db: Session, booking_id: UUID, user: SessionUser):
    booking = booking_service.get_booking(db, booking_id)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    ensure_owner_or_admin(user, booking.user_id)
    return booking


@router.get("", response_model=List[BookingRead])
async def list_bookings(
    user_id: Optional[UUID] = Query(None),
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """
    List bookings.

    Regular users see their own. Admins see everything, or one user's
    bookings when ``user_id`` is given.
    """
    if user.is_admin:
        return booking_service.get_bookings(db, user_id)

    ensure_owner_or_admin(user, user_id or user.id)
    return booking_service.get_bookings(db, user.id)


@router.get("/{booking_id}", response_model=BookingRead)
async def get_booking(
    booking_id: UUID,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    return _get_owned_booking(db, booking_id, user)


@router.post("", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
async def create_booking(
    body: BookingCreate,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """Book a service for one of the caller's vehicles."""
    service = catalog_service.get_service(db, body.service_id)
    if not service or not service.is_active:
        raise HTTPException(status_code=400, detail="Service is not available")

    if body.vehicle_id is not None:
        vehicle = vehicle_service.get_vehicle(db, body.vehicle_id)
        if not vehicle:
            raise HTTPException(status_code=400, detail="Vehicle not found")
        ensure_owner_or_admin(user, vehicle.user_id)

    return booking_service.create_booking(
        db,
        user_id=user.id,
        service=service,
        date=body.date,
        time=body.time,
        vehicle_id=body.vehicle_id,
        location=body.location,
        notes=body.notes,
    )


@router.patch("/{booking_id}", response_model=BookingRead)
async def update_booking(
    booking_id: UUID,
    body: BookingUpdate,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """Reschedule or edit a booking. Status and progress are staff-only."""
    booking = _get_owned_booking(db, booking_id, user)
    if booking.status == BookingStatus.CANCELLED:
        raise HTTPException(status_code=409, detail="Booking is cancelled")

    updates = body.model_dump(exclude_unset=True)
    staff_changes = {f for f in ADMIN_ONLY_FIELDS if updates.get(f) is not None}
    if not user.is_admin and staff_changes:
        raise HTTPException(status_code=403, detail="Admin access required")

    return booking_service.update_booking(db, booking_id, **updates)


@router.post("/{booking_id}/cancel")
async def cancel_booking(
    booking_id: UUID,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    _get_owned_booking(db, booking_id, user)
    booking_service.cancel_booking(db, booking_id)
    return {"success": True}
