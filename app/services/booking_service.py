"""Business logic for bookings."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.booking import Booking, BookingStatus
from app.models.detailing_service import DetailingService


class BookingService:
    """Service for booking-related operations."""

    @staticmethod
    def get_bookings(db: Session, user_id: Optional[UUID] = None) -> List[Booking]:
        """Get bookings, newest appointment first. All bookings when user_id is None."""
        query = db.query(Booking)
        if user_id is not None:
            query = query.filter(Booking.user_id == user_id)
        return query.order_by(Booking.date.desc(), Booking.time.desc()).all()

    @staticmethod
    def get_booking(db: Session, booking_id: UUID) -> Optional[Booking]:
        """Get a booking by ID."""
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def create_booking(
        db: Session,
        user_id: UUID,
        service: DetailingService,
        date: str,
        time: str,
        vehicle_id: Optional[UUID] = None,
        location: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Booking:
        """
        Create a scheduled booking.

        The total price is taken from the service at booking time.
        """
        booking = Booking(
            user_id=user_id,
            service_id=service.id,
            vehicle_id=vehicle_id,
            date=date,
            time=time,
            location=location,
            notes=notes,
            total_price=service.price,
            status=BookingStatus.SCHEDULED,
            progress=0,
        )
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def update_booking(db: Session, booking_id: UUID, **updates) -> Optional[Booking]:
        """
        Apply non-None updates to a booking.

        Returns:
            Updated Booking object or None if not found
        """
        booking = db.query(Booking).filter(Booking.id == booking_id).first()
        if not booking:
            return None

        for field, value in updates.items():
            if value is not None:
                setattr(booking, field, value)

        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def cancel_booking(db: Session, booking_id: UUID) -> Optional[Booking]:
        """Mark a booking cancelled. Returns None if not found."""
        return BookingService.update_booking(
            db, booking_id, status=BookingStatus.CANCELLED
        )


# Singleton instance
booking_service = BookingService()
