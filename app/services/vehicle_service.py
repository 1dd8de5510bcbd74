"""Business logic for customer vehicles."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.vehicle import Vehicle


class VehicleService:
    """Service for vehicle-related operations."""

    @staticmethod
    def get_user_vehicles(db: Session, user_id: UUID) -> List[Vehicle]:
        """Get a user's vehicles, default vehicle first."""
        return (
            db.query(Vehicle)
            .filter(Vehicle.user_id == user_id)
            .order_by(Vehicle.is_default.desc(), Vehicle.created_at)
            .all()
        )

    @staticmethod
    def get_vehicle(db: Session, vehicle_id: UUID) -> Optional[Vehicle]:
        """Get a vehicle by ID."""
        return db.query(Vehicle).filter(Vehicle.id == vehicle_id).first()

    @staticmethod
    def _clear_default(db: Session, user_id: UUID, keep_id: Optional[UUID] = None) -> None:
        query = db.query(Vehicle).filter(
            Vehicle.user_id == user_id, Vehicle.is_default.is_(True)
        )
        if keep_id is not None:
            query = query.filter(Vehicle.id != keep_id)
        query.update({Vehicle.is_default: False}, synchronize_session=False)

    @staticmethod
    def create_vehicle(db: Session, user_id: UUID, **fields) -> Vehicle:
        """
        Create a vehicle owned by ``user_id``.

        A vehicle marked default unsets the user's previous default.
        """
        if fields.get("is_default"):
            VehicleService._clear_default(db, user_id)

        vehicle = Vehicle(user_id=user_id, **fields)
        db.add(vehicle)
        db.commit()
        db.refresh(vehicle)
        return vehicle

    @staticmethod
    def update_vehicle(db: Session, vehicle_id: UUID, **updates) -> Optional[Vehicle]:
        """
        Apply non-None updates to a vehicle.

        Returns:
            Updated Vehicle object or None if not found
        """
        vehicle = db.query(Vehicle).filter(Vehicle.id == vehicle_id).first()
        if not vehicle:
            return None

        for field, value in updates.items():
            if value is not None:
                setattr(vehicle, field, value)

        if updates.get("is_default"):
            VehicleService._clear_default(db, vehicle.user_id, keep_id=vehicle.id)

        db.commit()
        db.refresh(vehicle)
        return vehicle

    @staticmethod
    def delete_vehicle(db: Session, vehicle_id: UUID) -> bool:
        """Delete a vehicle. Returns False if it did not exist."""
        vehicle = db.query(Vehicle).filter(Vehicle.id == vehicle_id).first()
        if not vehicle:
            return False
        db.delete(vehicle)
        db.commit()
        return True


# Singleton instance
vehicle_service = VehicleService()
