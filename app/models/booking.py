from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, Numeric, ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
import uuid

from app.database import Base


class BookingStatus(str, enum.Enum):
    """Lifecycle state of an appointment."""
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Booking(Base):
    """An appointment for one service on one vehicle."""

    __tablename__ = "bookings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    vehicle_id = Column(
        Uuid, ForeignKey("vehicles.id", ondelete="SET NULL"), nullable=True
    )
    service_id = Column(
        Uuid, ForeignKey("services.id", ondelete="SET NULL"), nullable=True
    )
    date = Column(String(10), nullable=False)  # YYYY-MM-DD as picked in the app
    time = Column(String(8), nullable=False)  # e.g. "09:30"
    status = Column(
        Enum(
            BookingStatus,
            native_enum=False,
            length=16,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=BookingStatus.SCHEDULED,
    )
    location = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    total_price = Column(Numeric(10, 2), nullable=True)
    progress = Column(Integer, default=0, nullable=False)  # 0-100
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    user = relationship("User", back_populates="bookings")
    vehicle = relationship("Vehicle", back_populates="bookings")
    service = relationship("DetailingService", back_populates="bookings")
