from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, JSON, Uuid
from sqlalchemy.orm import relationship
import uuid

from app.database import Base


class DetailingService(Base):
    """A bookable detailing package from the catalog (table ``services``)."""

    __tablename__ = "services"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(128), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(32), index=True, nullable=False)  # exterior, interior, premium, protection
    price = Column(Numeric(10, 2), nullable=False)
    duration = Column(Integer, nullable=False)  # Minutes
    image_url = Column(String(512), nullable=True)
    features = Column(JSON, default=list, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    bookings = relationship("Booking", back_populates="service")
