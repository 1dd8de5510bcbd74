from sqlalchemy import Column, String, DateTime, Enum, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
import uuid

from app.database import Base


class UserRole(str, enum.Enum):
    """Authorization level of an account."""
    USER = "user"
    ADMIN = "admin"


class User(Base):
    """User model for authentication and data ownership."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(64), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)  # "<salt hex>:<derived key hex>"
    email = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)
    role = Column(
        Enum(
            UserRole,
            native_enum=False,
            length=16,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=UserRole.USER,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    sessions = relationship(
        "Session", back_populates="user", cascade="all, delete-orphan"
    )
    vehicles = relationship(
        "Vehicle", back_populates="user", cascade="all, delete-orphan"
    )
    bookings = relationship(
        "Booking", back_populates="user", cascade="all, delete-orphan"
    )
    memberships = relationship(
        "UserMembership", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
