"""
Database models for the detailing booking API.

Import all models here so Alembic can detect them for migrations.
"""

from app.database import Base
from app.models.user import User, UserRole
from app.models.session import Session
from app.models.vehicle import Vehicle
from app.models.detailing_service import DetailingService
from app.models.booking import Booking, BookingStatus
from app.models.membership import MembershipPlan, UserMembership

__all__ = [
    "Base",
    "User",
    "UserRole",
    "Session",
    "Vehicle",
    "DetailingService",
    "Booking",
    "BookingStatus",
    "MembershipPlan",
    "UserMembership",
]
