"""
Pydantic models for API request bodies and responses.

Request models validate input (failures become 400s). Read models are built
from ORM rows via ``from_attributes``.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.config import settings
from app.models.booking import BookingStatus
from app.models.user import UserRole


# --- Auth ---


class RegisterRequest(BaseModel):
    username: str = Field(min_length=settings.min_username_length, max_length=64)
    password: str = Field(min_length=settings.min_password_length)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=settings.min_password_length)


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: Optional[str] = None
    role: UserRole


# --- Services catalog ---


class ServiceCreate(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    description: Optional[str] = None
    category: str = Field(min_length=1, max_length=32)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    duration: int = Field(gt=0)
    image_url: Optional[str] = None
    features: list[str] = []
    is_active: bool = True


class ServiceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: Optional[str] = None
    category: str
    price: Decimal
    duration: int
    image_url: Optional[str] = None
    features: list[str] = []
    is_active: bool


# --- Vehicles ---


class VehicleCreate(BaseModel):
    make: str = Field(min_length=1, max_length=64)
    model: str = Field(min_length=1, max_length=64)
    year: int = Field(ge=1900, le=2100)
    color: Optional[str] = Field(default=None, max_length=32)
    license_plate: Optional[str] = Field(default=None, max_length=16)
    is_default: bool = False


class VehicleUpdate(BaseModel):
    make: Optional[str] = Field(default=None, min_length=1, max_length=64)
    model: Optional[str] = Field(default=None, min_length=1, max_length=64)
    year: Optional[int] = Field(default=None, ge=1900, le=2100)
    color: Optional[str] = Field(default=None, max_length=32)
    license_plate: Optional[str] = Field(default=None, max_length=16)
    is_default: Optional[bool] = None


class VehicleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    make: str
    model: str
    year: int
    color: Optional[str] = None
    license_plate: Optional[str] = None
    is_default: bool


# --- Bookings ---


class BookingCreate(BaseModel):
    service_id: UUID
    vehicle_id: Optional[UUID] = None
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: str = Field(min_length=1, max_length=8)
    location: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = None


class BookingUpdate(BaseModel):
    date: Optional[str] = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: Optional[str] = Field(default=None, min_length=1, max_length=8)
    location: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = None
    status: Optional[BookingStatus] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)


class BookingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    vehicle_id: Optional[UUID] = None
    service_id: Optional[UUID] = None
    date: str
    time: str
    status: BookingStatus
    location: Optional[str] = None
    notes: Optional[str] = None
    total_price: Optional[Decimal] = None
    progress: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# --- Memberships ---


class MembershipPlanCreate(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    description: Optional[str] = None
    frequency: str = Field(min_length=1, max_length=32)
    price_per_month: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    service_included: str = Field(min_length=1, max_length=128)
    features: list[str] = []
    savings_percent: Optional[int] = Field(default=None, ge=0, le=100)
    is_popular: bool = False
    is_active: bool = True


class MembershipPlanRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: Optional[str] = None
    frequency: str
    price_per_month: Decimal
    service_included: str
    features: list[str] = []
    savings_percent: Optional[int] = None
    is_popular: bool
    is_active: bool


class SubscribeRequest(BaseModel):
    plan_id: UUID


class UserMembershipRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    plan_id: UUID
    status: str
    start_date: Optional[datetime] = None
    next_wash_date: Optional[datetime] = None
    washes_remaining: int
