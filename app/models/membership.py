"""Membership plans and user subscriptions."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Numeric, JSON, ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import uuid

from app.database import Base


class MembershipPlan(Base):
    """Recurring wash plan offered to customers."""

    __tablename__ = "membership_plans"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(128), nullable=False)
    description = Column(Text, nullable=True)
    frequency = Column(String(32), nullable=False)  # weekly, biweekly, monthly
    price_per_month = Column(Numeric(10, 2), nullable=False)
    service_included = Column(String(128), nullable=False)
    features = Column(JSON, default=list, nullable=False)
    savings_percent = Column(Integer, nullable=True)
    is_popular = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    memberships = relationship("UserMembership", back_populates="plan")


class UserMembership(Base):
    """A user's subscription to a plan."""

    __tablename__ = "user_memberships"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    plan_id = Column(Uuid, ForeignKey("membership_plans.id"), nullable=False)
    status = Column(String(16), default="active", nullable=False)  # active, cancelled
    start_date = Column(DateTime(timezone=True), server_default=func.now())
    next_wash_date = Column(DateTime(timezone=True), nullable=True)
    washes_remaining = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="memberships")
    plan = relationship("MembershipPlan", back_populates="memberships")
