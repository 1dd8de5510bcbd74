"""Business logic for membership plans and subscriptions."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.membership import MembershipPlan, UserMembership

# Days between included washes, and washes included per month
FREQUENCY_SCHEDULE = {
    "weekly": (7, 4),
    "fortnightly": (14, 2),
    "biweekly": (14, 2),
    "monthly": (30, 1),
}


class MembershipService:
    """Service for membership-related operations."""

    @staticmethod
    def get_plans(db: Session) -> List[MembershipPlan]:
        """Get active plans."""
        return (
            db.query(MembershipPlan)
            .filter(MembershipPlan.is_active.is_(True))
            .order_by(MembershipPlan.price_per_month.desc())
            .all()
        )

    @staticmethod
    def get_plan(db: Session, plan_id: UUID) -> Optional[MembershipPlan]:
        """Get a plan by ID."""
        return db.query(MembershipPlan).filter(MembershipPlan.id == plan_id).first()

    @staticmethod
    def create_plan(
        db: Session,
        name: str,
        frequency: str,
        price_per_month: Decimal,
        service_included: str,
        **fields,
    ) -> MembershipPlan:
        """Create a membership plan."""
        plan = MembershipPlan(
            name=name,
            frequency=frequency,
            price_per_month=price_per_month,
            service_included=service_included,
            **fields,
        )
        db.add(plan)
        db.commit()
        db.refresh(plan)
        return plan

    @staticmethod
    def count_plans(db: Session) -> int:
        return db.query(MembershipPlan).count()

    @staticmethod
    def get_active_membership(db: Session, user_id: UUID) -> Optional[UserMembership]:
        """Get the user's active membership, if any."""
        return (
            db.query(UserMembership)
            .filter(
                UserMembership.user_id == user_id,
                UserMembership.status == "active",
            )
            .first()
        )

    @staticmethod
    def get_membership(db: Session, membership_id: UUID) -> Optional[UserMembership]:
        """Get a membership by ID."""
        return db.query(UserMembership).filter(UserMembership.id == membership_id).first()

    @staticmethod
    def subscribe(db: Session, user_id: UUID, plan: MembershipPlan) -> UserMembership:
        """
        Start an active membership on ``plan``.

        The first included wash is scheduled one interval from now.
        """
        interval_days, washes = FREQUENCY_SCHEDULE.get(plan.frequency, (30, 1))
        membership = UserMembership(
            user_id=user_id,
            plan_id=plan.id,
            status="active",
            start_date=datetime.now(timezone.utc),
            next_wash_date=datetime.now(timezone.utc) + timedelta(days=interval_days),
            washes_remaining=washes,
        )
        db.add(membership)
        db.commit()
        db.refresh(membership)
        return membership

    @staticmethod
    def cancel_membership(db: Session, membership_id: UUID) -> Optional[UserMembership]:
        """Cancel a membership. Returns None if not found."""
        membership = db.query(UserMembership).filter(UserMembership.id == membership_id).first()
        if not membership:
            return None
        membership.status = "cancelled"
        db.commit()
        db.refresh(membership)
        return membership


# Singleton instance
membership_service = MembershipService()
