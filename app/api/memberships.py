"""API endpoints for membership plans and subscriptions."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.schemas import (
    MembershipPlanCreate,
    MembershipPlanRead,
    SubscribeRequest,
    UserMembershipRead,
)
from app.database import get_db
from app.services.auth.dependencies import (
    ensure_owner_or_admin,
    require_admin,
    require_auth,
)
from app.services.auth.sessions import SessionUser
from app.services.membership_service import membership_service

router = APIRouter(prefix="/api/memberships", tags=["memberships"])


# =============================================================================
# Plans
# =============================================================================


@router.get("/plans", response_model=List[MembershipPlanRead])
async def list_plans(db: Session = Depends(get_db)):
    return membership_service.get_plans(db)


@router.get("/plans/{plan_id}", response_model=MembershipPlanRead)
async def get_plan(plan_id: UUID, db: Session = Depends(get_db)):
    plan = membership_service.get_plan(db, plan_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Membership plan not found")
    return plan


@router.post(
    "/plans", response_model=MembershipPlanRead, status_code=status.HTTP_201_CREATED
)
async def create_plan(
    body: MembershipPlanCreate,
    admin: SessionUser = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Create a membership plan (admin only)."""
    return membership_service.create_plan(db, **body.model_dump())


# =============================================================================
# Subscriptions
# =============================================================================


@router.get("/me")
async def my_membership(
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """The caller's active membership, or null."""
    membership = membership_service.get_active_membership(db, user.id)
    return {
        "membership": UserMembershipRead.model_validate(membership) if membership else None
    }


@router.post(
    "/subscribe",
    response_model=UserMembershipRead,
    status_code=status.HTTP_201_CREATED,
)
async def subscribe(
    body: SubscribeRequest,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    plan = membership_service.get_plan(db, body.plan_id)
    if not plan or not plan.is_active:
        raise HTTPException(status_code=404, detail="Membership plan not found")

    if membership_service.get_active_membership(db, user.id):
        raise HTTPException(status_code=409, detail="Membership already active")

    return membership_service.subscribe(db, user.id, plan)


@router.post("/{membership_id}/cancel")
async def cancel_membership(
    membership_id: UUID,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    membership = membership_service.get_membership(db, membership_id)
    if not membership:
        raise HTTPException(status_code=404, detail="Membership not found")
    ensure_owner_or_admin(user, membership.user_id)

    membership_service.cancel_membership(db, membership_id)
    return {"success": True}
