"""API endpoints for the detailing services catalog."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.schemas import ServiceCreate, ServiceRead
from app.database import get_db
from app.seed_catalog import seed_membership_plans, seed_services
from app.services.auth.dependencies import require_admin
from app.services.auth.sessions import SessionUser
from app.services.catalog_service import catalog_service

router = APIRouter(prefix="/api", tags=["services"])


@router.get("/services", response_model=List[ServiceRead])
async def list_services(db: Session = Depends(get_db)):
    """List active services."""
    return catalog_service.get_services(db)


@router.get("/services/category/{category}", response_model=List[ServiceRead])
async def list_services_by_category(category: str, db: Session = Depends(get_db)):
    """List active services in one category."""
    return catalog_service.get_services_by_category(db, category)


@router.get("/services/{service_id}", response_model=ServiceRead)
async def get_service(service_id: UUID, db: Session = Depends(get_db)):
    service = catalog_service.get_service(db, service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.post(
    "/services", response_model=ServiceRead, status_code=status.HTTP_201_CREATED
)
async def create_service(
    body: ServiceCreate,
    admin: SessionUser = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Add a service to the catalog (admin only)."""
    return catalog_service.create_service(db, **body.model_dump())


@router.post("/seed-services")
async def seed_default_catalog(
    admin: SessionUser = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Seed default services and membership plans when empty (admin only)."""
    services = seed_services(db)
    plans = seed_membership_plans(db)
    return {
        "success": True,
        "message": f"Seeded {services} services and {plans} membership plans",
    }
