"""Business logic for the detailing services catalog."""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.detailing_service import DetailingService


class CatalogService:
    """Service for catalog (detailing package) operations."""

    @staticmethod
    def get_services(db: Session) -> List[DetailingService]:
        """Get all active services, cheapest first."""
        return (
            db.query(DetailingService)
            .filter(DetailingService.is_active.is_(True))
            .order_by(DetailingService.price)
            .all()
        )

    @staticmethod
    def get_service(db: Session, service_id: UUID) -> Optional[DetailingService]:
        """Get a service by ID."""
        return db.query(DetailingService).filter(DetailingService.id == service_id).first()

    @staticmethod
    def get_services_by_category(db: Session, category: str) -> List[DetailingService]:
        """Get active services in a category."""
        return (
            db.query(DetailingService)
            .filter(
                DetailingService.category == category,
                DetailingService.is_active.is_(True),
            )
            .order_by(DetailingService.price)
            .all()
        )

    @staticmethod
    def create_service(
        db: Session,
        name: str,
        category: str,
        price: Decimal,
        duration: int,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        features: Optional[list] = None,
        is_active: bool = True,
    ) -> DetailingService:
        """
        Create a catalog entry.

        Args:
            db: Database session
            name: Display name
            category: exterior, interior, premium or protection
            price: Price in dollars
            duration: Expected duration in minutes
            description: Marketing description
            image_url: Optional image
            features: List of included work items
            is_active: Whether the service is bookable

        Returns:
            Created DetailingService object
        """
        service = DetailingService(
            name=name,
            category=category,
            price=price,
            duration=duration,
            description=description,
            image_url=image_url,
            features=features or [],
            is_active=is_active,
        )
        db.add(service)
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def count_services(db: Session) -> int:
        return db.query(DetailingService).count()


# Singleton instance
catalog_service = CatalogService()
