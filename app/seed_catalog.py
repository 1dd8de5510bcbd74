"""Seed the default detailing services and membership plans."""
import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from app.database import SessionLocal
from app.services.catalog_service import catalog_service
from app.services.membership_service import membership_service

logger = logging.getLogger(__name__)


DEFAULT_SERVICES = [
    {
        'name': 'Express Exterior',
        'description': 'Full exterior wash and dry with tire dressing & rim cleaning',
        'category': 'exterior',
        'price': Decimal('95.00'),
        'duration': 35,
        'features': ['Full exterior wash and dry', 'Tire dressing & rim cleaning',
                     'Exterior window cleaning', 'Glossy exterior finish'],
    },
    {
        'name': 'Gold Wash',
        'description': 'Full exterior hand wash with thorough interior vacuum and cleaning',
        'category': 'exterior',
        'price': Decimal('145.00'),
        'duration': 62,
        'features': ['Full exterior hand wash', 'Tire dressing & rim cleaning',
                     'Interior & trunk vacuum', 'Interior wipe down', 'Door jambs'],
    },
    {
        'name': 'Platinum Wash',
        'description': 'Complete hand wash with wax, leather conditioning, and light stain removal',
        'category': 'exterior',
        'price': Decimal('225.00'),
        'duration': 105,
        'features': ['Full exterior hand wash', 'Complete wax',
                     'Leather cleaning & conditioning', 'Light stain removal'],
    },
    {
        'name': 'Scratch Removal',
        'description': 'Professional scratch assessment and removal with machine polish and buffing',
        'category': 'exterior',
        'price': Decimal('260.00'),
        'duration': 80,
        'features': ['Scratch assessment', 'Compound', 'Machine polish', 'Clear coat repair'],
    },
    {
        'name': 'Interior Detail',
        'description': 'Thorough vacuum, steam clean, and conditioning of entire interior',
        'category': 'interior',
        'price': Decimal('350.00'),
        'duration': 90,
        'features': ['Thorough vacuum including trunk', 'Standard pet hair removal',
                     'Shampoo carpets & floor mats', 'Interior steam clean at 212F'],
    },
    {
        'name': 'Deluxe Detail',
        'description': 'Full exterior and interior detail with clay bar, wax, and plastic dressing',
        'category': 'premium',
        'price': Decimal('415.00'),
        'duration': 165,
        'features': ['Full exterior hand wash', 'Complete wax', 'Clay bar paint treatment',
                     'Outside plastic dressing', 'Mats & carpets shampooed'],
    },
    {
        'name': 'Signature Detail',
        'description': 'Ultimate detail with multi-stage buffing, sealant wax, and single-stage paint buffing',
        'category': 'premium',
        'price': Decimal('625.00'),
        'duration': 220,
        'features': ['Clay bar paint treatment', 'Water spot removal',
                     'Single-stage paint buffing', 'Sealant wax', 'Shampoo seats'],
    },
    {
        'name': 'Diamond Ceramic',
        'description': 'Glass-like ceramic coating with 1-3 years protection and 9h hardness',
        'category': 'protection',
        'price': Decimal('1045.00'),
        'duration': 330,
        'features': ['Super gloss', 'Super hydrophobic', '1-3 layers of glass-like coating',
                     'Above 9h hardness protection'],
    },
    {
        'name': 'Titanium Gloss',
        'description': 'Premium ceramic with multi-stage buffing, showroom finish, and 1-3 year protection',
        'category': 'protection',
        'price': Decimal('1680.00'),
        'duration': 220,
        'features': ['Paint evaluation', 'Heavy compounding', 'Multi-stage buffing for smoothness',
                     'Showroom finish', '1-3 years of protection'],
    },
    {
        'name': 'Window Tinting',
        'description': 'Professional window tinting with UV and thermal protection',
        'category': 'protection',
        'price': Decimal('1045.00'),
        'duration': 220,
        'features': ['UVA and UVB ray shielding', 'Temperature reduction and glare elimination'],
    },
]

DEFAULT_MEMBERSHIP_PLANS = [
    {
        'name': 'Weekly Wash Club',
        'description': 'Perfect for those who love a spotless ride. Get a professional exterior wash every week.',
        'frequency': 'weekly',
        'price_per_month': Decimal('149.00'),
        'service_included': 'Express Exterior',
        'features': ['Weekly exterior wash', 'Tire dressing included', 'Priority scheduling', '10% off add-ons'],
        'savings_percent': 60,
        'is_popular': False,
    },
    {
        'name': 'Fortnightly Fresh',
        'description': 'Ideal balance of value and convenience. Bi-weekly washes to keep your car looking great.',
        'frequency': 'fortnightly',
        'price_per_month': Decimal('99.00'),
        'service_included': 'Express Exterior',
        'features': ['Bi-weekly exterior wash', 'Tire dressing included', 'Flexible scheduling', '5% off add-ons'],
        'savings_percent': 45,
        'is_popular': True,
    },
    {
        'name': 'Monthly Maintain',
        'description': 'Essential care for busy lifestyles. Monthly professional wash to maintain your vehicle.',
        'frequency': 'monthly',
        'price_per_month': Decimal('79.00'),
        'service_included': 'Gold Wash',
        'features': ['Monthly Gold Wash', 'Interior vacuum included', 'Window cleaning', 'Membership rewards'],
        'savings_percent': 45,
        'is_popular': False,
    },
]


def seed_services(db: Session) -> int:
    """Insert the default services if the catalog is empty. Returns rows added."""
    existing = catalog_service.count_services(db)
    if existing > 0:
        logger.info("Services already seeded (%d existing). Skipping.", existing)
        return 0

    for service in DEFAULT_SERVICES:
        catalog_service.create_service(db, **service)

    logger.info("Seeded %d services", len(DEFAULT_SERVICES))
    return len(DEFAULT_SERVICES)


def seed_membership_plans(db: Session) -> int:
    """Insert the default plans if none exist. Returns rows added."""
    existing = membership_service.count_plans(db)
    if existing > 0:
        logger.info("Membership plans already seeded (%d existing). Skipping.", existing)
        return 0

    for plan in DEFAULT_MEMBERSHIP_PLANS:
        membership_service.create_plan(db, **plan)

    logger.info("Seeded %d membership plans", len(DEFAULT_MEMBERSHIP_PLANS))
    return len(DEFAULT_MEMBERSHIP_PLANS)


def seed_catalog() -> None:
    """Seed services and membership plans in a fresh session."""
    db = SessionLocal()

    try:
        services = seed_services(db)
        plans = seed_membership_plans(db)
        print(f"Seeded {services} services and {plans} membership plans.")
    except Exception as e:
        print(f"Error seeding catalog: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_catalog()
