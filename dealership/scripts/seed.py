"""
Seed the database with the admin account, the demo inventory and the
default site images. Safe to run more than once.

    python -m dealership.scripts.seed
"""
import logging

from dealership.config import settings
from dealership.database import SessionLocal, create_tables
from dealership.models.car import Car, CarImage
from dealership.models.site_image import SiteImage
from dealership.models.user import User, ADMIN_ROLE
from dealership.store.sample_data import SAMPLE_SITE_IMAGES, SAMPLE_VEHICLES
from dealership.utils.security import hash_password

logger = logging.getLogger(__name__)


def seed_admin(db) -> None:
    if db.query(User).filter(User.email == settings.ADMIN_EMAIL).first():
        logger.info(f"Admin {settings.ADMIN_EMAIL} already exists, skipping")
        return
    db.add(User(
        name=settings.ADMIN_NAME,
        email=settings.ADMIN_EMAIL,
        password=hash_password(settings.ADMIN_PASSWORD),
        role=ADMIN_ROLE,
        isActive=True,
    ))
    logger.info(f"Created admin {settings.ADMIN_EMAIL}")


def seed_vehicles(db) -> None:
    if db.query(Car).count():
        logger.info("Inventory already has vehicles, skipping")
        return
    # Sample records are loaded directly so their fixed ids and dates survive
    for raw in SAMPLE_VEHICLES:
        fields = {k: v for k, v in raw.items() if k != "images"}
        car = Car(**fields, updatedAt=raw["createdAt"])
        car.images = [CarImage(**img) for img in raw["images"]]
        db.add(car)
    logger.info(f"Created {len(SAMPLE_VEHICLES)} vehicles")


def seed_site_images(db) -> None:
    if db.query(SiteImage).count():
        logger.info("Site images already present, skipping")
        return
    for raw in SAMPLE_SITE_IMAGES:
        db.add(SiteImage(**raw, isActive=True))
    logger.info(f"Created {len(SAMPLE_SITE_IMAGES)} site images")


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    create_tables()
    db = SessionLocal()
    try:
        seed_admin(db)
        seed_vehicles(db)
        seed_site_images(db)
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
