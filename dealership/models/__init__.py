"""
Import all models here so that:
1. Alembic can auto-detect them when generating migrations
2. Relationships between models resolve correctly

Import parent tables before child tables.
"""

from dealership.models.user import User
from dealership.models.car import Car, CarImage, FuelType, Transmission, VehicleStatus
from dealership.models.contact_submission import ContactSubmission, ContactStatus
from dealership.models.site_image import SiteImage, SiteSection

__all__ = [
    "User",
    "Car",
    "CarImage",
    "FuelType",
    "Transmission",
    "VehicleStatus",
    "ContactSubmission",
    "ContactStatus",
    "SiteImage",
    "SiteSection",
]
