from datetime import datetime
from typing import Optional

from pydantic import BaseModel, computed_field, field_validator

from dealership.models.car import FuelType, Transmission, VehicleStatus

MIN_YEAR = 1990
MIN_DESCRIPTION_LENGTH = 10


def max_year() -> int:
    return datetime.now().year + 1


# ─── Records ──────────────────────────────────────────────────────────────────
class VehicleImageOut(BaseModel):
    id:        str
    url:       str
    alt:       Optional[str] = None
    order:     int
    isPrimary: bool = False
    carId:     str
    model_config = {"from_attributes": True}


class VehicleOut(BaseModel):
    """A vehicle with its images, as returned by every VehicleStore."""
    id:           str
    brand:        str
    model:        str
    year:         int
    price:        int
    mileage:      int
    fuelType:     FuelType
    transmission: Transmission
    color:        str
    description:  str
    status:       VehicleStatus
    featured:     bool
    createdAt:    datetime
    updatedAt:    datetime
    images:       list[VehicleImageOut] = []
    model_config = {"from_attributes": True}

    @field_validator("images")
    @classmethod
    def sort_images(cls, v):
        return sorted(v, key=lambda img: img.order)

    @computed_field
    @property
    def primaryImage(self) -> Optional[VehicleImageOut]:
        # An explicit flag wins, otherwise the lowest order (images are sorted)
        for img in self.images:
            if img.isPrimary:
                return img
        return self.images[0] if self.images else None

    @computed_field
    @property
    def title(self) -> str:
        return f"{self.brand} {self.model} {self.year}"


class VehicleSummary(BaseModel):
    id:    str
    brand: str
    model: str
    year:  int
    model_config = {"from_attributes": True}


# ─── Requests ─────────────────────────────────────────────────────────────────
class VehicleData(BaseModel):
    """Writable vehicle fields. Every invalid field is reported, not just the first."""
    brand:        str
    model:        str
    year:         int
    price:        int
    mileage:      int
    fuelType:     FuelType
    transmission: Transmission
    color:        str
    description:  str
    status:       VehicleStatus = VehicleStatus.AVAILABLE
    featured:     bool = False
    model_config = {"extra": "ignore"}

    @field_validator("brand", "model", "color")
    @classmethod
    def check_not_blank(cls, v, info):
        if not v.strip():
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return v.strip()

    @field_validator("year")
    @classmethod
    def check_year(cls, v):
        upper = max_year()
        if not (MIN_YEAR <= v <= upper):
            raise ValueError(f"Year must be between {MIN_YEAR} and {upper}")
        return v

    @field_validator("price")
    @classmethod
    def check_price(cls, v):
        if v < 1: raise ValueError("Price is required and must be at least 1")
        return v

    @field_validator("mileage")
    @classmethod
    def check_mileage(cls, v):
        if v < 0: raise ValueError("Mileage cannot be negative")
        return v

    @field_validator("description")
    @classmethod
    def check_description(cls, v):
        v = v.strip()
        if len(v) < MIN_DESCRIPTION_LENGTH:
            raise ValueError(f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters")
        return v


class VehicleWriteRequest(VehicleData):
    imageUrls: list[str] = []
