import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column, Integer, String, Text, Boolean, ForeignKey, TIMESTAMP, Enum, UniqueConstraint,
)
from sqlalchemy.orm import relationship
from dealership.database import Base


class FuelType(str, enum.Enum):
    GASOLINE = "gasoline"
    DIESEL   = "diesel"
    HYBRID   = "hybrid"
    ELECTRIC = "electric"


class Transmission(str, enum.Enum):
    AUTOMATIC = "automatic"
    MANUAL    = "manual"


class VehicleStatus(str, enum.Enum):
    AVAILABLE = "available"
    RESERVED  = "reserved"
    SOLD      = "sold"


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Car(Base):
    __tablename__ = "cars"

    id           = Column(String(36), primary_key=True, default=new_id)
    brand        = Column(String(100), nullable=False, index=True)
    model        = Column(String(100), nullable=False)
    year         = Column(Integer, nullable=False)
    price        = Column(Integer, nullable=False)
    mileage      = Column(Integer, default=0, nullable=False)
    fuelType     = Column("fuelType", Enum(FuelType, values_callable=_enum_values,
                                           native_enum=False, length=20), nullable=False)
    transmission = Column(Enum(Transmission, values_callable=_enum_values,
                               native_enum=False, length=20), nullable=False)
    color        = Column(String(50), nullable=False)
    description  = Column(Text, nullable=False)
    status       = Column(Enum(VehicleStatus, values_callable=_enum_values,
                               native_enum=False, length=20),
                          default=VehicleStatus.AVAILABLE, nullable=False, index=True)
    featured     = Column(Boolean, default=False, nullable=False)
    createdAt    = Column("createdAt", TIMESTAMP(timezone=True), default=utcnow, nullable=False, index=True)
    updatedAt    = Column("updatedAt", TIMESTAMP(timezone=True), default=utcnow,
                          onupdate=utcnow, nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    images   = relationship("CarImage", back_populates="car", cascade="all, delete-orphan",
                            order_by="CarImage.order", lazy="selectin")
    contacts = relationship("ContactSubmission", back_populates="car")

    def __repr__(self):
        return f"<Car id={self.id} {self.brand} {self.model} {self.year}>"


class CarImage(Base):
    __tablename__ = "car_images"

    id        = Column(String(36), primary_key=True, default=new_id)
    carId     = Column("carId", String(36), ForeignKey("cars.id", ondelete="CASCADE"),
                       nullable=False, index=True)
    url       = Column(String(500), nullable=False)
    alt       = Column(String(255), nullable=True)
    order     = Column(Integer, nullable=False, default=0)
    isPrimary = Column("isPrimary", Boolean, default=False, nullable=False)
    createdAt = Column("createdAt", TIMESTAMP(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("carId", "order", name="uq_car_image_order"),
    )

    car = relationship("Car", back_populates="images")

    def __repr__(self):
        return f"<CarImage id={self.id} car={self.carId} order={self.order}>"
