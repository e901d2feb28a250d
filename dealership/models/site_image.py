import enum
from sqlalchemy import Column, Integer, String, Boolean, TIMESTAMP, Enum
from sqlalchemy.sql import func
from dealership.database import Base


class SiteSection(str, enum.Enum):
    HERO     = "hero"
    ABOUT    = "about"
    SERVICES = "services"
    GALLERY  = "gallery"


class SiteImage(Base):
    __tablename__ = "site_images"

    id        = Column(Integer, primary_key=True, index=True)
    section   = Column(Enum(SiteSection, values_callable=lambda e: [m.value for m in e],
                            native_enum=False, length=20), nullable=False, index=True)
    url       = Column(String(500), nullable=False)
    title     = Column(String(150), nullable=True)
    alt       = Column(String(255), nullable=True)
    order     = Column(Integer, default=0, nullable=False)
    isActive  = Column("isActive", Boolean, default=True, nullable=False)
    createdAt = Column("createdAt", TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)
    updatedAt = Column("updatedAt", TIMESTAMP(timezone=True), server_default=func.now(),
                       onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<SiteImage id={self.id} section={self.section} order={self.order}>"
