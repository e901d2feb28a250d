import enum
from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from dealership.database import Base


class ContactStatus(str, enum.Enum):
    NEW  = "new"
    READ = "read"


class ContactSubmission(Base):
    __tablename__ = "contact_submissions"

    id        = Column(Integer, primary_key=True, index=True)
    name      = Column(String(150), nullable=False)
    email     = Column(String(255), nullable=False)
    phone     = Column(String(30), nullable=True)
    message   = Column(Text, nullable=False)
    # Weak reference: the lead survives the vehicle being deleted
    carId     = Column("carId", String(36), ForeignKey("cars.id", ondelete="SET NULL"), nullable=True)
    status    = Column(Enum(ContactStatus, values_callable=lambda e: [m.value for m in e],
                            native_enum=False, length=10),
                       default=ContactStatus.NEW, nullable=False, index=True)
    createdAt = Column("createdAt", TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    car = relationship("Car", back_populates="contacts")

    def __repr__(self):
        return f"<ContactSubmission id={self.id} email={self.email} status={self.status}>"
