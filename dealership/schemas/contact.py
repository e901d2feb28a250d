from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator

from dealership.models.contact_submission import ContactStatus


# ─── Requests ─────────────────────────────────────────────────────────────────
class ContactCreateRequest(BaseModel):
    name:    str
    email:   EmailStr
    phone:   Optional[str] = None
    message: str
    carId:   Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        v = v.strip()
        if len(v) < 2: raise ValueError("Name is required")
        return v

    @field_validator("message")
    @classmethod
    def check_message(cls, v):
        v = v.strip()
        if len(v) < 10: raise ValueError("Message must be at least 10 characters")
        return v

    @field_validator("phone", "carId")
    @classmethod
    def blank_to_none(cls, v):
        if v is None: return None
        return v.strip() or None


# ─── Responses ────────────────────────────────────────────────────────────────
class ContactOut(BaseModel):
    id:        int
    name:      str
    email:     str
    phone:     Optional[str] = None
    message:   str
    carId:     Optional[str] = None
    status:    ContactStatus
    createdAt: Optional[datetime] = None
    model_config = {"from_attributes": True}
