from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from dealership.models.site_image import SiteSection


class SiteImageCreateRequest(BaseModel):
    section: SiteSection
    url:     str
    title:   Optional[str] = None
    alt:     Optional[str] = None

    @field_validator("url")
    @classmethod
    def check_url(cls, v):
        if not v.strip(): raise ValueError("URL is required")
        return v.strip()

    @field_validator("title", "alt")
    @classmethod
    def blank_to_none(cls, v):
        if v is None: return None
        return v.strip() or None


class SiteImageOut(BaseModel):
    id:        int
    section:   SiteSection
    url:       str
    title:     Optional[str] = None
    alt:       Optional[str] = None
    order:     int
    isActive:  bool
    createdAt: Optional[datetime] = None
    model_config = {"from_attributes": True}
