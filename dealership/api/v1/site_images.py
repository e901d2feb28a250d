from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from dealership.database import get_db
from dealership.dependencies import get_admin_user
from dealership.models.site_image import SiteSection
from dealership.models.user import User
from dealership.schemas.common import success_response
from dealership.schemas.site_image import SiteImageCreateRequest
from dealership.services.site_image_service import site_image_service

router = APIRouter(prefix="/site-images")


@router.get("", summary="Active site images, optionally for one section")
def list_site_images(
    section: Optional[SiteSection] = Query(None, description="hero | about | services | gallery"),
    db:      Session = Depends(get_db),
):
    return success_response("Site images retrieved", site_image_service.list_public(db, section))


@router.get("/admin", summary="All site images grouped by section (Admin)")
def list_grouped(_: User = Depends(get_admin_user), db: Session = Depends(get_db)):
    return success_response("Site images retrieved", site_image_service.list_grouped(db))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Add a site image at the end of its section (Admin)")
def add_site_image(
    body: SiteImageCreateRequest,
    _:    User = Depends(get_admin_user),
    db:   Session = Depends(get_db),
):
    return success_response("Site image added", site_image_service.add(db, body))


@router.patch("/{image_id}/toggle", summary="Toggle a site image on or off (Admin)")
def toggle_site_image(image_id: int, _: User = Depends(get_admin_user), db: Session = Depends(get_db)):
    return success_response("Site image updated", site_image_service.toggle(db, image_id))


@router.delete("/{image_id}", summary="Delete a site image (Admin)")
def delete_site_image(image_id: int, _: User = Depends(get_admin_user), db: Session = Depends(get_db)):
    site_image_service.delete(db, image_id)
    return success_response("Site image deleted")
