import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from dealership.models.site_image import SiteImage, SiteSection
from dealership.schemas.site_image import SiteImageCreateRequest, SiteImageOut
from dealership.utils.exceptions import NotFoundException

logger = logging.getLogger(__name__)


class SiteImageService:

    def list_public(self, db: Session, section: SiteSection | None) -> list[SiteImageOut]:
        q = db.query(SiteImage).filter(SiteImage.isActive.is_(True))
        if section:
            q = q.filter(SiteImage.section == section)
        items = q.order_by(SiteImage.section, SiteImage.order).all()
        return [SiteImageOut.model_validate(i) for i in items]

    def list_grouped(self, db: Session) -> dict[str, list[SiteImageOut]]:
        """All images, active or not, keyed by section in section order."""
        grouped: dict[str, list[SiteImageOut]] = {}
        for img in db.query(SiteImage).order_by(SiteImage.section, SiteImage.order).all():
            grouped.setdefault(img.section.value, []).append(SiteImageOut.model_validate(img))
        return grouped

    def add(self, db: Session, data: SiteImageCreateRequest) -> SiteImageOut:
        max_order = db.query(func.max(SiteImage.order)) \
                      .filter(SiteImage.section == data.section).scalar()
        img = SiteImage(
            section=data.section,
            url=data.url,
            title=data.title,
            alt=data.alt,
            order=(max_order if max_order is not None else -1) + 1,
            isActive=True,
        )
        db.add(img)
        db.commit()
        db.refresh(img)
        logger.info(f"Added site image {img.id} to section {img.section.value} at order {img.order}")
        return SiteImageOut.model_validate(img)

    def toggle(self, db: Session, image_id: int) -> SiteImageOut:
        img = db.query(SiteImage).filter(SiteImage.id == image_id).first()
        if not img:
            raise NotFoundException("Site image")
        img.isActive = not img.isActive
        db.commit()
        db.refresh(img)
        return SiteImageOut.model_validate(img)

    def delete(self, db: Session, image_id: int) -> None:
        img = db.query(SiteImage).filter(SiteImage.id == image_id).first()
        if not img:
            raise NotFoundException("Site image")
        db.delete(img)
        db.commit()
        logger.info(f"Deleted site image {image_id}")


site_image_service = SiteImageService()
