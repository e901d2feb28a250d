import logging

from sqlalchemy.orm import Session

from dealership.models.contact_submission import ContactSubmission, ContactStatus
from dealership.schemas.contact import ContactCreateRequest, ContactOut
from dealership.schemas.vehicle import VehicleSummary
from dealership.services.inventory_service import InventoryService
from dealership.utils.exceptions import NotFoundException

logger = logging.getLogger(__name__)


class ContactService:

    def submit(self, db: Session, data: ContactCreateRequest, inventory: InventoryService) -> ContactOut:
        # The vehicle reference is a lookup only; an unknown id is dropped, not rejected
        car_id = data.carId
        if car_id and inventory.store.find_by_id(car_id) is None:
            logger.info(f"Contact form referenced unknown vehicle {car_id}; storing without it")
            car_id = None

        submission = ContactSubmission(
            name=data.name,
            email=str(data.email),
            phone=data.phone,
            message=data.message,
            carId=car_id,
            status=ContactStatus.NEW,
        )
        db.add(submission)
        db.commit()
        db.refresh(submission)
        logger.info(f"New contact submission {submission.id} from {submission.email}")
        return ContactOut.model_validate(submission)

    def context(self, car_id: str | None, inventory: InventoryService) -> VehicleSummary | None:
        """Vehicle shown on the contact page when it is opened from a detail page."""
        if not car_id:
            return None
        vehicle = inventory.store.find_by_id(car_id)
        return VehicleSummary.model_validate(vehicle) if vehicle else None

    def list_submissions(
        self, db: Session, page: int, limit: int, status: ContactStatus | None,
    ) -> tuple[list[ContactOut], int]:
        q = db.query(ContactSubmission)
        if status:
            q = q.filter(ContactSubmission.status == status)
        total = q.count()
        items = q.order_by(ContactSubmission.createdAt.desc(), ContactSubmission.id.desc()) \
                 .offset((page - 1) * limit).limit(limit).all()
        return [ContactOut.model_validate(c) for c in items], total

    def count_new(self, db: Session) -> int:
        return db.query(ContactSubmission).filter(ContactSubmission.status == ContactStatus.NEW).count()

    def mark_read(self, db: Session, submission_id: int) -> ContactOut:
        submission = db.query(ContactSubmission).filter(ContactSubmission.id == submission_id).first()
        if not submission:
            raise NotFoundException("Contact submission")
        submission.status = ContactStatus.READ
        db.commit()
        db.refresh(submission)
        return ContactOut.model_validate(submission)


contact_service = ContactService()
