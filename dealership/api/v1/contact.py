from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from dealership.database import get_db
from dealership.dependencies import get_admin_user, get_inventory
from dealership.models.contact_submission import ContactStatus
from dealership.models.user import User
from dealership.schemas.common import success_response, paginated_response
from dealership.schemas.contact import ContactCreateRequest
from dealership.services.contact_service import contact_service
from dealership.services.inventory_service import InventoryService

router = APIRouter(prefix="/contact")


# ─── Public ───────────────────────────────────────────────────────────────────
@router.post("", status_code=status.HTTP_201_CREATED, summary="Submit the contact form")
def submit_contact(
    body:      ContactCreateRequest,
    db:        Session = Depends(get_db),
    inventory: InventoryService = Depends(get_inventory),
):
    data = contact_service.submit(db, body, inventory)
    return success_response("Message sent successfully", data)


@router.get("/context", summary="Vehicle the contact form was opened for")
def contact_context(
    auto:      Optional[str] = Query(None, description="Vehicle ID from the detail page"),
    inventory: InventoryService = Depends(get_inventory),
):
    return success_response("Contact context retrieved", {"car": contact_service.context(auto, inventory)})


# ─── Admin ────────────────────────────────────────────────────────────────────
@router.get("/submissions", summary="List contact submissions (Admin)")
def list_submissions(
    page:   int = Query(1, ge=1),
    limit:  int = Query(20, ge=1, le=100),
    status: Optional[ContactStatus] = Query(None, description="new | read"),
    _:      User = Depends(get_admin_user),
    db:     Session = Depends(get_db),
):
    data, total = contact_service.list_submissions(db, page, limit, status)
    return paginated_response("Contact submissions retrieved", data, total, page, limit)


@router.get("/submissions/new-count", summary="Number of unread submissions (Admin)")
def count_new_submissions(_: User = Depends(get_admin_user), db: Session = Depends(get_db)):
    return success_response("Unread count retrieved", {"count": contact_service.count_new(db)})


@router.patch("/submissions/{submission_id}/read", summary="Mark a submission as read (Admin)")
def mark_submission_read(
    submission_id: int,
    _:  User = Depends(get_admin_user),
    db: Session = Depends(get_db),
):
    return success_response("Submission marked as read", contact_service.mark_read(db, submission_id))
