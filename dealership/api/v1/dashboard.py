from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dealership.database import get_db
from dealership.dependencies import get_admin_user, get_inventory
from dealership.models.user import User
from dealership.schemas.common import success_response
from dealership.services.contact_service import contact_service
from dealership.services.inventory_service import InventoryService

router = APIRouter(prefix="/admin/dashboard")


@router.get("", summary="Inventory stats and unread contact count (Admin)")
def dashboard(
    _:         User = Depends(get_admin_user),
    db:        Session = Depends(get_db),
    inventory: InventoryService = Depends(get_inventory),
):
    stats = inventory.stats()
    stats["newContacts"] = contact_service.count_new(db)
    return success_response("Dashboard retrieved", stats)
