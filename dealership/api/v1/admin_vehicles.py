from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from dealership.dependencies import admin_search_criteria, get_admin_user, get_inventory
from dealership.models.user import User
from dealership.schemas.common import success_response, paginated_response
from dealership.schemas.vehicle import VehicleWriteRequest
from dealership.services.criteria import SearchCriteria
from dealership.services.inventory_service import InventoryService

# Every route here depends on get_admin_user, which FastAPI resolves before
# validating the request body.
router = APIRouter(prefix="/admin/vehicles")

DELETE_INTENT = "delete"


@router.get("", summary="List vehicles in any status (Admin)")
def list_vehicles(
    page:      int = Query(1, ge=1),
    limit:     int = Query(20, ge=1, le=100),
    _:         User = Depends(get_admin_user),
    criteria:  SearchCriteria = Depends(admin_search_criteria),
    inventory: InventoryService = Depends(get_inventory),
):
    data, total = inventory.search_page(criteria, page, limit)
    return paginated_response("Vehicles retrieved successfully", data, total, page, limit)


@router.get("/{vehicle_id}", summary="Get vehicle by ID (Admin)")
def get_vehicle(
    vehicle_id: str,
    _:          User = Depends(get_admin_user),
    inventory:  InventoryService = Depends(get_inventory),
):
    return success_response("Vehicle retrieved", inventory.get(vehicle_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create vehicle with images (Admin)")
def create_vehicle(
    body:      VehicleWriteRequest,
    _:         User = Depends(get_admin_user),
    inventory: InventoryService = Depends(get_inventory),
):
    data = inventory.create(body, body.imageUrls)
    return success_response("Vehicle created successfully", data)


@router.put("/{vehicle_id}", summary="Update vehicle, replacing its images (Admin)")
def update_vehicle(
    vehicle_id: str,
    body:       VehicleWriteRequest,
    _:          User = Depends(get_admin_user),
    inventory:  InventoryService = Depends(get_inventory),
):
    data = inventory.update(vehicle_id, body, body.imageUrls)
    return success_response("Vehicle updated successfully", data)


@router.delete("/{vehicle_id}", summary="Delete vehicle and its images (Admin)")
def delete_vehicle(
    vehicle_id: str,
    _:          User = Depends(get_admin_user),
    inventory:  InventoryService = Depends(get_inventory),
):
    inventory.delete(vehicle_id)
    return success_response("Vehicle deleted successfully")


@router.post("/{vehicle_id}", summary="Form submit: update, or delete when intent=delete (Admin)")
def submit_vehicle_form(
    vehicle_id: str,
    payload:    dict[str, Any] = Body(...),
    _:          User = Depends(get_admin_user),
    inventory:  InventoryService = Depends(get_inventory),
):
    """
    Edit form endpoint. `intent: "delete"` deletes the vehicle and ignores
    every other field; anything else is a full update.
    """
    if payload.get("intent") == DELETE_INTENT:
        inventory.delete(vehicle_id)
        return success_response("Vehicle deleted successfully")

    image_urls = payload.get("imageUrls")
    if isinstance(image_urls, str):
        image_urls = [image_urls]
    elif not isinstance(image_urls, list):
        image_urls = []
    # Only string entries are URLs; null or nested values are dropped like blanks
    data = inventory.update(vehicle_id, payload, [url for url in image_urls if isinstance(url, str)])
    return success_response("Vehicle updated successfully", data)
