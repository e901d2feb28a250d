from fastapi import APIRouter, Depends, Query

from dealership.dependencies import get_inventory, public_search_criteria
from dealership.schemas.common import success_response, paginated_response
from dealership.services.criteria import SearchCriteria
from dealership.services.inventory_service import InventoryService

router = APIRouter(prefix="/vehicles")

RELATED_LIMIT = 3
HOME_FEATURED_LIMIT = 6


@router.get("", summary="Search the public catalog")
def list_vehicles(
    page:      int | None = Query(None, ge=1),
    limit:     int | None = Query(None, ge=1, le=100),
    criteria:  SearchCriteria = Depends(public_search_criteria),
    inventory: InventoryService = Depends(get_inventory),
):
    """
    Sold vehicles are never listed. Filters that cannot be parsed are ignored.
    Without `page`/`limit` the whole result set is returned.
    `availableBrands` feeds the brand dropdown.
    """
    brands = inventory.distinct_brands()
    if page is None and limit is None:
        data = inventory.search(criteria)
        return paginated_response("Vehicles retrieved successfully", data, len(data), 1, max(len(data), 1),
                                  availableBrands=brands)

    page, limit = page or 1, limit or 12
    data, total = inventory.search_page(criteria, page, limit)
    return paginated_response("Vehicles retrieved successfully", data, total, page, limit,
                              availableBrands=brands)


@router.get("/featured", summary="Featured vehicles for the home page")
def featured_vehicles(
    limit:     int = Query(HOME_FEATURED_LIMIT, ge=1, le=24),
    inventory: InventoryService = Depends(get_inventory),
):
    """Falls back to the latest available vehicles when nothing is featured."""
    data = inventory.featured(limit)
    if not data:
        data = inventory.latest_available(limit)
    return success_response("Featured vehicles retrieved", data)


@router.get("/brands", summary="Brands present in the public catalog")
def list_brands(inventory: InventoryService = Depends(get_inventory)):
    return success_response("Brands retrieved", inventory.distinct_brands())


@router.get("/{vehicle_id}", summary="Vehicle detail with related vehicles")
def get_vehicle(vehicle_id: str, inventory: InventoryService = Depends(get_inventory)):
    vehicle = inventory.get(vehicle_id)
    return success_response("Vehicle retrieved", {
        "vehicle": vehicle,
        "related": inventory.related(vehicle.id, RELATED_LIMIT),
    })
