import logging
from typing import Any, Mapping, Sequence, Union

from pydantic import ValidationError

from dealership.models.car import VehicleStatus
from dealership.schemas.vehicle import VehicleData, VehicleOut
from dealership.services.criteria import (
    AVAILABLE_ONLY, NOT_SOLD, SearchCriteria, StatusFilter, build_predicate,
)
from dealership.store.base import VehicleStore
from dealership.store.predicates import MATCH_ALL, NEWEST_FIRST, And, Equals, NotEquals
from dealership.utils.exceptions import NotFoundException, ValidationException, field_errors

logger = logging.getLogger(__name__)

VehiclePayload = Union[VehicleData, Mapping[str, Any]]


def vehicle_fields(data: VehiclePayload) -> dict[str, Any]:
    """Validated column values. Raises ValidationException listing every bad field."""
    if not isinstance(data, VehicleData):
        try:
            data = VehicleData.model_validate(dict(data))
        except ValidationError as exc:
            raise ValidationException(field_errors(exc.errors()))
    return data.model_dump(include=set(VehicleData.model_fields))


def normalize_image_urls(image_urls: Sequence[str] | None) -> list[dict[str, Any]]:
    """Blank entries are dropped before indexing; order is 0..n-1 and 0 is primary."""
    urls = [url.strip() for url in (image_urls or []) if url and url.strip()]
    return [
        {"url": url, "alt": None, "order": index, "isPrimary": index == 0}
        for index, url in enumerate(urls)
    ]


class InventoryService:
    """
    Inventory query engine. Stateless; one instance per request around an
    injected VehicleStore.
    """

    def __init__(self, store: VehicleStore):
        self.store = store

    # ─── Queries ──────────────────────────────────────────────────────────────
    def search(self, criteria: SearchCriteria) -> list[VehicleOut]:
        return self.store.find_many(build_predicate(criteria), NEWEST_FIRST)

    def search_page(self, criteria: SearchCriteria, page: int, limit: int) -> tuple[list[VehicleOut], int]:
        predicate = build_predicate(criteria)
        total = self.store.count(predicate)
        items = self.store.find_many(predicate, NEWEST_FIRST, limit, (page - 1) * limit)
        return items, total

    def featured(self, limit: int) -> list[VehicleOut]:
        predicate = And((
            Equals("status", VehicleStatus.AVAILABLE),
            Equals("featured", True),
        ))
        return self.store.find_many(predicate, NEWEST_FIRST, limit)

    def latest_available(self, limit: int) -> list[VehicleOut]:
        return self.store.find_many(AVAILABLE_ONLY.to_predicate(), NEWEST_FIRST, limit)

    def distinct_brands(self, status_filter: StatusFilter = NOT_SOLD) -> list[str]:
        predicate = status_filter.to_predicate() or MATCH_ALL
        return sorted(self.store.find_distinct("brand", predicate))

    def related(self, vehicle_id: str, limit: int) -> list[VehicleOut]:
        vehicle = self.store.find_by_id(vehicle_id)
        if vehicle is None:
            return []
        predicate = And((
            Equals("brand", vehicle.brand),
            NotEquals("id", vehicle.id),
            Equals("status", VehicleStatus.AVAILABLE),
        ))
        return self.store.find_many(predicate, NEWEST_FIRST, limit)

    def get(self, vehicle_id: str) -> VehicleOut:
        vehicle = self.store.find_by_id(vehicle_id)
        if vehicle is None:
            raise NotFoundException("Vehicle")
        return vehicle

    def stats(self, recent: int = 5) -> dict:
        return {
            "totalCars":     self.store.count(MATCH_ALL),
            "availableCars": self.store.count(Equals("status", VehicleStatus.AVAILABLE)),
            "reservedCars":  self.store.count(Equals("status", VehicleStatus.RESERVED)),
            "soldCars":      self.store.count(Equals("status", VehicleStatus.SOLD)),
            "recentCars":    self.store.find_many(MATCH_ALL, NEWEST_FIRST, recent),
        }

    # ─── Writes ───────────────────────────────────────────────────────────────
    def create(self, data: VehiclePayload, image_urls: Sequence[str] | None = None) -> VehicleOut:
        fields = vehicle_fields(data)
        vehicle = self.store.create_with_images(fields, normalize_image_urls(image_urls))
        logger.info(f"Created vehicle {vehicle.id} ({vehicle.title}) with {len(vehicle.images)} images")
        return vehicle

    def update(
        self, vehicle_id: str, data: VehiclePayload, image_urls: Sequence[str] | None = None
    ) -> VehicleOut:
        # Full replace: the stored image list becomes exactly `image_urls`
        fields = vehicle_fields(data)
        vehicle = self.store.replace_with_images(vehicle_id, fields, normalize_image_urls(image_urls))
        logger.info(f"Updated vehicle {vehicle.id} ({vehicle.title}), images replaced ({len(vehicle.images)})")
        return vehicle

    def delete(self, vehicle_id: str) -> None:
        self.store.delete(vehicle_id)
        logger.info(f"Deleted vehicle {vehicle_id}")
