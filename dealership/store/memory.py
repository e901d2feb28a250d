from __future__ import annotations

import threading
from typing import Any, Iterable, Mapping, Optional

from dealership.models.car import new_id, utcnow
from dealership.schemas.vehicle import VehicleImageOut, VehicleOut
from dealership.store.base import VehicleStore
from dealership.store.predicates import NEWEST_FIRST, OrderSpec, Predicate, matches
from dealership.store.sample_data import SAMPLE_VEHICLES
from dealership.utils.exceptions import NotFoundException


class InMemoryVehicleStore(VehicleStore):
    """
    Fixture store used by tests and by the demo deployment.

    - Keeps vehicles in insertion order; ties on the sort key keep that order
    - Every write swaps a whole record under a lock, so readers never see
      a vehicle without its images
    - Hands out deep copies
    """

    def __init__(self, vehicles: Iterable[Mapping[str, Any]] = ()) -> None:
        self._lock = threading.RLock()
        self._vehicles: dict[str, VehicleOut] = {}
        for raw in vehicles:
            record = self._build(raw)
            self._vehicles[record.id] = record

    @classmethod
    def with_sample_data(cls) -> "InMemoryVehicleStore":
        return cls(SAMPLE_VEHICLES)

    @staticmethod
    def _build(raw: Mapping[str, Any]) -> VehicleOut:
        vehicle_id = raw.get("id") or new_id()
        created = raw.get("createdAt") or utcnow()
        images = [
            {**img, "id": img.get("id") or new_id(), "carId": vehicle_id}
            for img in raw.get("images", [])
        ]
        return VehicleOut.model_validate({
            **raw,
            "id": vehicle_id,
            "createdAt": created,
            "updatedAt": raw.get("updatedAt") or created,
            "images": images,
        })

    # ─── Reads ────────────────────────────────────────────────────────────────
    def find_many(
        self,
        predicate: Predicate,
        order: OrderSpec = NEWEST_FIRST,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[VehicleOut]:
        with self._lock:
            rows = [v for v in self._vehicles.values() if matches(predicate, v)]
        rows.sort(key=lambda v: getattr(v, order.field), reverse=order.descending)
        end = offset + limit if limit is not None else None
        rows = rows[offset:end]
        return [v.model_copy(deep=True) for v in rows]

    def find_by_id(self, vehicle_id: str) -> Optional[VehicleOut]:
        with self._lock:
            record = self._vehicles.get(vehicle_id)
        return record.model_copy(deep=True) if record else None

    def find_distinct(self, field: str, predicate: Predicate) -> set:
        with self._lock:
            return {getattr(v, field) for v in self._vehicles.values() if matches(predicate, v)}

    def count(self, predicate: Predicate) -> int:
        with self._lock:
            return sum(1 for v in self._vehicles.values() if matches(predicate, v))

    def find_image(self, image_id: str) -> Optional[VehicleImageOut]:
        with self._lock:
            for vehicle in self._vehicles.values():
                for img in vehicle.images:
                    if img.id == image_id:
                        return img.model_copy()
        return None

    # ─── Writes ───────────────────────────────────────────────────────────────
    def create_with_images(self, fields: dict[str, Any], images: list[dict[str, Any]]) -> VehicleOut:
        record = self._build({**fields, "id": None, "createdAt": None, "images": images})
        with self._lock:
            self._vehicles[record.id] = record
        return record.model_copy(deep=True)

    def replace_with_images(
        self, vehicle_id: str, fields: dict[str, Any], images: list[dict[str, Any]]
    ) -> VehicleOut:
        with self._lock:
            existing = self._vehicles.get(vehicle_id)
            if existing is None:
                raise NotFoundException("Vehicle")
            record = self._build({
                **fields,
                "id": vehicle_id,
                "createdAt": existing.createdAt,
                "updatedAt": utcnow(),
                "images": images,
            })
            self._vehicles[vehicle_id] = record
        return record.model_copy(deep=True)

    def delete(self, vehicle_id: str) -> None:
        with self._lock:
            if self._vehicles.pop(vehicle_id, None) is None:
                raise NotFoundException("Vehicle")
