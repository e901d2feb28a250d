from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from dealership.schemas.vehicle import VehicleImageOut, VehicleOut
from dealership.store.predicates import NEWEST_FIRST, OrderSpec, Predicate


class VehicleStore(ABC):
    """
    Durable (or fixture) storage for vehicles and their images.

    Contract:
        - Reads return detached VehicleOut copies; mutating them never touches storage.
        - `create_with_images` and `replace_with_images` are all-or-nothing: readers
          never observe a vehicle without the images it was written with.
        - `replace_with_images` and `delete` raise NotFoundException for unknown ids.
        - Backend failures surface as StorageFailureException, once, without retries.

    `fields` are VehicleData values (enums included); `images` are dicts with
    url / alt / order / isPrimary.
    """

    @abstractmethod
    def find_many(
        self,
        predicate: Predicate,
        order: OrderSpec = NEWEST_FIRST,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[VehicleOut]:
        ...

    @abstractmethod
    def find_by_id(self, vehicle_id: str) -> Optional[VehicleOut]:
        ...

    @abstractmethod
    def find_distinct(self, field: str, predicate: Predicate) -> set:
        ...

    @abstractmethod
    def count(self, predicate: Predicate) -> int:
        ...

    @abstractmethod
    def find_image(self, image_id: str) -> Optional[VehicleImageOut]:
        ...

    @abstractmethod
    def create_with_images(self, fields: dict[str, Any], images: list[dict[str, Any]]) -> VehicleOut:
        ...

    @abstractmethod
    def replace_with_images(
        self, vehicle_id: str, fields: dict[str, Any], images: list[dict[str, Any]]
    ) -> VehicleOut:
        ...

    @abstractmethod
    def delete(self, vehicle_id: str) -> None:
        ...
