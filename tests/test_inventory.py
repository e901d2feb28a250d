from datetime import datetime, timezone

import pytest

from dealership.models.car import VehicleStatus
from dealership.schemas.vehicle import VehicleOut
from dealership.services.criteria import ANY_STATUS, SearchCriteria
from dealership.services.inventory_service import normalize_image_urls
from dealership.utils.exceptions import NotFoundException, ValidationException


def _ids(vehicles):
    return [v.id for v in vehicles]


# ─── search ───────────────────────────────────────────────────────────────────
def test_filters_are_combined_with_and(inventory):
    results = inventory.search(SearchCriteria.from_query({"marca": "Honda", "ano_min": "2022"}))
    assert [(v.brand, v.model, v.year) for v in results] == [("Honda", "CR-V", 2022)]


def test_free_text_matches_brand_or_model_or_description(inventory):
    by_brand = inventory.search(SearchCriteria.from_query({"buscar": "volvo"}))
    assert _ids(by_brand) == ["3"]

    by_description = inventory.search(SearchCriteria.from_query({"buscar": "híbrido"}))
    assert _ids(by_description) == ["3"]

    upper_case = inventory.search(SearchCriteria.from_query({"buscar": "HÍBRIDO"}))
    assert _ids(upper_case) == ["3"]

    by_model = inventory.search(SearchCriteria.from_query({"buscar": "camry"}))
    assert _ids(by_model) == ["8"]


def test_public_search_never_returns_sold(inventory, vehicle_payload):
    inventory.create(vehicle_payload(status="sold"))

    public = inventory.search(SearchCriteria.from_query({}))
    assert all(v.status != VehicleStatus.SOLD for v in public)

    admin = inventory.search(SearchCriteria.from_query({}, default_status=ANY_STATUS))
    assert len(admin) == len(public) + 1
    assert {v.status for v in admin} == {VehicleStatus.AVAILABLE, VehicleStatus.RESERVED, VehicleStatus.SOLD}


def test_results_are_newest_first(inventory, vehicle_payload):
    newest = inventory.create(vehicle_payload())
    results = inventory.search(SearchCriteria.from_query({}))

    assert results[0].id == newest.id
    created = [v.createdAt for v in results]
    assert created == sorted(created, reverse=True)


def test_inverted_range_is_empty_not_an_error(inventory):
    criteria = SearchCriteria.from_query({"precio_min": "2000000", "precio_max": "100000"})
    assert inventory.search(criteria) == []


def test_malformed_numbers_are_ignored(inventory):
    criteria = SearchCriteria.from_query({"precio_min": "barato", "ano_max": "2o22"})
    assert len(inventory.search(criteria)) == 9


def test_out_of_range_numbers_are_ignored(inventory):
    criteria = SearchCriteria.from_query({"precio_min": "99999999999999999999", "ano_max": "1_000"})
    assert len(inventory.search(criteria)) == 9


def test_search_page_reports_total(inventory):
    items, total = inventory.search_page(SearchCriteria.from_query({}), page=2, limit=4)
    assert total == 9
    assert _ids(items) == ["5", "6", "7", "8"]


# ─── auxiliary queries ────────────────────────────────────────────────────────
def test_featured_is_available_and_flagged(inventory):
    assert _ids(inventory.featured(4)) == ["1", "2", "3", "4"]


def test_featured_and_latest_available_are_separate(inventory, vehicle_payload):
    for vehicle in inventory.featured(10):
        inventory.update(vehicle.id, vehicle_payload(featured=False))

    assert inventory.featured(6) == []
    latest = inventory.latest_available(3)
    assert len(latest) == 3
    assert all(v.status == VehicleStatus.AVAILABLE for v in latest)


def test_distinct_brands_are_sorted_and_skip_sold(inventory, vehicle_payload):
    inventory.create(vehicle_payload(brand="Audi", status="sold"))
    brands = inventory.distinct_brands()

    assert brands == sorted(brands)
    assert "Audi" not in brands
    assert "Audi" in inventory.distinct_brands(ANY_STATUS)


def test_related_excludes_self_and_unavailable(inventory, vehicle_payload):
    inventory.create(vehicle_payload(brand="BMW", model="X1"))
    inventory.create(vehicle_payload(brand="BMW", model="M3", status="reserved"))
    inventory.create(vehicle_payload(brand="BMW", model="Z4", status="sold"))

    related = inventory.related("1", 3)

    assert [v.model for v in related] == ["X1"]
    assert "1" not in _ids(related)


def test_related_for_unknown_vehicle_is_empty(inventory):
    assert inventory.related("no-such-id", 3) == []


def test_stats_counts_by_status(inventory):
    stats = inventory.stats()
    assert stats["totalCars"] == 9
    assert stats["availableCars"] == 8
    assert stats["reservedCars"] == 1
    assert stats["soldCars"] == 0
    assert _ids(stats["recentCars"]) == ["1", "2", "3", "4", "5"]


# ─── images ───────────────────────────────────────────────────────────────────
def test_primary_image_is_lowest_order_regardless_of_insertion():
    now = datetime.now(timezone.utc)
    vehicle = VehicleOut.model_validate({
        "id": "v", "brand": "Audi", "model": "A4", "year": 2022, "price": 1, "mileage": 0,
        "fuelType": "gasoline", "transmission": "manual", "color": "Negro",
        "description": "descripción suficiente", "status": "available", "featured": False,
        "createdAt": now, "updatedAt": now,
        "images": [
            {"id": "c", "url": "c.jpg", "order": 2, "carId": "v"},
            {"id": "a", "url": "a.jpg", "order": 0, "carId": "v"},
            {"id": "b", "url": "b.jpg", "order": 1, "carId": "v"},
        ],
    })
    assert vehicle.primaryImage.id == "a"
    assert [img.order for img in vehicle.images] == [0, 1, 2]


def test_blank_image_urls_are_dropped_before_indexing():
    images = normalize_image_urls(["", " https://cdn/1.jpg ", "   ", "https://cdn/2.jpg"])
    assert [(img["url"], img["order"], img["isPrimary"]) for img in images] == [
        ("https://cdn/1.jpg", 0, True),
        ("https://cdn/2.jpg", 1, False),
    ]


# ─── writes ───────────────────────────────────────────────────────────────────
def test_create_attaches_images_in_given_order(inventory, vehicle_payload):
    vehicle = inventory.create(vehicle_payload(), ["https://cdn/front.jpg", "", "https://cdn/back.jpg"])

    assert [(img.url, img.order) for img in vehicle.images] == [
        ("https://cdn/front.jpg", 0), ("https://cdn/back.jpg", 1),
    ]
    assert vehicle.primaryImage.url == "https://cdn/front.jpg"
    assert inventory.get(vehicle.id).images == vehicle.images


def test_update_replaces_the_whole_image_list(inventory, store, vehicle_payload):
    vehicle = inventory.create(vehicle_payload(), [f"https://cdn/{i}.jpg" for i in range(5)])
    old_ids = [img.id for img in vehicle.images]

    updated = inventory.update(vehicle.id, vehicle_payload(color="Azul"), ["https://cdn/4.jpg", "https://cdn/new.jpg"])

    assert updated.color == "Azul"
    assert [(img.url, img.order) for img in updated.images] == [
        ("https://cdn/4.jpg", 0), ("https://cdn/new.jpg", 1),
    ]
    assert not set(old_ids) & {img.id for img in updated.images}
    assert all(store.find_image(image_id) is None for image_id in old_ids)


def test_update_unknown_vehicle_is_not_found(inventory, vehicle_payload):
    with pytest.raises(NotFoundException):
        inventory.update("missing", vehicle_payload())


def test_delete_cascades_and_is_not_idempotent(inventory, store):
    image_ids = [img.id for img in inventory.get("1").images]

    inventory.delete("1")

    with pytest.raises(NotFoundException):
        inventory.get("1")
    assert all(store.find_image(image_id) is None for image_id in image_ids)
    with pytest.raises(NotFoundException):
        inventory.delete("1")


def test_validation_reports_every_invalid_field(inventory, vehicle_payload):
    with pytest.raises(ValidationException) as exc_info:
        inventory.create(vehicle_payload(year=1800, price=0, brand="  ", description="corta"))

    fields = exc_info.value.fields
    assert {"year", "price", "brand", "description"} <= set(fields)
    assert exc_info.value.status_code == 422


def test_failed_validation_writes_nothing(inventory, vehicle_payload):
    before = inventory.stats()["totalCars"]
    with pytest.raises(ValidationException):
        inventory.create(vehicle_payload(fuelType="steam"))
    assert inventory.stats()["totalCars"] == before
