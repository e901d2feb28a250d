import pytest

from dealership.models.car import FuelType, Transmission, VehicleStatus
from dealership.store.factory import build_vehicle_store
from dealership.store.memory import InMemoryVehicleStore
from dealership.store.predicates import (
    MATCH_ALL, NEWEST_FIRST, And, Contains, Equals, NotEquals, Or, OrderSpec, Range,
)
from dealership.store.sql import compile_predicate
from dealership.utils.exceptions import NotFoundException


def _fields(**overrides):
    fields = {
        "brand": "Kia", "model": "Sportage", "year": 2023, "price": 530000, "mileage": 9000,
        "fuelType": FuelType.GASOLINE, "transmission": Transmission.AUTOMATIC, "color": "Gris",
        "description": "Kia Sportage EX Pack, garantía vigente.",
        "status": VehicleStatus.AVAILABLE, "featured": False,
    }
    fields.update(overrides)
    return fields


def _images(*urls):
    return [{"url": url, "alt": None, "order": i, "isPrimary": i == 0} for i, url in enumerate(urls)]


def test_find_many_sorts_newest_first(store):
    ids = [v.id for v in store.find_many(MATCH_ALL, NEWEST_FIRST)]
    assert ids == ["1", "2", "3", "4", "5", "6", "7", "8", "9"]


def test_find_many_supports_limit_offset_and_ascending(store):
    page = store.find_many(MATCH_ALL, NEWEST_FIRST, limit=3, offset=3)
    assert [v.id for v in page] == ["4", "5", "6"]

    oldest = store.find_many(MATCH_ALL, OrderSpec("createdAt", descending=False), limit=1)
    assert oldest[0].id == "9"


def test_find_many_interprets_each_predicate(store):
    assert [v.id for v in store.find_many(Equals("brand", "Volvo"))] == ["3"]
    assert "7" not in [v.id for v in store.find_many(NotEquals("status", VehicleStatus.RESERVED))]
    assert {v.id for v in store.find_many(Range("price", 1000000, 1300000))} == {"1", "9"}
    assert [v.id for v in store.find_many(Contains("model", "cr-v"))] == ["7"]
    either = Or((Equals("brand", "SEAT"), Equals("brand", "Toyota")))
    assert [v.id for v in store.find_many(either)] == ["5", "8"]
    assert store.find_many(Or(())) == []


def test_contains_folds_non_ascii_case(store):
    assert [v.id for v in store.find_many(Contains("description", "HÍBRIDO"))] == ["3"]
    assert [v.id for v in store.find_many(Contains("description", "DUEÑO"))] == ["1"]


def test_contains_treats_like_wildcards_literally(store):
    assert store.find_many(Contains("description", "%")) == []
    assert store.find_many(Contains("model", "_")) == []


def test_find_by_id_returns_images_in_order(store):
    bmw = store.find_by_id("1")
    assert bmw.title == "BMW X4 2024"
    assert [img.order for img in bmw.images] == [0, 1]
    assert bmw.primaryImage.id == "img1"
    assert store.find_by_id("missing") is None


def test_find_distinct_and_count(store):
    not_sold = NotEquals("status", VehicleStatus.SOLD)
    assert "Honda" in store.find_distinct("brand", not_sold)
    assert store.find_distinct("brand", Equals("status", VehicleStatus.RESERVED)) == {"Honda"}
    assert store.count(MATCH_ALL) == 9
    assert store.count(Equals("featured", True)) == 6


def test_create_with_images_is_visible_as_a_unit(store):
    created = store.create_with_images(_fields(), _images("https://cdn/a.jpg", "https://cdn/b.jpg"))

    fetched = store.find_by_id(created.id)
    assert fetched.brand == "Kia"
    assert [img.url for img in fetched.images] == ["https://cdn/a.jpg", "https://cdn/b.jpg"]
    assert all(img.carId == created.id for img in fetched.images)
    assert store.find_many(MATCH_ALL, limit=1)[0].id == created.id


def test_replace_with_images_swaps_fields_and_images(store):
    created = store.create_with_images(_fields(), _images("a", "b", "c"))
    old_ids = [img.id for img in created.images]

    replaced = store.replace_with_images(created.id, _fields(price=499000), _images("z"))

    assert replaced.price == 499000
    assert [(img.url, img.order) for img in replaced.images] == [("z", 0)]
    assert replaced.createdAt == store.find_by_id(created.id).createdAt
    for image_id in old_ids:
        assert store.find_image(image_id) is None


def test_replace_missing_vehicle_raises_not_found(store):
    with pytest.raises(NotFoundException):
        store.replace_with_images("missing", _fields(), [])


def test_delete_removes_vehicle_and_images(store):
    store.delete("1")
    assert store.find_by_id("1") is None
    assert store.find_image("img1") is None
    assert store.find_image("img2") is None
    with pytest.raises(NotFoundException):
        store.delete("1")


def test_memory_store_hands_out_copies():
    store = InMemoryVehicleStore.with_sample_data()
    vehicle = store.find_by_id("1")
    vehicle.images.clear()
    assert len(store.find_by_id("1").images) == 2


def test_compile_predicate_renders_where_clause():
    clause = compile_predicate(And((Equals("brand", "BMW"), Range("year", 2020, None))))
    sql = str(clause.compile(compile_kwargs={"literal_binds": True}))
    assert "cars.brand = 'BMW'" in sql
    assert "cars.year >= 2020" in sql


def test_factory_selects_backend():
    assert isinstance(build_vehicle_store("memory"), InMemoryVehicleStore)
    with pytest.raises(ValueError):
        build_vehicle_store("sql")
    with pytest.raises(ValueError):
        build_vehicle_store("redis")


def test_memory_store_is_refused_outside_sqlite():
    with pytest.raises(ValueError):
        build_vehicle_store("memory", is_sqlite=False)
