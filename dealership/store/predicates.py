"""
Closed filter language shared by the inventory engine and every VehicleStore.

The engine builds a tree out of these variants; a store interprets it (the
in-memory store evaluates it against records, the SQL store compiles it to a
WHERE clause). Field names are VehicleOut / Car attribute names.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

FILTERABLE_FIELDS = frozenset({
    "id", "brand", "model", "year", "price", "mileage", "fuelType",
    "transmission", "color", "description", "status", "featured",
})


def _check_field(name: str) -> None:
    if name not in FILTERABLE_FIELDS:
        raise ValueError(f"Unknown filter field: {name}")


@dataclass(frozen=True)
class Equals:
    field: str
    value: Any

    def __post_init__(self):
        _check_field(self.field)


@dataclass(frozen=True)
class NotEquals:
    field: str
    value: Any

    def __post_init__(self):
        _check_field(self.field)


@dataclass(frozen=True)
class Range:
    """Inclusive bounds; either side may be None. low > high matches nothing."""
    field: str
    low: float | None = None
    high: float | None = None

    def __post_init__(self):
        _check_field(self.field)


@dataclass(frozen=True)
class Contains:
    """Case-insensitive substring match."""
    field: str
    text: str

    def __post_init__(self):
        _check_field(self.field)


@dataclass(frozen=True)
class And:
    items: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class Or:
    items: tuple = field(default_factory=tuple)


Predicate = Union[Equals, NotEquals, Range, Contains, And, Or]

MATCH_ALL = And()


@dataclass(frozen=True)
class OrderSpec:
    field: str = "createdAt"
    descending: bool = True


NEWEST_FIRST = OrderSpec("createdAt", descending=True)


def matches(predicate: Predicate, record: Any) -> bool:
    """Evaluate a predicate against any object exposing the filterable attributes."""
    if isinstance(predicate, And):
        return all(matches(p, record) for p in predicate.items)
    if isinstance(predicate, Or):
        return any(matches(p, record) for p in predicate.items)
    if isinstance(predicate, Equals):
        return getattr(record, predicate.field) == predicate.value
    if isinstance(predicate, NotEquals):
        return getattr(record, predicate.field) != predicate.value
    if isinstance(predicate, Range):
        value = getattr(record, predicate.field)
        if predicate.low is not None and value < predicate.low:
            return False
        if predicate.high is not None and value > predicate.high:
            return False
        return True
    if isinstance(predicate, Contains):
        value = getattr(record, predicate.field) or ""
        return predicate.text.casefold() in value.casefold()
    raise TypeError(f"Unsupported predicate: {predicate!r}")
