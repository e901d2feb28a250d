"""
Inventory search criteria.

Criteria arrive as untrusted query-string values. Parsing is fail-soft: a
value that cannot be understood means "no filter" for that category, never
an error. `build_predicate` turns validated criteria into the store's closed
predicate language.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Type, TypeVar

from dealership.models.car import FuelType, Transmission, VehicleStatus
from dealership.store.predicates import (
    And, Contains, Equals, NotEquals, Or, Predicate, Range,
)

E = TypeVar("E", bound=Enum)

# Public query-string names
BRAND_PARAM        = "marca"
PRICE_MIN_PARAM    = "precio_min"
PRICE_MAX_PARAM    = "precio_max"
YEAR_MIN_PARAM     = "ano_min"
YEAR_MAX_PARAM     = "ano_max"
FUEL_PARAM         = "combustible"
TRANSMISSION_PARAM = "transmision"
SEARCH_PARAM       = "buscar"
STATUS_PARAM       = "estado"

FREE_TEXT_FIELDS = ("brand", "model", "description")


@dataclass(frozen=True)
class StatusFilter:
    """Either an exact status, an excluded status, or neither (all statuses)."""
    equals: Optional[VehicleStatus] = None
    excludes: Optional[VehicleStatus] = None

    @classmethod
    def exactly(cls, status: VehicleStatus) -> "StatusFilter":
        return cls(equals=status)

    def to_predicate(self) -> Optional[Predicate]:
        if self.equals is not None:
            return Equals("status", self.equals)
        if self.excludes is not None:
            return NotEquals("status", self.excludes)
        return None


NOT_SOLD = StatusFilter(excludes=VehicleStatus.SOLD)
ANY_STATUS = StatusFilter()
AVAILABLE_ONLY = StatusFilter.exactly(VehicleStatus.AVAILABLE)


# ─── Fail-soft parsers ────────────────────────────────────────────────────────
def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


# Plain decimal numbers only: no digit separators, exponents, nan or inf
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)

# Bounds beyond a signed 64-bit integer cannot be bound by SQL backends
_MAX_BOUND = 2 ** 63 - 1


def parse_number(value: Optional[str]) -> Optional[float]:
    """'150000' -> 150000, '99.5' -> 99.5, 'abc' / '1_000' / 'nan' / '' -> None."""
    value = _clean(value)
    if value is None or not _NUMBER_RE.fullmatch(value):
        return None
    number = int(value) if value.lstrip("+-").isdigit() else float(value)
    if abs(number) > _MAX_BOUND:
        return None
    return number


def parse_enum(enum_cls: Type[E], value: Optional[str]) -> Optional[E]:
    value = _clean(value)
    if value is None:
        return None
    try:
        return enum_cls(value.lower())
    except ValueError:
        return None


# ─── Criteria ─────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class SearchCriteria:
    brand:        Optional[str] = None
    price_min:    Optional[float] = None
    price_max:    Optional[float] = None
    year_min:     Optional[float] = None
    year_max:     Optional[float] = None
    fuel_type:    Optional[FuelType] = None
    transmission: Optional[Transmission] = None
    free_text:    Optional[str] = None
    status:       StatusFilter = NOT_SOLD

    @classmethod
    def from_query(
        cls,
        params: Mapping[str, Optional[str]],
        default_status: StatusFilter = NOT_SOLD,
    ) -> "SearchCriteria":
        """
        Build criteria from public query parameters (marca, precio_min, ...).
        An `estado` naming a known status overrides `default_status`.
        """
        status = default_status
        requested = parse_enum(VehicleStatus, params.get(STATUS_PARAM))
        if requested is not None:
            status = StatusFilter.exactly(requested)

        return cls(
            brand=_clean(params.get(BRAND_PARAM)),
            price_min=parse_number(params.get(PRICE_MIN_PARAM)),
            price_max=parse_number(params.get(PRICE_MAX_PARAM)),
            year_min=parse_number(params.get(YEAR_MIN_PARAM)),
            year_max=parse_number(params.get(YEAR_MAX_PARAM)),
            fuel_type=parse_enum(FuelType, params.get(FUEL_PARAM)),
            transmission=parse_enum(Transmission, params.get(TRANSMISSION_PARAM)),
            free_text=_clean(params.get(SEARCH_PARAM)),
            status=status,
        )


def build_predicate(criteria: SearchCriteria) -> Predicate:
    """AND across categories; the free-text category is an OR over brand/model/description."""
    clauses: list[Predicate] = []

    status_clause = criteria.status.to_predicate()
    if status_clause is not None:
        clauses.append(status_clause)
    if criteria.brand:
        clauses.append(Equals("brand", criteria.brand))
    if criteria.price_min is not None or criteria.price_max is not None:
        clauses.append(Range("price", criteria.price_min, criteria.price_max))
    if criteria.year_min is not None or criteria.year_max is not None:
        clauses.append(Range("year", criteria.year_min, criteria.year_max))
    if criteria.fuel_type is not None:
        clauses.append(Equals("fuelType", criteria.fuel_type))
    if criteria.transmission is not None:
        clauses.append(Equals("transmission", criteria.transmission))
    if criteria.free_text:
        clauses.append(Or(tuple(Contains(name, criteria.free_text) for name in FREE_TEXT_FIELDS)))

    return And(tuple(clauses))
