from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy import String, and_, false, func, or_, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.sql.functions import FunctionElement

from dealership.models.car import Car, CarImage, utcnow
from dealership.schemas.vehicle import VehicleImageOut, VehicleOut
from dealership.store.base import VehicleStore
from dealership.store.predicates import (
    And, Contains, Equals, NEWEST_FIRST, NotEquals, Or, OrderSpec, Predicate, Range,
)
from dealership.utils.exceptions import NotFoundException, StorageFailureException

logger = logging.getLogger(__name__)


def _column(name: str):
    return getattr(Car, name)


class casefold(FunctionElement):
    """Unicode case folding: the casefold() registered in database.py on SQLite, lower() elsewhere."""
    type = String()
    name = "casefold"
    inherit_cache = True


@compiles(casefold)
def _compile_casefold(element, compiler, **kw):
    return f"lower({compiler.process(element.clauses, **kw)})"


@compiles(casefold, "sqlite")
def _compile_casefold_sqlite(element, compiler, **kw):
    return f"casefold({compiler.process(element.clauses, **kw)})"


def compile_predicate(predicate: Predicate):
    """Translate a predicate tree into a SQLAlchemy boolean clause over Car."""
    if isinstance(predicate, And):
        return and_(true(), *[compile_predicate(p) for p in predicate.items])
    if isinstance(predicate, Or):
        return or_(false(), *[compile_predicate(p) for p in predicate.items])
    if isinstance(predicate, Equals):
        return _column(predicate.field) == predicate.value
    if isinstance(predicate, NotEquals):
        return _column(predicate.field) != predicate.value
    if isinstance(predicate, Range):
        column = _column(predicate.field)
        clauses = []
        if predicate.low is not None:
            clauses.append(column >= predicate.low)
        if predicate.high is not None:
            clauses.append(column <= predicate.high)
        return and_(true(), *clauses)
    if isinstance(predicate, Contains):
        return casefold(_column(predicate.field)).contains(predicate.text.casefold(), autoescape=True)
    raise TypeError(f"Unsupported predicate: {predicate!r}")


class SqlVehicleStore(VehicleStore):
    """VehicleStore backed by SQLAlchemy. One session per call, one transaction per write."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(f"Vehicle store operation failed: {exc}")
            raise StorageFailureException() from exc
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # ─── Reads ────────────────────────────────────────────────────────────────
    def find_many(
        self,
        predicate: Predicate,
        order: OrderSpec = NEWEST_FIRST,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[VehicleOut]:
        sort_column = _column(order.field)
        with self._session() as db:
            q = db.query(Car).filter(compile_predicate(predicate))
            q = q.order_by(sort_column.desc() if order.descending else sort_column.asc())
            if offset:
                q = q.offset(offset)
            if limit is not None:
                q = q.limit(limit)
            return [VehicleOut.model_validate(car) for car in q.all()]

    def find_by_id(self, vehicle_id: str) -> Optional[VehicleOut]:
        with self._session() as db:
            car = db.get(Car, vehicle_id)
            return VehicleOut.model_validate(car) if car else None

    def find_distinct(self, field: str, predicate: Predicate) -> set:
        with self._session() as db:
            rows = db.query(_column(field)).filter(compile_predicate(predicate)).distinct().all()
            return {row[0] for row in rows}

    def count(self, predicate: Predicate) -> int:
        with self._session() as db:
            return db.query(func.count(Car.id)).filter(compile_predicate(predicate)).scalar() or 0

    def find_image(self, image_id: str) -> Optional[VehicleImageOut]:
        with self._session() as db:
            img = db.get(CarImage, image_id)
            return VehicleImageOut.model_validate(img) if img else None

    # ─── Writes ───────────────────────────────────────────────────────────────
    def create_with_images(self, fields: dict[str, Any], images: list[dict[str, Any]]) -> VehicleOut:
        with self._session() as db, db.begin():
            car = Car(**fields)
            car.images = [CarImage(**img) for img in images]
            db.add(car)
            db.flush()
            return VehicleOut.model_validate(car)

    def replace_with_images(
        self, vehicle_id: str, fields: dict[str, Any], images: list[dict[str, Any]]
    ) -> VehicleOut:
        with self._session() as db, db.begin():
            car = db.get(Car, vehicle_id)
            if car is None:
                raise NotFoundException("Vehicle")

            # Old rows must be gone before the new ones reuse their (carId, order) slots
            car.images.clear()
            db.flush()

            for name, value in fields.items():
                setattr(car, name, value)
            car.updatedAt = utcnow()
            car.images.extend(CarImage(**img) for img in images)
            db.flush()
            return VehicleOut.model_validate(car)

    def delete(self, vehicle_id: str) -> None:
        with self._session() as db, db.begin():
            car = db.get(Car, vehicle_id)
            if car is None:
                raise NotFoundException("Vehicle")
            db.delete(car)
