import logging

from sqlalchemy.orm import sessionmaker

from dealership.store.base import VehicleStore
from dealership.store.memory import InMemoryVehicleStore
from dealership.store.sql import SqlVehicleStore

logger = logging.getLogger(__name__)


def build_vehicle_store(
    backend: str,
    session_factory: sessionmaker | None = None,
    is_sqlite: bool = True,
) -> VehicleStore:
    """
    Pick the VehicleStore implementation named by STORE_BACKEND.

    The memory store only runs beside SQLite: contact submissions keep a
    foreign key to `cars`, which SQLite does not enforce and other databases do.
    """
    if backend == "memory":
        if not is_sqlite:
            raise ValueError("STORE_BACKEND=memory requires a SQLite DATABASE_URL")
        logger.info("Vehicle store: in-memory sample inventory")
        return InMemoryVehicleStore.with_sample_data()
    if backend == "sql":
        if session_factory is None:
            raise ValueError("The sql vehicle store needs a session factory")
        logger.info("Vehicle store: SQL database")
        return SqlVehicleStore(session_factory)
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")
