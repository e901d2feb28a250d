"""
Shared fixtures.

- In-memory SQLite (StaticPool) shared by every session in a test
- `store` runs each store-backed test against both VehicleStore implementations
- `client` is a TestClient over an app built around that store
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import dealership.models  # noqa: F401  registers models on Base.metadata
from dealership.database import Base, get_db
from dealership.main import create_app
from dealership.models.user import User, ADMIN_ROLE
from dealership.scripts.seed import seed_vehicles
from dealership.services.inventory_service import InventoryService
from dealership.store.memory import InMemoryVehicleStore
from dealership.store.sql import SqlVehicleStore
from dealership.utils.security import create_access_token, hash_password

ADMIN_EMAIL = "admin@autosamsa.com.mx"
ADMIN_PASSWORD = "admin123"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(params=["memory", "sql"])
def store(request, db):
    if request.param == "memory":
        return InMemoryVehicleStore.with_sample_data()
    seed_vehicles(db)
    db.commit()
    return SqlVehicleStore(TestingSessionLocal)


@pytest.fixture
def inventory(store):
    return InventoryService(store)


@pytest.fixture
def client(store):
    app = create_app(vehicle_store=store)

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def admin_user(db):
    user = User(
        name="Administrador",
        email=ADMIN_EMAIL,
        password=hash_password(ADMIN_PASSWORD),
        role=ADMIN_ROLE,
        isActive=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token(admin_user.id, admin_user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def vehicle_payload():
    def build(**overrides):
        payload = {
            "brand": "Mazda",
            "model": "CX-5",
            "year": 2022,
            "price": 480000,
            "mileage": 30000,
            "fuelType": "gasoline",
            "transmission": "automatic",
            "color": "Rojo",
            "description": "Mazda CX-5 Grand Touring, un dueño, servicios al día.",
            "status": "available",
            "featured": False,
        }
        payload.update(overrides)
        return payload
    return build
