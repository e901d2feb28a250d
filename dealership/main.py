import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from dealership.config import settings
from dealership.database import SessionLocal, check_db_connection, create_tables
from dealership.store.base import VehicleStore
from dealership.store.factory import build_vehicle_store
from dealership.utils.exceptions import AppException
from dealership.schemas.common import ERROR_RESPONSES
from dealership.middleware.error_handler import (
    app_exception_handler,
    validation_exception_handler,
    integrity_error_handler,
    database_error_handler,
    generic_exception_handler,
)

from dealership.api.v1 import auth
from dealership.api.v1 import vehicles
from dealership.api.v1 import admin_vehicles
from dealership.api.v1 import dashboard
from dealership.api.v1 import contact
from dealership.api.v1 import site_images

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(vehicle_store: VehicleStore | None = None) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        description="Dealership inventory, contact and site content API",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # ─── Vehicle store ────────────────────────────────────────────────────────
    app.state.vehicle_store = vehicle_store or build_vehicle_store(
        settings.STORE_BACKEND, SessionLocal, is_sqlite=settings.is_sqlite,
    )

    # ─── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ─── Exception Handlers ───────────────────────────────────────────────────
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ─── Routers ──────────────────────────────────────────────────────────────
    PREFIX = "/api/v1"
    app.include_router(auth.router,           prefix=PREFIX, tags=["Auth"], responses=ERROR_RESPONSES)
    app.include_router(vehicles.router,       prefix=PREFIX, tags=["Vehicles"], responses=ERROR_RESPONSES)
    app.include_router(admin_vehicles.router, prefix=PREFIX, tags=["Admin: Vehicles"], responses=ERROR_RESPONSES)
    app.include_router(dashboard.router,      prefix=PREFIX, tags=["Admin: Dashboard"], responses=ERROR_RESPONSES)
    app.include_router(contact.router,        prefix=PREFIX, tags=["Contact"], responses=ERROR_RESPONSES)
    app.include_router(site_images.router,    prefix=PREFIX, tags=["Site Images"], responses=ERROR_RESPONSES)

    # ─── Startup ──────────────────────────────────────────────────────────────
    @app.on_event("startup")
    def on_startup():
        if settings.is_sqlite:
            create_tables()
        ok = check_db_connection()
        logger.info("DB connected" if ok else "DB connection FAILED")
        logger.info(f"Vehicle store: {type(app.state.vehicle_store).__name__}")

    # ─── Health ───────────────────────────────────────────────────────────────
    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok", "app": settings.APP_NAME, "version": "1.0.0"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("dealership.main:app", host=settings.APP_HOST, port=settings.APP_PORT,
                reload=settings.is_development)
