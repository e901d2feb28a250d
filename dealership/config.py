from pydantic_settings import BaseSettings
from typing import List, Literal


class Settings(BaseSettings):
    # ─── Application ───────────────────────────────────────────────────────────
    APP_NAME: str = "AMSA Autos Inventory"
    APP_ENV:  str = "development"
    APP_DEBUG: bool = True
    APP_HOST:  str = "0.0.0.0"
    APP_PORT:  int = 8000
    LOG_LEVEL: str = "INFO"

    # ─── Database ──────────────────────────────────────────────────────────────
    DATABASE_URL:          str  = "sqlite:///./dealership.db"
    DATABASE_POOL_SIZE:    int  = 10
    DATABASE_MAX_OVERFLOW: int  = 20
    DATABASE_POOL_TIMEOUT: int  = 30
    DATABASE_ECHO:         bool = False

    # ─── Vehicle store ─────────────────────────────────────────────────────────
    # "memory" serves the bundled sample inventory, "sql" uses DATABASE_URL
    STORE_BACKEND: Literal["memory", "sql"] = "sql"

    # ─── JWT ───────────────────────────────────────────────────────────────────
    SECRET_KEY:                  str = "default-secret-change-me"
    ALGORITHM:                   str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    AUTH_COOKIE_NAME:            str = "auth_token"

    # ─── Seed admin ────────────────────────────────────────────────────────────
    ADMIN_EMAIL:    str = "admin@autosamsa.com.mx"
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_NAME:     str = "Administrador"

    # ─── CORS ──────────────────────────────────────────────────────────────────
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    def get_cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


settings = Settings()
