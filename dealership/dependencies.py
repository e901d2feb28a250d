from dataclasses import replace
from typing import Optional

from fastapi import Depends, Query, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from dealership.config import settings
from dealership.database import get_db
from dealership.models.user import User, ADMIN_ROLE
from dealership.services.criteria import ANY_STATUS, NOT_SOLD, SearchCriteria
from dealership.services.inventory_service import InventoryService
from dealership.store.base import VehicleStore
from dealership.utils.security import verify_access_token
from dealership.utils.exceptions import (
    UnauthorizedException,
    ForbiddenException,
    AccountInactiveException,
)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


# ─── Get Current User ─────────────────────────────────────────────────────────
def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Validate the session token and return the current User.
    The token is read from the Bearer header first, then the auth cookie.
    Raises 401 if token is missing, invalid, or expired.
    Raises 403 if account is inactive.
    """
    token = credentials.credentials if credentials else request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not token:
        raise UnauthorizedException("No authentication token provided")

    payload = verify_access_token(token)
    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise UnauthorizedException("Invalid token payload")

    user = db.query(User).filter(User.id == int(user_id)).first()
    if not user:
        raise UnauthorizedException("User for this session no longer exists")

    if not user.isActive:
        raise AccountInactiveException()

    return user


def get_admin_user(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != ADMIN_ROLE:
        raise ForbiddenException("This action requires the admin role")
    return current_user


# ─── Inventory ────────────────────────────────────────────────────────────────
def get_vehicle_store(request: Request) -> VehicleStore:
    """The store chosen at startup (STORE_BACKEND), shared by every request."""
    return request.app.state.vehicle_store


def get_inventory(store: VehicleStore = Depends(get_vehicle_store)) -> InventoryService:
    return InventoryService(store)


# Query values are taken as raw strings so that malformed numbers or unknown
# enum values drop the filter instead of failing the request.
def public_search_criteria(
    marca:       Optional[str] = Query(None, description="Exact brand"),
    precio_min:  Optional[str] = Query(None),
    precio_max:  Optional[str] = Query(None),
    ano_min:     Optional[str] = Query(None),
    ano_max:     Optional[str] = Query(None),
    combustible: Optional[str] = Query(None, description="gasoline | diesel | hybrid | electric"),
    transmision: Optional[str] = Query(None, description="automatic | manual"),
    buscar:      Optional[str] = Query(None, description="Free text over brand, model and description"),
) -> SearchCriteria:
    return SearchCriteria.from_query({
        "marca": marca,
        "precio_min": precio_min,
        "precio_max": precio_max,
        "ano_min": ano_min,
        "ano_max": ano_max,
        "combustible": combustible,
        "transmision": transmision,
        "buscar": buscar,
    }, default_status=NOT_SOLD)


def admin_search_criteria(
    public: SearchCriteria = Depends(public_search_criteria),
    estado: Optional[str] = Query(None, description="available | reserved | sold"),
) -> SearchCriteria:
    """Admin listing sees every status unless `estado` narrows it."""
    criteria = SearchCriteria.from_query({"estado": estado}, default_status=ANY_STATUS)
    return replace(public, status=criteria.status)
