from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from dealership.config import settings
from dealership.database import get_db
from dealership.dependencies import get_current_user
from dealership.models.user import User
from dealership.schemas.auth import LoginRequest
from dealership.schemas.common import success_response
from dealership.services.auth_service import auth_service

router = APIRouter(prefix="/auth")


# ─── POST /auth/login ─────────────────────────────────────────────────────────
@router.post("/login", status_code=status.HTTP_200_OK, summary="Login and start an admin session")
def login(data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    """
    Authenticate an admin user.
    The token is returned in the body and also set as an HttpOnly cookie.
    """
    result = auth_service.login(db, data)
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=result["accessToken"],
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )
    return success_response("Login successful", result)


# ─── POST /auth/logout ────────────────────────────────────────────────────────
@router.post("/logout", status_code=status.HTTP_200_OK, summary="Clear the session cookie")
def logout(response: Response):
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME, path="/")
    return success_response("Logged out successfully")


# ─── GET /auth/me ─────────────────────────────────────────────────────────────
@router.get("/me", summary="Get the current session user")
def me(current_user: User = Depends(get_current_user)):
    return success_response("User retrieved", auth_service.me(current_user))
