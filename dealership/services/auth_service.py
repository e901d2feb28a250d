import logging

from sqlalchemy.orm import Session

from dealership.config import settings
from dealership.models.user import User
from dealership.schemas.auth import LoginRequest, UserOut
from dealership.utils.security import verify_password, create_access_token
from dealership.utils.exceptions import UnauthorizedException, AccountInactiveException

logger = logging.getLogger(__name__)


class AuthService:

    # ─── Login ────────────────────────────────────────────────────────────────
    def login(self, db: Session, data: LoginRequest) -> dict:
        user = db.query(User).filter(User.email == str(data.email).lower()).first()

        if not user or not verify_password(data.password, user.password):
            logger.info(f"Failed login attempt for {data.email}")
            raise UnauthorizedException("Invalid email or password")

        if not user.isActive:
            raise AccountInactiveException()

        access_token = create_access_token(user.id, user.role)
        logger.info(f"User {user.id} logged in")

        return {
            "accessToken": access_token,
            "tokenType":   "Bearer",
            "expiresIn":   settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
            "user":        UserOut.model_validate(user),
        }

    def me(self, user: User) -> UserOut:
        return UserOut.model_validate(user)


auth_service = AuthService()
