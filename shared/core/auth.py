from datetime import datetime, timedelta, timezone
import logging

from fastapi import Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import error_response
from shared.models.users import UserProfile
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import UserRole

logger = logging.getLogger(__name__)

security = HTTPBearer()


def create_access_token(data: dict, expires_minutes: int | None = None):
    payload = data.copy()
    expires = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes or settings.JWT_EXPIRE_MINUTES)
    payload["exp"] = expires
    return jwt.encode(payload, settings.JWT_SECRET,
                      algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> UserToken:
    """Verify and decode a JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return error_response(
            message="Invalid or expired token",
            status_code=AppStatusCode.AUTHENTICATION_TOKEN_EXPIRED,
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    if not payload.get("user_id"):
        return error_response(
            message="Invalid token structure",
            status_code=AppStatusCode.AUTHENTICATION_TOKEN_INVALID,
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    return UserToken(
        user_id=str(payload["user_id"]),
        email=payload.get("email"),
        exp=payload.get("exp"),
    )


def validate_current_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> UserToken:
    user_data = verify_token(credentials.credentials)

    profile = db.query(UserProfile).filter(
        UserProfile.id == user_data.user_id).first()

    # first sight of this identity: register it as a plain tenant
    if not profile:
        profile = UserProfile(
            id=user_data.user_id,
            email=user_data.email,
            role=UserRole.TENANT.value,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
        logger.info("Registered new user profile %s as TENANT", profile.id)

    if not profile.role:
        return error_response(
            message="User role not set",
            status_code=AppStatusCode.AUTHENTICATION_ROLE_MISSING,
            http_status=status.HTTP_403_FORBIDDEN
        )

    user_data.role = profile.role
    user_data.holder_id = profile.holder_id
    return user_data


def allow_holder(current_user: UserToken = Depends(validate_current_token)) -> UserToken:
    if current_user.role != UserRole.HOLDER.value:
        return error_response(
            message="Insufficient role",
            status_code=AppStatusCode.AUTHENTICATION_UNAUTHORIZED_ACCESS,
            http_status=status.HTTP_403_FORBIDDEN
        )

    return current_user
