from fastapi import Depends, Request, status
from pydantic import BaseModel
from app.config import Settings, get_settings
from app.core.errors import APIError
from app.core.security import decode_token, is_demo_token
from app.models.user import UserRole


class CurrentUser(BaseModel):
    user_id: str
    username: str
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


DEMO_USER = CurrentUser(user_id="999", username="demo", email="demo@example.com", role=UserRole.ADMIN.value)


async def get_current_user(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """Resolve the bearer token into the calling user"""
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise APIError(status.HTTP_401_UNAUTHORIZED, "Authorization header required")

    token = auth_header.replace("Bearer ", "", 1).strip()
    if not token:
        raise APIError(status.HTTP_401_UNAUTHORIZED, "Invalid token format")

    # Demo tokens are a development convenience and are plain invalid tokens elsewhere
    if settings.is_development and is_demo_token(token):
        return DEMO_USER

    payload = decode_token(token, settings.JWT_SECRET, settings.JWT_ALGORITHM, settings.JWT_ISSUER)
    if payload is None:
        raise APIError(status.HTTP_401_UNAUTHORIZED, "Invalid token")

    return CurrentUser(
        user_id=str(payload["user_id"]),
        username=payload.get("username", ""),
        email=payload.get("email", ""),
        role=payload["role"],
    )


async def get_current_admin_user(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Get current user and verify admin role"""
    if not current_user.is_admin:
        raise APIError(status.HTTP_403_FORBIDDEN, "Admin access required")
    return current_user
