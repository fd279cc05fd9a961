import logging
from datetime import timedelta
from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import Settings
from app.core.errors import APIError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.models.user import User, UserRole
from app.repositories.base import DuplicateRecordError, RecordNotFoundError
from app.repositories.user import UserRepository
from app.schemas.auth import LoginRequest, LoginResponse, ProfileUpdate, RegisterRequest, UserInfo

logger = logging.getLogger(__name__)

DEMO_USER_ID = 999


def user_info(user: User) -> UserInfo:
    return UserInfo(
        id=user.id,
        name=user.name,
        username=user.username,
        email=user.email,
        role=user.role.value,
    )


class AuthService:
    def __init__(self, db: AsyncSession, settings: Settings):
        self.users = UserRepository(db)
        self.settings = settings

    @property
    def token_lifetime(self) -> timedelta:
        return timedelta(hours=self.settings.ACCESS_TOKEN_EXPIRE_HOURS)

    def _issue_token(self, user_id, username: str, email: str, role: str) -> str:
        return create_access_token(
            user_id=str(user_id),
            username=username,
            email=email,
            role=role,
            secret=self.settings.JWT_SECRET,
            algorithm=self.settings.JWT_ALGORITHM,
            issuer=self.settings.JWT_ISSUER,
            expires_delta=self.token_lifetime,
        )

    async def register(self, request: RegisterRequest) -> User:
        if await self.users.find_by_username(request.username):
            raise APIError(status.HTTP_409_CONFLICT, "Registration failed", "username already exists")
        if await self.users.find_by_email(request.email):
            raise APIError(status.HTTP_409_CONFLICT, "Registration failed", "email already exists")

        try:
            user = await self.users.create(User(
                name=request.name,
                username=request.username,
                email=request.email,
                password_hash=get_password_hash(request.password),
                role=UserRole.USER,
                is_active=True,
            ))
        except DuplicateRecordError as e:
            raise APIError(status.HTTP_409_CONFLICT, "Registration failed", str(e))

        logger.info(f"Registered user {user.username} ({user.id})")
        return user

    async def login(self, request: LoginRequest) -> LoginResponse:
        user = await self.users.find_by_login(request.username)
        if user is None or not verify_password(request.password, user.password_hash):
            raise APIError(status.HTTP_401_UNAUTHORIZED, "Authentication failed", "invalid credentials")
        if not user.is_active:
            raise APIError(status.HTTP_401_UNAUTHORIZED, "Authentication failed", "account is deactivated")

        token = self._issue_token(user.id, user.username, user.email, user.role.value)
        return LoginResponse(
            token=token,
            expires_in=int(self.token_lifetime.total_seconds()),
            user_info=user_info(user),
        )

    def demo_token(self) -> LoginResponse:
        if not self.settings.is_development:
            raise APIError(status.HTTP_403_FORBIDDEN, "Demo tokens only available in development")

        token = self._issue_token("demo-user", "demo", "demo@example.com", UserRole.ADMIN.value)
        return LoginResponse(
            token=token,
            expires_in=int(self.token_lifetime.total_seconds()),
            user_info=UserInfo(
                id=DEMO_USER_ID,
                name="Demo User",
                username="demo",
                email="demo@example.com",
                role=UserRole.ADMIN.value,
            ),
        )

    async def get_profile(self, user_id: int) -> User:
        try:
            return await self.users.get_by_id(user_id)
        except RecordNotFoundError:
            raise APIError(status.HTTP_404_NOT_FOUND, "User not found", "user not found")

    async def update_profile(self, user_id: int, patch: ProfileUpdate) -> User:
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        if "password" in changes:
            changes["password_hash"] = get_password_hash(changes.pop("password"))

        try:
            user = await self.users.get_by_id(user_id)
            for field, value in changes.items():
                setattr(user, field, value)
            await self.users.save(user)
        except RecordNotFoundError:
            raise APIError(status.HTTP_404_NOT_FOUND, "User not found", "user not found")
        except DuplicateRecordError:
            raise APIError(status.HTTP_409_CONFLICT, "Failed to update profile", "email already exists")
        return user
