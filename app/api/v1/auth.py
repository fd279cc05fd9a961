from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.responses import api_json, parse_id
from app.config import Settings, get_settings
from app.database import get_db
from app.middleware.auth import CurrentUser, get_current_user
from app.schemas.auth import LoginRequest, ProfileUpdate, RegisterRequest, UserResponse
from app.services.auth import AuthService, user_info

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    user_data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Register a new user with the default role"""
    user = await AuthService(db, settings).register(user_data)
    return api_json("User registered successfully", user_info(user), status_code=status.HTTP_201_CREATED)


@router.post("/login")
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Login with username or email and receive a bearer token"""
    return api_json("Login successful", await AuthService(db, settings).login(credentials))


@router.get("/demo-token")
async def demo_token(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return api_json("Demo token generated", AuthService(db, settings).demo_token())


@router.get("/profile")
async def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user_id = parse_id(current_user.user_id, "Invalid user ID")
    user = await AuthService(db, settings).get_profile(user_id)
    return api_json("Profile retrieved successfully", UserResponse.model_validate(user))


@router.put("/profile")
async def update_profile(
    patch: ProfileUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user_id = parse_id(current_user.user_id, "Invalid user ID")
    user = await AuthService(db, settings).update_profile(user_id, patch)
    return api_json("Profile updated successfully", UserResponse.model_validate(user))
