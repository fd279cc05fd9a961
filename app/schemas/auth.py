from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from app.models.user import UserRole
from app.schemas.records import RecordResponse


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)  # username or email
    password: str = Field(..., min_length=1)


class UserInfo(BaseModel):
    id: int
    name: Optional[str] = None
    username: str
    email: str
    role: str


class LoginResponse(BaseModel):
    token: str
    expires_in: int
    user_info: UserInfo


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile"""
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)


class UserResponse(RecordResponse):
    name: Optional[str] = None
    username: str
    email: str
    role: UserRole
    is_active: bool
