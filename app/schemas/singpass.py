from pydantic import BaseModel
from typing import Optional
from app.schemas.records import RecordResponse


class SingPassAuthRequest(BaseModel):
    scope: Optional[str] = None
    callback_url: Optional[str] = None
    state: Optional[str] = None


class SingPassAuthData(BaseModel):
    url: str
    state: str


class SingPassTokenRequest(BaseModel):
    code: str = ""
    state: str = ""
    callback_url: str = ""
    scope: str = ""


class SingPassTokenData(BaseModel):
    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str
    scope: str


# Admin
class SingPassAuthRecordCreate(BaseModel):
    auth_url: str
    state: str
    scope: Optional[str] = None
    callback_url: Optional[str] = None
    client_id: Optional[str] = None
    status: str = "pending"


class SingPassAuthRecordUpdate(BaseModel):
    auth_url: Optional[str] = None
    state: Optional[str] = None
    scope: Optional[str] = None
    callback_url: Optional[str] = None
    client_id: Optional[str] = None
    status: Optional[str] = None


class SingPassAuthRecordResponse(RecordResponse):
    auth_url: str
    state: str
    scope: Optional[str] = None
    callback_url: Optional[str] = None
    client_id: Optional[str] = None
    status: str


class SingPassTokenRecordCreate(BaseModel):
    code: str
    state: str
    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 3600
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    callback_url: Optional[str] = None
    client_id: Optional[str] = None
    status: str = "active"


class SingPassTokenRecordUpdate(BaseModel):
    code: Optional[str] = None
    state: Optional[str] = None
    access_token: Optional[str] = None
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    callback_url: Optional[str] = None
    client_id: Optional[str] = None
    status: Optional[str] = None


class SingPassTokenRecordResponse(RecordResponse):
    code: str
    state: str
    access_token: str
    token_type: str
    expires_in: int
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    callback_url: Optional[str] = None
    client_id: Optional[str] = None
    status: str
