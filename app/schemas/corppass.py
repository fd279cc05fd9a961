from pydantic import BaseModel


class CorpPassTokenRequest(BaseModel):
    id: int = 0


class CorpPassAuthData(BaseModel):
    url: str


class CorpPassTokenData(BaseModel):
    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str
