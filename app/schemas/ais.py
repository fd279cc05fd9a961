from pydantic import BaseModel


class AISOrgSearchRequest(BaseModel):
    clientID: str = ""
    organizationID: str = ""
    basisYear: int = 0


class AISOrgData(BaseModel):
    organizationInAIS: str
