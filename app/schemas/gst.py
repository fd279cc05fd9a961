from pydantic import BaseModel
from typing import Optional
from app.schemas.records import RecordResponse


class GSTSearchRequest(BaseModel):
    clientID: str = ""
    regID: str = ""


class GSTData(BaseModel):
    name: str
    gstRegistrationNumber: str
    registrationId: str
    RegisteredFrom: str
    RegisteredTo: str
    Remarks: str
    Status: str


# Admin
class GSTRegistrationCreate(BaseModel):
    client_id: str
    registration_id: str
    gst_registration_number: Optional[str] = None
    name: Optional[str] = None
    registered_from: Optional[str] = None
    registered_to: Optional[str] = None
    status: Optional[str] = None
    remarks: Optional[str] = None


class GSTRegistrationUpdate(BaseModel):
    client_id: Optional[str] = None
    registration_id: Optional[str] = None
    gst_registration_number: Optional[str] = None
    name: Optional[str] = None
    registered_from: Optional[str] = None
    registered_to: Optional[str] = None
    status: Optional[str] = None
    remarks: Optional[str] = None


class GSTRegistrationResponse(RecordResponse):
    client_id: str
    registration_id: str
    gst_registration_number: Optional[str] = None
    name: Optional[str] = None
    registered_from: Optional[str] = None
    registered_to: Optional[str] = None
    status: Optional[str] = None
    remarks: Optional[str] = None
