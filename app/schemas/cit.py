from pydantic import BaseModel
from typing import Optional
from app.schemas.records import RecordResponse


class ConvertFormCSRequest(BaseModel):
    id: int = 0


class CITConversionData(BaseModel):
    conversionID: str
    status: str
    conversionDate: str
    processedBy: str
    conversionResult: str


# Admin
class CITConversionCreate(BaseModel):
    conversion_id: str
    request_id: str
    client_id: Optional[str] = None
    status: str = "completed"
    conversion_date: Optional[str] = None
    processed_by: Optional[str] = None
    conversion_result: Optional[str] = None


class CITConversionUpdate(BaseModel):
    conversion_id: Optional[str] = None
    request_id: Optional[str] = None
    client_id: Optional[str] = None
    status: Optional[str] = None
    conversion_date: Optional[str] = None
    processed_by: Optional[str] = None
    conversion_result: Optional[str] = None


class CITConversionResponse(RecordResponse):
    conversion_id: str
    request_id: str
    client_id: Optional[str] = None
    status: str
    conversion_date: Optional[str] = None
    processed_by: Optional[str] = None
    conversion_result: Optional[str] = None
