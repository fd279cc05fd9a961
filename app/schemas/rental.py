from pydantic import BaseModel
from typing import List, Optional
from app.schemas.records import RecordResponse


class RentalPropertyDetail(BaseModel):
    recordID: float = 0
    propertyTaxRef: str = ""
    blkHouseNo: Optional[str] = None
    streetName: Optional[str] = None
    storeyNo: Optional[str] = None
    unitNo: Optional[str] = None
    postalCode: Optional[str] = None
    monthlyRent: float = 0
    rentalPeriodFrom: Optional[str] = None
    rentalPeriodTo: Optional[str] = None
    furnished: Optional[str] = None

    class Config:
        allow_inf_nan = False


class RentalSubmissionRequest(BaseModel):
    assmtYear: int = 0
    authorisedPersonEmail: str = ""
    authorisedPersonName: str = ""
    authorisedPersonDesignation: Optional[str] = None
    authorisedPersonTelNo: Optional[str] = None
    developmentName: str = ""
    propertyDtl: List[RentalPropertyDetail] = []


class RentalSubmissionData(BaseModel):
    refNo: str


# Admin
class RentalSubmissionCreate(BaseModel):
    ref_no: str
    assmt_year: int
    authorised_person_email: Optional[str] = None
    authorised_person_name: Optional[str] = None
    development_name: Optional[str] = None
    submission_data: Optional[str] = None
    total_properties: int = 0
    status: str = "submitted"


class RentalSubmissionUpdate(BaseModel):
    ref_no: Optional[str] = None
    assmt_year: Optional[int] = None
    authorised_person_email: Optional[str] = None
    authorised_person_name: Optional[str] = None
    development_name: Optional[str] = None
    submission_data: Optional[str] = None
    total_properties: Optional[int] = None
    status: Optional[str] = None


class RentalSubmissionResponse(RecordResponse):
    ref_no: str
    assmt_year: int
    authorised_person_email: Optional[str] = None
    authorised_person_name: Optional[str] = None
    development_name: Optional[str] = None
    submission_data: Optional[str] = None
    total_properties: int
    status: str
