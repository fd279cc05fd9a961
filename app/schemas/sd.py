from pydantic import BaseModel
from typing import Optional


class SCAuthenticityRequest(BaseModel):
    documentRefNo: str = ""
    certificateNo: str = ""


class SCAuthenticityData(BaseModel):
    documentRefNo: str
    certificateNo: str
    isAuthentic: str
    documentType: Optional[str] = None
    verifiedDate: str


class PubListedSharesRequest(BaseModel):
    companyName: Optional[str] = None
    numberOfShares: float = 0
    valuePerShare: float = 0
    considerationAmount: float = 0
    dateOfTransfer: Optional[str] = None

    class Config:
        allow_inf_nan = False


class PubListedSharesData(BaseModel):
    docRefNo: str
    marketValue: str
    dutiableAmount: str
    SDAmount: str
    totalAmtPayable: str


class IndustrialSSDRequest(BaseModel):
    propertyAddress: Optional[str] = None
    dateOfAcquisition: str = ""
    dateOfDisposal: Optional[str] = None
    declaredValue: float = 0

    class Config:
        allow_inf_nan = False


class IndustrialSSDData(BaseModel):
    docRefNo: str
    holdingPeriodYears: str
    SSDRate: str
    SSDAmount: str
    totalAmtPayable: str
