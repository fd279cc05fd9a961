from pydantic import BaseModel, Field
from typing import List, Optional


class Party(BaseModel):
    name: Optional[str] = None
    idType: Optional[str] = None
    idNo: Optional[str] = None
    nationality: Optional[str] = None


class EStampRequest(BaseModel):
    assignId: str = ""
    documentDescription: str = ""
    documentDate: Optional[str] = None
    parties: List[Party] = []

    class Config:
        allow_inf_nan = False


class AssessmentRental(BaseModel):
    periodFrom: Optional[str] = None
    periodTo: Optional[str] = None
    monthlyRent: float = 0
    totalGrossRentAmount: float = 0

    class Config:
        allow_inf_nan = False


class TenancyAgreementRequest(EStampRequest):
    propertyAddress: Optional[str] = None
    leaseStartDate: Optional[str] = None
    leaseEndDate: Optional[str] = None
    assessmentRental: List[AssessmentRental] = []


class TargetCompany(BaseModel):
    name: Optional[str] = None
    uen: Optional[str] = None
    numberOfShares: float = 0
    totalMarketPrice: float = 0

    class Config:
        allow_inf_nan = False


class ShareTransferRequest(EStampRequest):
    considerationAmount: float = 0
    targetCompany: TargetCompany = Field(default_factory=TargetCompany)


class MortgageRequest(EStampRequest):
    propertyAddress: Optional[str] = None
    amountOfLoan: float = 0


class SalePurchaseBuyersRequest(EStampRequest):
    propertyAddress: Optional[str] = None
    purchasePrice: float = 0
    considerationAmount: float = 0
    intentToClaimAbsdRefund: int = 0


class SalePurchaseSellersRequest(EStampRequest):
    propertyAddress: Optional[str] = None
    purchasePrice: float = 0
    sellingPrice: float = 0
    considerationAmount: float = 0
    intentToClaimAbsdRefund: int = 0


class EStampData(BaseModel):
    docRefNo: str
    SDAmount: str
    SDPenalty: str
    totalAmtPayable: str
    paymentDueDate: str
    pdfBase64: str
