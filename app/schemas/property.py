from pydantic import BaseModel
from typing import List, Optional
from app.schemas.records import RecordResponse


class ConsolidatedStatementRequest(BaseModel):
    refNo: str = ""
    propertyTaxRef: str = ""


class PropertyDetail(BaseModel):
    propertyId: str
    address: str
    propertyType: str
    taxAmount: str
    dueDate: str
    status: str


class PaymentHistory(BaseModel):
    paymentDate: str
    amount: str
    paymentMethod: str
    transactionRef: str


class ConsolidatedStatement(BaseModel):
    statementDate: str = ""
    totalAmount: str = ""
    propertyDetails: List[PropertyDetail] = []
    paymentHistory: List[PaymentHistory] = []


class ConsolidatedStatementData(BaseModel):
    refNo: str
    propertyTaxRef: str
    consolidatedStatement: ConsolidatedStatement


class TaxBalanceSearchRequest(BaseModel):
    clientID: str = ""
    postalCode: Optional[str] = None
    blkHouseNo: Optional[str] = None
    streetName: Optional[str] = None
    storeyNo: Optional[str] = None
    unitNo: Optional[str] = None
    ownerTaxRef: Optional[str] = None
    propertyTaxRef: Optional[str] = None


class TaxBalanceData(BaseModel):
    propertyTaxRef: str
    ownerTaxRef: str
    propertyDesc: str
    postalCode: str
    outstandingBalance: str
    isGiro: str


# Admin
class PropertyStatementCreate(BaseModel):
    ref_no: str
    property_tax_ref: str
    statement_date: Optional[str] = None
    total_amount: Optional[str] = None
    consolidated_data: Optional[str] = None


class PropertyStatementUpdate(BaseModel):
    ref_no: Optional[str] = None
    property_tax_ref: Optional[str] = None
    statement_date: Optional[str] = None
    total_amount: Optional[str] = None
    consolidated_data: Optional[str] = None


class PropertyStatementResponse(RecordResponse):
    ref_no: str
    property_tax_ref: str
    statement_date: Optional[str] = None
    total_amount: Optional[str] = None
    consolidated_data: Optional[str] = None


class PropertyTaxBalanceCreate(BaseModel):
    client_id: str
    postal_code: Optional[str] = None
    blk_house_no: Optional[str] = None
    street_name: Optional[str] = None
    storey_no: Optional[str] = None
    unit_no: Optional[str] = None
    owner_tax_ref: Optional[str] = None
    property_tax_ref: Optional[str] = None
    property_desc: Optional[str] = None
    outstanding_balance: float = 0
    is_giro: bool = False


class PropertyTaxBalanceUpdate(BaseModel):
    client_id: Optional[str] = None
    postal_code: Optional[str] = None
    blk_house_no: Optional[str] = None
    street_name: Optional[str] = None
    storey_no: Optional[str] = None
    unit_no: Optional[str] = None
    owner_tax_ref: Optional[str] = None
    property_tax_ref: Optional[str] = None
    property_desc: Optional[str] = None
    outstanding_balance: Optional[float] = None
    is_giro: Optional[bool] = None


class PropertyTaxBalanceResponse(RecordResponse):
    client_id: str
    postal_code: Optional[str] = None
    blk_house_no: Optional[str] = None
    street_name: Optional[str] = None
    storey_no: Optional[str] = None
    unit_no: Optional[str] = None
    owner_tax_ref: Optional[str] = None
    property_tax_ref: Optional[str] = None
    property_desc: Optional[str] = None
    outstanding_balance: float
    is_giro: bool
