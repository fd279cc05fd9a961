"""
eStamp duty simulation for tenancy, share transfer, mortgage and
sale & purchase documents. Each call returns a fresh document reference and
a mock certificate; the duty itself depends only on the request amounts.
"""
from fastapi import status
from app.core import stamp_duty
from app.core.errors import IrasError
from app.schemas.common import FieldInfo, IrasResponse, iras_error
from app.schemas.estamp import (
    EStampData,
    EStampRequest,
    MortgageRequest,
    SalePurchaseBuyersRequest,
    SalePurchaseSellersRequest,
    ShareTransferRequest,
    TenancyAgreementRequest,
)


def _require_fields(request: EStampRequest, field: str = "assignId,documentDescription",
                    message: str = "AssignID and DocumentDescription are required", valid: bool = True):
    if not request.assignId or not request.documentDescription or not valid:
        raise IrasError(status.HTTP_400_BAD_REQUEST, iras_error(
            "Missing required fields", 40006,
            [FieldInfo(field=field, message=message)],
        ))


def _stamped(prefix: str, doc_type: str, duty: float) -> IrasResponse:
    doc_ref_no = stamp_duty.generate_document_reference(prefix)
    amount = stamp_duty.format_amount(duty)
    return IrasResponse(
        returnCode=10,
        data=EStampData(
            docRefNo=doc_ref_no,
            SDAmount=amount,
            SDPenalty="0.00",
            totalAmtPayable=amount,
            paymentDueDate=stamp_duty.payment_due_date(),
            pdfBase64=stamp_duty.generate_mock_pdf(doc_type, doc_ref_no),
        ),
    )


def stamp_tenancy_agreement(request: TenancyAgreementRequest) -> IrasResponse:
    _require_fields(request)
    duty = stamp_duty.tenancy_duty(rental.totalGrossRentAmount for rental in request.assessmentRental)
    return _stamped("TA", "Tenancy Agreement", duty)


def stamp_share_transfer(request: ShareTransferRequest) -> IrasResponse:
    _require_fields(request)
    duty = stamp_duty.share_transfer_duty(request.considerationAmount, request.targetCompany.totalMarketPrice)
    return _stamped("ST", "Share Transfer", duty)


def stamp_mortgage(request: MortgageRequest) -> IrasResponse:
    _require_fields(
        request,
        field="assignId,documentDescription,amountOfLoan",
        message="AssignID, DocumentDescription, and AmountOfLoan are required",
        valid=request.amountOfLoan > 0,
    )
    return _stamped("MG", "Mortgage", stamp_duty.mortgage_duty(request.amountOfLoan))


def stamp_sale_purchase_buyers(request: SalePurchaseBuyersRequest) -> IrasResponse:
    _require_fields(
        request,
        field="assignId,documentDescription,purchasePrice",
        message="AssignID, DocumentDescription, and PurchasePrice are required",
        valid=request.purchasePrice > 0,
    )
    duty = stamp_duty.buyers_duty(
        request.purchasePrice, request.considerationAmount, request.intentToClaimAbsdRefund
    )
    return _stamped("SP", "Sale Purchase Buyers", duty)


def stamp_sale_purchase_sellers(request: SalePurchaseSellersRequest) -> IrasResponse:
    _require_fields(request)
    duty = stamp_duty.sellers_duty(
        request.purchasePrice,
        request.sellingPrice,
        request.considerationAmount,
        request.intentToClaimAbsdRefund,
    )
    return _stamped("SPS", "Sale Purchase Sellers", duty)
