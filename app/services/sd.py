"""Stamp certificate verification and the SD duty calculators (success code 200)."""
from datetime import date, datetime
from typing import Optional
import re
from fastapi import status
from app.core import stamp_duty
from app.core.errors import IrasError
from app.schemas.common import FieldInfo, IrasResponse, iras_error
from app.schemas.sd import (
    IndustrialSSDData,
    IndustrialSSDRequest,
    PubListedSharesData,
    PubListedSharesRequest,
    SCAuthenticityData,
    SCAuthenticityRequest,
)

SD_SUCCESS = 200

DOCUMENT_TYPES = {
    "TA": "Tenancy Agreement",
    "ST": "Share Transfer",
    "MG": "Mortgage",
    "SP": "Sale Purchase Buyers",
    "SPS": "Sale Purchase Sellers",
    "PLC": "Listed Company Shares",
    "ISSD": "Industrial Seller's Stamp Duty",
}

# Longest prefixes first so SPS is not read as SP
DOCUMENT_REF_PATTERN = re.compile(r"^(ISSD|PLC|SPS|SP|TA|ST|MG)(\d{11,})$")


def _invalid(message: str, message_code: int, field: str, field_message: str) -> IrasError:
    return IrasError(
        status.HTTP_400_BAD_REQUEST,
        iras_error(message, message_code, [FieldInfo(field=field, message=field_message)]),
    )


def _parse_date(value: str) -> Optional[date]:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        return None


def verify_stamp_certificate(request: SCAuthenticityRequest, today: Optional[date] = None) -> IrasResponse:
    if not request.documentRefNo.strip():
        raise _invalid("Missing document reference number", 40001,
                       "documentRefNo", "Document reference number is required")
    if not request.certificateNo.strip():
        raise _invalid("Missing certificate number", 40002,
                       "certificateNo", "Certificate number is required")

    match = DOCUMENT_REF_PATTERN.match(request.documentRefNo.strip())
    return IrasResponse(
        returnCode=SD_SUCCESS,
        data=SCAuthenticityData(
            documentRefNo=request.documentRefNo,
            certificateNo=request.certificateNo,
            isAuthentic="Y" if match else "N",
            documentType=DOCUMENT_TYPES[match.group(1)] if match else None,
            verifiedDate=(today or date.today()).isoformat(),
        ),
    )


def calculate_listed_shares_duty(request: PubListedSharesRequest) -> IrasResponse:
    if request.numberOfShares <= 0:
        raise _invalid("Invalid number of shares", 40001,
                       "numberOfShares", "Number of shares must be greater than 0")
    if request.valuePerShare <= 0:
        raise _invalid("Invalid value per share", 40002,
                       "valuePerShare", "Value per share must be greater than 0")
    if request.considerationAmount < 0:
        raise _invalid("Invalid consideration amount", 40003,
                       "considerationAmount", "Consideration amount cannot be negative")

    market_value = request.numberOfShares * request.valuePerShare
    duty = stamp_duty.listed_shares_duty(
        request.numberOfShares, request.valuePerShare, request.considerationAmount
    )
    amount = stamp_duty.format_amount(duty)
    return IrasResponse(
        returnCode=SD_SUCCESS,
        data=PubListedSharesData(
            docRefNo=stamp_duty.generate_document_reference("PLC"),
            marketValue=stamp_duty.format_amount(market_value),
            dutiableAmount=stamp_duty.format_amount(max(market_value, request.considerationAmount)),
            SDAmount=amount,
            totalAmtPayable=amount,
        ),
    )


def calculate_industrial_ssd(request: IndustrialSSDRequest, today: Optional[date] = None) -> IrasResponse:
    acquired = _parse_date(request.dateOfAcquisition)
    if acquired is None:
        raise _invalid("Invalid date of acquisition", 40001,
                       "dateOfAcquisition", "Date of acquisition must be in YYYY-MM-DD format")

    if request.dateOfDisposal:
        disposed = _parse_date(request.dateOfDisposal)
        if disposed is None:
            raise _invalid("Invalid date of disposal", 40002,
                           "dateOfDisposal", "Date of disposal must be in YYYY-MM-DD format")
    else:
        disposed = today or date.today()

    if disposed < acquired:
        raise _invalid("Invalid holding period", 40003,
                       "dateOfDisposal", "Date of disposal cannot be before date of acquisition")
    if request.declaredValue <= 0:
        raise _invalid("Invalid declared value", 40004,
                       "declaredValue", "Declared value must be greater than 0")

    rate, duty = stamp_duty.industrial_ssd(request.declaredValue, acquired, disposed)
    amount = stamp_duty.format_amount(duty)
    return IrasResponse(
        returnCode=SD_SUCCESS,
        data=IndustrialSSDData(
            docRefNo=stamp_duty.generate_document_reference("ISSD"),
            holdingPeriodYears=stamp_duty.format_amount(stamp_duty.holding_period_years(acquired, disposed)),
            SSDRate=f"{rate * 100:.0f}%",
            SSDAmount=amount,
            totalAmtPayable=amount,
        ),
    )
