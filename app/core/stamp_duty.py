"""
Stamp duty formulas for the eStamp and SD endpoints.

All functions are pure: the same inputs always give the same duty. Document
references and the mock certificate are the only time-dependent values and
are produced by separate helpers.
"""
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Tuple
import base64
import random

TENANCY_RATE = 0.004
TENANCY_MIN_DUTY = 1.0

SHARE_TRANSFER_RATE = 0.002
SHARE_TRANSFER_MIN_DUTY = 1.0

MORTGAGE_RATE = 0.004
MORTGAGE_MIN_DUTY = 5.0

PROPERTY_RATE = 0.03
PROPERTY_MIN_DUTY = 5.0
ABSD_RATE = 0.20

# (holding years upper bound, rate); held for 3 years or more is exempt
INDUSTRIAL_SSD_BANDS = [
    (1, 0.15),
    (2, 0.10),
    (3, 0.05),
]

PAYMENT_DUE_DAYS = 30


def format_amount(amount: float) -> str:
    return f"{amount:.2f}"


def tenancy_duty(gross_rents: Iterable[float]) -> float:
    """0.4% of the total gross rent across all rental periods, minimum $1"""
    total_rent = sum(gross_rents)
    return max(total_rent * TENANCY_RATE, TENANCY_MIN_DUTY)


def share_transfer_duty(consideration_amount: float, total_market_price: float = 0) -> float:
    """0.2% of the consideration, or of the market price when no consideration is declared"""
    base_amount = consideration_amount or total_market_price
    return max(base_amount * SHARE_TRANSFER_RATE, SHARE_TRANSFER_MIN_DUTY)


def mortgage_duty(amount_of_loan: float) -> float:
    return max(amount_of_loan * MORTGAGE_RATE, MORTGAGE_MIN_DUTY)


def _property_duty(base_amount: float, intent_to_claim_absd_refund: int) -> float:
    stamp_duty = max(base_amount * PROPERTY_RATE, PROPERTY_MIN_DUTY)
    if intent_to_claim_absd_refund == 1:
        stamp_duty += base_amount * ABSD_RATE
    return stamp_duty


def buyers_duty(purchase_price: float, consideration_amount: float = 0, intent_to_claim_absd_refund: int = 0) -> float:
    """Buyer's duty on the higher of purchase price and consideration, plus ABSD when claimed"""
    consideration = consideration_amount or purchase_price
    base_amount = consideration if consideration > purchase_price else purchase_price
    return _property_duty(base_amount, intent_to_claim_absd_refund)


def sellers_duty(
    purchase_price: float,
    selling_price: float = 0,
    consideration_amount: float = 0,
    intent_to_claim_absd_refund: int = 0,
) -> float:
    """Seller's duty on the highest price; ties resolve to selling, then consideration, then purchase"""
    if selling_price > 0 and selling_price > purchase_price and selling_price > consideration_amount:
        base_amount = selling_price
    elif consideration_amount > 0 and consideration_amount > purchase_price:
        base_amount = consideration_amount
    else:
        base_amount = purchase_price
    return _property_duty(base_amount, intent_to_claim_absd_refund)


def listed_shares_duty(number_of_shares: float, value_per_share: float, consideration_amount: float = 0) -> float:
    """0.2% of the higher of consideration and market value of the shares, minimum $1"""
    market_value = number_of_shares * value_per_share
    base_amount = max(consideration_amount, market_value)
    return max(base_amount * SHARE_TRANSFER_RATE, SHARE_TRANSFER_MIN_DUTY)


def holding_period_years(date_of_acquisition: date, date_of_disposal: date) -> float:
    """Whole days held divided by 365, no calendar adjustment"""
    return (date_of_disposal - date_of_acquisition).days / 365


def industrial_ssd_rate(holding_years: float) -> float:
    for upper_bound, rate in INDUSTRIAL_SSD_BANDS:
        if holding_years < upper_bound:
            return rate
    return 0.0


def industrial_ssd(declared_value: float, date_of_acquisition: date, date_of_disposal: date) -> Tuple[float, float]:
    """Seller's stamp duty on industrial property. Returns (rate, duty)."""
    rate = industrial_ssd_rate(holding_period_years(date_of_acquisition, date_of_disposal))
    return rate, declared_value * rate


def generate_document_reference(prefix: str, now: Optional[datetime] = None) -> str:
    """Type prefix + unix seconds + random 0-999; unique on a best-effort basis only"""
    now = now or datetime.now()
    return f"{prefix}{int(now.timestamp())}{random.randint(0, 999)}"


def generate_mock_pdf(doc_type: str, doc_ref_no: str, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    content = f"PDF-1.4 Mock {doc_type} Document - Ref: {doc_ref_no} - Generated: {now.strftime('%Y-%m-%d %H:%M:%S')}"
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


def payment_due_date(today: Optional[date] = None) -> str:
    today = today or date.today()
    return (today + timedelta(days=PAYMENT_DUE_DAYS)).isoformat()
