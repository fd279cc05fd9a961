"""Duty formulas."""

from datetime import date, datetime

import base64
import pytest

from app.core import stamp_duty


def test_tenancy_duty_sums_rents_with_floor():
    assert stamp_duty.tenancy_duty([12000, 12000]) == pytest.approx(96.0)
    assert stamp_duty.tenancy_duty([100]) == 1.0
    assert stamp_duty.tenancy_duty([]) == 1.0


def test_share_transfer_falls_back_to_market_price():
    assert stamp_duty.share_transfer_duty(100000) == pytest.approx(200.0)
    assert stamp_duty.share_transfer_duty(0, 50000) == pytest.approx(100.0)
    assert stamp_duty.share_transfer_duty(0, 0) == 1.0


def test_mortgage_floor():
    assert stamp_duty.format_amount(stamp_duty.mortgage_duty(100)) == "5.00"
    assert stamp_duty.format_amount(stamp_duty.mortgage_duty(10000)) == "40.00"


def test_buyers_duty_uses_higher_price_and_absd():
    assert stamp_duty.buyers_duty(1000000) == pytest.approx(30000.0)
    assert stamp_duty.buyers_duty(1000000, 1200000) == pytest.approx(36000.0)
    assert stamp_duty.buyers_duty(1000000, 0, 1) == pytest.approx(230000.0)
    assert stamp_duty.buyers_duty(100) == 5.0


def test_sellers_duty_base_selection():
    assert stamp_duty.sellers_duty(500000, 800000, 600000) == pytest.approx(24000.0)
    assert stamp_duty.sellers_duty(500000, 0, 600000) == pytest.approx(18000.0)
    assert stamp_duty.sellers_duty(500000, 400000, 300000) == pytest.approx(15000.0)
    # selling price equal to consideration is not strictly greater
    assert stamp_duty.sellers_duty(500000, 600000, 600000) == pytest.approx(18000.0)


def test_listed_shares_duty():
    assert stamp_duty.listed_shares_duty(1000, 10, 5000) == pytest.approx(20.0)
    assert stamp_duty.listed_shares_duty(1000, 10, 50000) == pytest.approx(100.0)
    assert stamp_duty.listed_shares_duty(1, 1) == 1.0


@pytest.mark.parametrize(
    "acquired,disposed,rate",
    [
        (date(2024, 1, 1), date(2024, 6, 1), 0.15),
        (date(2022, 1, 1), date(2023, 6, 1), 0.10),
        (date(2021, 1, 1), date(2023, 6, 1), 0.05),
        (date(2019, 1, 1), date(2023, 6, 1), 0.0),
    ],
)
def test_industrial_ssd_bands(acquired, disposed, rate):
    got_rate, duty = stamp_duty.industrial_ssd(1000000, acquired, disposed)
    assert got_rate == rate
    assert duty == pytest.approx(1000000 * rate)


def test_document_reference_format():
    now = datetime(2024, 5, 1, 12, 0, 0)
    ref = stamp_duty.generate_document_reference("TA", now)
    assert ref.startswith(f"TA{int(now.timestamp())}")


def test_mock_pdf_is_base64_text():
    now = datetime(2024, 5, 1, 12, 0, 0)
    decoded = base64.b64decode(stamp_duty.generate_mock_pdf("Mortgage", "MG1", now)).decode()
    assert decoded == "PDF-1.4 Mock Mortgage Document - Ref: MG1 - Generated: 2024-05-01 12:00:00"


def test_payment_due_date():
    assert stamp_duty.payment_due_date(date(2024, 1, 15)) == "2024-02-14"
