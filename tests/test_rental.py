"""Rental submission."""

import json
import re

from sqlalchemy import select

from app.models.rental import RentalSubmission

SUBMIT_URL = "/iras/sb/rental/Submission"


def submission(**overrides):
    payload = {
        "assmtYear": 2024,
        "authorisedPersonEmail": "owner@example.com",
        "authorisedPersonName": "Tan Ah Kow",
        "developmentName": "Marina Residences",
        "propertyDtl": [
            {"recordID": 1, "propertyTaxRef": "PTR1", "monthlyRent": 3000},
            {"recordID": 2, "propertyTaxRef": "PTR2", "monthlyRent": 3500},
        ],
    }
    payload.update(overrides)
    return payload


async def test_valid_submission_is_stored(client, iras_headers, db):
    resp = await client.post(SUBMIT_URL, json=submission(), headers=iras_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["returnCode"] == 0
    ref_no = body["data"]["refNo"]
    assert re.match(r"^RNT\d{14}$", ref_no)

    stored = (await db.execute(select(RentalSubmission).where(RentalSubmission.ref_no == ref_no))).scalar_one()
    assert stored.total_properties == 2
    assert stored.status == "submitted"
    assert [line["propertyTaxRef"] for line in json.loads(stored.submission_data)] == ["PTR1", "PTR2"]


async def test_empty_property_list(client, iras_headers):
    resp = await client.post(SUBMIT_URL, json=submission(propertyDtl=[]), headers=iras_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["returnCode"] == 40
    assert body["info"]["messageCode"] == 40005
    assert body["info"]["fieldInfoList"]["fieldInfo"][0]["field"] == "propertyDtl"


async def test_every_bad_line_is_reported(client, iras_headers):
    lines = [
        {"recordID": 1, "propertyTaxRef": ""},
        {"recordID": 2, "propertyTaxRef": "PTR2"},
        {"recordID": 3},
    ]
    resp = await client.post(SUBMIT_URL, json=submission(propertyDtl=lines), headers=iras_headers)
    info = resp.json()["info"]
    assert info["messageCode"] == 40006
    assert [item["recordID"] for item in info["fieldInfoList"]["fieldInfo"]] == ["1", "3"]


async def test_header_fields_checked_in_order(client, iras_headers):
    resp = await client.post(
        SUBMIT_URL,
        json=submission(assmtYear=0, authorisedPersonEmail=""),
        headers=iras_headers,
    )
    assert resp.json()["info"]["messageCode"] == 40001


async def test_missing_headers_use_nested_field_list(prod_client):
    resp = await prod_client.post(SUBMIT_URL, json=submission())
    assert resp.status_code == 401
    field_info = resp.json()["info"]["fieldInfoList"]["fieldInfo"]
    assert field_info[0]["field"] == "headers"


async def test_blank_email_rejected_and_not_stored(client, iras_headers, db):
    resp = await client.post(SUBMIT_URL, json=submission(authorisedPersonEmail=" "), headers=iras_headers)
    body = resp.json()
    assert body["returnCode"] == 40
    assert body["info"]["messageCode"] == 40002

    stored = (await db.execute(select(RentalSubmission))).scalars().all()
    assert stored == []


async def test_blank_name_and_development_rejected(client, iras_headers):
    resp = await client.post(SUBMIT_URL, json=submission(authorisedPersonName="  "), headers=iras_headers)
    assert resp.json()["info"]["messageCode"] == 40003

    resp = await client.post(SUBMIT_URL, json=submission(developmentName="\t"), headers=iras_headers)
    assert resp.json()["info"]["messageCode"] == 40004


async def test_blank_property_tax_ref_line_rejected(client, iras_headers):
    lines = [{"recordID": 5, "propertyTaxRef": "   "}]
    resp = await client.post(SUBMIT_URL, json=submission(propertyDtl=lines), headers=iras_headers)
    info = resp.json()["info"]
    assert info["messageCode"] == 40006
    assert info["fieldInfoList"]["fieldInfo"] == [
        {"field": "propertyTaxRef", "message": "Property tax reference is required", "recordID": "5"},
    ]


async def test_non_finite_rent_rejected(client, iras_headers):
    body = (
        b'{"assmtYear": 2024, "authorisedPersonEmail": "a@b.com", "authorisedPersonName": "A",'
        b' "developmentName": "D", "propertyDtl": [{"recordID": 1, "propertyTaxRef": "P", "monthlyRent": NaN}]}'
    )
    resp = await client.post(SUBMIT_URL, content=body, headers={**iras_headers, "Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["info"]["message"] == "Invalid request format"
