"""GST registration search."""

import pytest_asyncio

from app.models.gst_registration import GSTRegistration

SEARCH_URL = "/iras/prod/GSTListing/SearchGSTRegistered"


@pytest_asyncio.fixture
async def registration(db):
    record = GSTRegistration(
        client_id="C1",
        registration_id="R1",
        gst_registration_number="M90312345A",
        name="ABC TRADING PTE. LTD.",
        registered_from="2010-01-01",
        registered_to="",
        status="Registered",
        remarks="",
    )
    db.add(record)
    await db.commit()
    return record


async def test_search_returns_seeded_registration(client, iras_headers, registration):
    resp = await client.post(SEARCH_URL, json={"clientID": "C1", "regID": "R1"}, headers=iras_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["returnCode"] == 10
    assert body["data"] == {
        "name": "ABC TRADING PTE. LTD.",
        "gstRegistrationNumber": "M90312345A",
        "registrationId": "R1",
        "RegisteredFrom": "2010-01-01",
        "RegisteredTo": "",
        "Remarks": "",
        "Status": "Registered",
    }
    assert "info" not in body


async def test_unknown_registration_is_not_found(client, iras_headers, registration):
    resp = await client.post(SEARCH_URL, json={"clientID": "C1", "regID": "NOPE"}, headers=iras_headers)
    assert resp.status_code == 404
    body = resp.json()
    assert body["returnCode"] == 20
    assert body["info"]["messageCode"] == 20001


async def test_registration_of_other_client_is_not_found(client, iras_headers, registration):
    resp = await client.post(SEARCH_URL, json={"clientID": "C2", "regID": "R1"}, headers=iras_headers)
    assert resp.json()["returnCode"] == 20


async def test_empty_client_id_rejected(client, iras_headers):
    resp = await client.post(SEARCH_URL, json={"clientID": "", "regID": "R1"}, headers=iras_headers)
    assert resp.status_code == 400
    info = resp.json()["info"]
    assert resp.json()["returnCode"] == 40
    assert info["messageCode"] == 40001
    assert info["fieldInfoList"][0]["field"] == "clientID"


async def test_empty_reg_id_rejected(client, iras_headers):
    resp = await client.post(SEARCH_URL, json={"clientID": "C1"}, headers=iras_headers)
    assert resp.status_code == 400
    assert resp.json()["info"]["messageCode"] == 40002


async def test_malformed_body_rejected(client, iras_headers):
    resp = await client.post(
        SEARCH_URL,
        content=b"{not json",
        headers={**iras_headers, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    info = resp.json()["info"]
    assert info["message"] == "Invalid request format"
    assert info["messageCode"] == 40004
    assert info["fieldInfoList"] == [{"field": "body", "message": "Invalid JSON format"}]


async def test_headers_default_in_development(client, registration):
    resp = await client.post(SEARCH_URL, json={"clientID": "C1", "regID": "R1"})
    assert resp.status_code == 200
    assert resp.json()["returnCode"] == 10


async def test_headers_required_in_production(prod_client, registration):
    resp = await prod_client.post(SEARCH_URL, json={"clientID": "C1", "regID": "R1"})
    assert resp.status_code == 401
    body = resp.json()
    assert body["returnCode"] == 40
    assert body["info"]["messageCode"] == 40003
    assert body["info"]["fieldInfoList"][0]["field"] == "headers"


async def test_soft_deleted_registration_is_hidden(client, iras_headers, admin_headers, registration):
    resp = await client.delete(f"/admin/gst-registrations/{registration.id}", headers=admin_headers)
    assert resp.status_code == 200

    resp = await client.post(SEARCH_URL, json={"clientID": "C1", "regID": "R1"}, headers=iras_headers)
    assert resp.json()["returnCode"] == 20


async def test_blank_client_id_rejected(client, iras_headers, registration):
    resp = await client.post(SEARCH_URL, json={"clientID": "   ", "regID": "R1"}, headers=iras_headers)
    assert resp.status_code == 400
    assert resp.json()["returnCode"] == 40
    assert resp.json()["info"]["messageCode"] == 40001


async def test_blank_reg_id_rejected(client, iras_headers, registration):
    resp = await client.post(SEARCH_URL, json={"clientID": "C1", "regID": "\t "}, headers=iras_headers)
    assert resp.status_code == 400
    assert resp.json()["info"]["messageCode"] == 40002
