"""Form C-S conversion."""

CONVERT_URL = "/iras/prod/ct/convertformcs"


async def test_conversion_is_idempotent_per_id(client, iras_headers):
    first = await client.post(CONVERT_URL, json={"id": 42}, headers=iras_headers)
    second = await client.post(CONVERT_URL, json={"id": 42}, headers=iras_headers)
    assert first.status_code == second.status_code == 200

    first_data, second_data = first.json()["data"], second.json()["data"]
    assert first.json()["returnCode"] == 10
    assert first_data["conversionID"] == second_data["conversionID"]
    assert first_data["conversionID"].startswith("CIT")
    assert first_data["processedBy"] == "IRAS_CIT_SYSTEM"
    assert first_data["conversionResult"] == "Form CS conversion completed for ID: 42"


async def test_conversion_lookup_by_request_id(client, iras_headers, admin_headers):
    resp = await client.post(CONVERT_URL, json={"id": 7}, headers=iras_headers)
    conversion_id = resp.json()["data"]["conversionID"]

    resp = await client.get("/admin/cit-conversions/request/7", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["conversion_id"] == conversion_id

    resp = await client.get(f"/admin/cit-conversions/conversion/{conversion_id}", headers=admin_headers)
    assert resp.json()["data"]["request_id"] == "7"


async def test_non_positive_id(client, iras_headers):
    resp = await client.post(CONVERT_URL, json={"id": 0}, headers=iras_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["returnCode"] == 40
    assert body["info"]["messageCode"] == 40001


async def test_non_numeric_id_is_invalid_format(client, iras_headers):
    resp = await client.post(CONVERT_URL, json={"id": "abc"}, headers=iras_headers)
    assert resp.status_code == 400
    assert resp.json()["info"]["messageCode"] == 40004
