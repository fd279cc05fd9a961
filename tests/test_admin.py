"""Admin CRUD endpoints."""

import pytest_asyncio

from app.core.security import get_password_hash
from app.models.user import User, UserRole

GST_RECORD = {
    "client_id": "C9",
    "registration_id": "R9",
    "gst_registration_number": "M90000009X",
    "name": "NINE PTE. LTD.",
    "status": "Registered",
}


async def test_admin_requires_bearer(client):
    resp = await client.get("/admin/gst-registrations")
    assert resp.status_code == 401


async def test_gst_registration_crud(client, admin_headers):
    resp = await client.post("/admin/gst-registrations", json=GST_RECORD, headers=admin_headers)
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "GST registration created successfully"
    record_id = body["data"]["id"]
    assert body["data"]["deleted_at"] is None

    resp = await client.get(f"/admin/gst-registrations/{record_id}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["name"] == "NINE PTE. LTD."

    resp = await client.put(
        f"/admin/gst-registrations/{record_id}", json={"remarks": "Checked"}, headers=admin_headers
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["remarks"] == "Checked"
    assert data["name"] == "NINE PTE. LTD."

    resp = await client.delete(f"/admin/gst-registrations/{record_id}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "GST registration deleted successfully"}

    resp = await client.get(f"/admin/gst-registrations/{record_id}", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["message"] == "GST registration not found"


async def test_duplicate_natural_key_conflicts(client, admin_headers):
    await client.post("/admin/gst-registrations", json=GST_RECORD, headers=admin_headers)
    resp = await client.post("/admin/gst-registrations", json=GST_RECORD, headers=admin_headers)
    assert resp.status_code == 409
    assert resp.json()["success"] is False


async def test_invalid_id_format(client, admin_headers):
    resp = await client.get("/admin/gst-registrations/abc", headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid ID format"


async def test_create_validation(client, admin_headers):
    resp = await client.post("/admin/gst-registrations", json={"name": "missing keys"}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation failed"


async def test_list_is_paginated(client, admin_headers):
    for index in range(3):
        record = {**GST_RECORD, "registration_id": f"R{index}"}
        await client.post("/admin/gst-registrations", json=record, headers=admin_headers)

    resp = await client.get("/admin/gst-registrations", params={"page": "2", "limit": "2"}, headers=admin_headers)
    assert resp.status_code == 200
    page = resp.json()["data"]
    assert page["total"] == 3
    assert page["page"] == 2
    assert page["limit"] == 2
    assert page["total_pages"] == 2
    assert len(page["data"]) == 1

    resp = await client.get("/admin/gst-registrations", params={"page": "0", "limit": "500"}, headers=admin_headers)
    page = resp.json()["data"]
    assert (page["page"], page["limit"]) == (1, 10)


async def test_rental_lookup_by_ref_no(client, admin_headers):
    record = {"ref_no": "RNT20240101120000", "assmt_year": 2024, "total_properties": 1}
    resp = await client.post("/admin/rental-submissions", json=record, headers=admin_headers)
    assert resp.status_code == 201

    resp = await client.get("/admin/rental-submissions/ref/RNT20240101120000", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["assmt_year"] == 2024

    resp = await client.get("/admin/rental-submissions/ref/UNKNOWN", headers=admin_headers)
    assert resp.status_code == 404


async def test_singpass_record_lookup_by_state(client, admin_headers):
    record = {"auth_url": "https://example.com", "state": "st-1"}
    await client.post("/admin/singpass-auth", json=record, headers=admin_headers)

    resp = await client.get("/admin/singpass-auth/state/st-1", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == "pending"


async def test_category_with_products_cannot_be_deleted(client, admin_headers):
    resp = await client.post("/admin/categories", json={"name": "Filing"}, headers=admin_headers)
    category_id = resp.json()["data"]["id"]
    resp = await client.post(
        "/admin/products",
        json={"name": "Form C-S", "price": 10.5, "stock": 3, "category_id": category_id},
        headers=admin_headers,
    )
    assert resp.status_code == 201
    product_id = resp.json()["data"]["id"]
    assert resp.json()["data"]["price"] == 10.5

    resp = await client.delete(f"/admin/categories/{category_id}", headers=admin_headers)
    assert resp.status_code == 409
    assert resp.json()["error"] == "cannot delete category with existing products"

    await client.delete(f"/admin/products/{product_id}", headers=admin_headers)
    resp = await client.delete(f"/admin/categories/{category_id}", headers=admin_headers)
    assert resp.status_code == 200


@pytest_asyncio.fixture
async def regular_user(db):
    user = User(
        name="Regular",
        username="regular",
        email="regular@example.com",
        password_hash=get_password_hash("regular-pass"),
        role=UserRole.USER,
        is_active=True,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def test_users_require_admin_role(client, regular_user):
    resp = await client.post("/auth/login", json={"username": "regular", "password": "regular-pass"})
    headers = {"Authorization": f"Bearer {resp.json()['data']['token']}"}

    resp = await client.get("/admin/users", headers=headers)
    assert resp.status_code == 403
    assert resp.json()["message"] == "Admin access required"

    # Record management only needs a valid bearer
    resp = await client.get("/admin/gst-registrations", headers=headers)
    assert resp.status_code == 200


async def test_deactivate_user_blocks_login(client, admin_headers, regular_user):
    resp = await client.put(f"/admin/users/{regular_user.id}/deactivate", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "User deactivated successfully"
    assert resp.json()["data"]["is_active"] is False

    resp = await client.post("/auth/login", json={"username": "regular", "password": "regular-pass"})
    assert resp.status_code == 401


async def test_list_and_delete_users(client, admin_headers, regular_user):
    resp = await client.get("/admin/users", headers=admin_headers)
    assert resp.json()["data"]["total"] == 2

    resp = await client.delete(f"/admin/users/{regular_user.id}", headers=admin_headers)
    assert resp.status_code == 200

    resp = await client.get(f"/admin/users/{regular_user.id}", headers=admin_headers)
    assert resp.status_code == 404
