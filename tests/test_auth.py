"""Registration, login, profile and bearer-token checks."""

from datetime import timedelta

from app.core.security import create_access_token


def register_payload(**overrides):
    payload = {"name": "Jane Tan", "username": "jane", "email": "jane@example.com", "password": "secret123"}
    payload.update(overrides)
    return payload


async def test_register_and_login(client):
    resp = await client.post("/auth/register", json=register_payload())
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "User registered successfully"
    assert body["data"]["role"] == "user"
    assert "password_hash" not in body["data"]

    resp = await client.post("/auth/login", json={"username": "jane@example.com", "password": "secret123"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["expires_in"] == 24 * 3600
    assert data["user_info"]["username"] == "jane"
    assert data["token"]


async def test_register_duplicate_username(client):
    await client.post("/auth/register", json=register_payload())
    resp = await client.post("/auth/register", json=register_payload(email="other@example.com"))
    assert resp.status_code == 409
    assert resp.json() == {"success": False, "message": "Registration failed", "error": "username already exists"}


async def test_register_duplicate_email(client):
    await client.post("/auth/register", json=register_payload())
    resp = await client.post("/auth/register", json=register_payload(username="jane2"))
    assert resp.status_code == 409
    assert resp.json()["error"] == "email already exists"


async def test_register_validation(client):
    resp = await client.post("/auth/register", json=register_payload(password="123", email="not-an-email"))
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"


async def test_register_malformed_json(client):
    resp = await client.post("/auth/register", content=b"{oops", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid request format"


async def test_login_wrong_password(client, admin_user):
    resp = await client.post("/auth/login", json={"username": "admin", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "invalid credentials"


async def test_login_deactivated(client, db, admin_user):
    admin_user.is_active = False
    await db.commit()
    resp = await client.post("/auth/login", json={"username": "admin", "password": "admin-pass"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "account is deactivated"


async def test_profile_roundtrip(client, admin_headers):
    resp = await client.get("/auth/profile", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["username"] == "admin"

    resp = await client.put("/auth/profile", json={"name": "Chief Admin"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["name"] == "Chief Admin"
    assert resp.json()["data"]["email"] == "admin@example.com"


async def test_password_change_takes_effect(client, admin_headers):
    resp = await client.put("/auth/profile", json={"password": "new-password"}, headers=admin_headers)
    assert resp.status_code == 200

    resp = await client.post("/auth/login", json={"username": "admin", "password": "new-password"})
    assert resp.status_code == 200


async def test_profile_requires_authorization(client):
    resp = await client.get("/auth/profile")
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "message": "Authorization header required"}


async def test_invalid_token(client):
    resp = await client.get("/auth/profile", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid token"


async def test_expired_token(client, settings, admin_user):
    token = create_access_token(
        str(admin_user.id), "admin", "admin@example.com", "admin",
        secret=settings.JWT_SECRET, expires_delta=timedelta(seconds=-10),
    )
    resp = await client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


async def test_demo_bearer_is_admin_in_development(client):
    resp = await client.get("/admin/users", headers={"Authorization": "Bearer demo-token-abc"})
    assert resp.status_code == 200


async def test_demo_bearer_rejected_in_production(prod_client):
    resp = await prod_client.get("/admin/users", headers={"Authorization": "Bearer demo-token-abc"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid token"


async def test_demo_token_endpoint(client, prod_client):
    resp = await client.get("/auth/demo-token")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["user_info"]["id"] == 999
    assert data["user_info"]["role"] == "admin"

    resp = await prod_client.get("/auth/demo-token")
    assert resp.status_code == 403


async def test_demo_jwt_has_non_numeric_user_id(client):
    token = (await client.get("/auth/demo-token")).json()["data"]["token"]
    resp = await client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid user ID"
