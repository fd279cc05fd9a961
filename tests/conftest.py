"""Async test fixtures running the gateway against in-memory SQLite."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.config import Settings
from app.core.security import get_password_hash
from app.database import Base
from app.main import create_app
from app.models.user import User, UserRole

IRAS_HEADERS = {
    "X-IBM-Client-Id": "test-client-id",
    "X-IBM-Client-Secret": "test-client-secret",
}

ADMIN_PASSWORD = "admin-pass"


def make_settings(env: str = "development") -> Settings:
    return Settings(_env_file=None, ENV=env, JWT_SECRET="test-secret", LOG_LEVEL="WARNING")


@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine):
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def settings():
    return make_settings("development")


@pytest.fixture
def prod_settings():
    return make_settings("production")


@pytest_asyncio.fixture
async def client(engine, settings):
    """HTTPX client against the app in development mode."""
    app = create_app(settings, engine)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def prod_client(engine, prod_settings):
    """HTTPX client against the app in production mode."""
    app = create_app(prod_settings, engine)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession):
    user = User(
        name="Admin User",
        username="admin",
        email="admin@example.com",
        password_hash=get_password_hash(ADMIN_PASSWORD),
        role=UserRole.ADMIN,
        is_active=True,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def admin_headers(client: AsyncClient, admin_user):
    resp = await client.post("/auth/login", json={"username": "admin", "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['data']['token']}"}


@pytest.fixture
def iras_headers():
    return dict(IRAS_HEADERS)
