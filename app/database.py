from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from fastapi import Request
from typing import AsyncGenerator
from urllib.parse import urlparse, parse_qs, urlencode, urlunparse
from app.config import Settings
import logging

logger = logging.getLogger(__name__)


def convert_postgres_url_to_asyncpg(url: str) -> str:
    """
    Convert PostgreSQL URL to asyncpg-compatible format.
    URLs that already name an async driver are returned untouched.
    """
    if not url:
        raise ValueError("Database URL cannot be empty")

    scheme = url.split("://", 1)[0]
    if "+" in scheme and scheme != "postgresql+psycopg2":
        return url

    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql+psycopg2://"):
        url = url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    else:
        raise ValueError(f"Invalid database URL format: {url[:50]}...")

    parsed = urlparse(url)
    query_params = parse_qs(parsed.query)

    # asyncpg takes ssl, not sslmode
    if "sslmode" in query_params:
        sslmode = query_params.pop("sslmode")[0].lower()
        if sslmode in ["require", "prefer", "allow", "verify-ca", "verify-full"]:
            query_params["ssl"] = ["require"]

    for param in ["channel_binding", "connect_timeout", "application_name"]:
        query_params.pop(param, None)

    new_query = urlencode(query_params, doseq=True)
    return urlunparse(parsed._replace(query=new_query))


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database"""
    db_url = convert_postgres_url_to_asyncpg(settings.database_url)
    if db_url.startswith("postgresql+asyncpg"):
        return create_async_engine(
            db_url,
            echo=settings.is_development,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return create_async_engine(db_url, echo=settings.is_development)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# Base class for models
Base = declarative_base()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session"""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(engine: AsyncEngine):
    """Initialize database tables"""
    # Import all models to ensure they're registered
    from app import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema synchronised")
