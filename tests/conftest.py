import os
import pytest
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ.pop("JWT_AUDIENCE", None)

from httpx import AsyncClient, ASGITransport
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from asgi_lifespan import LifespanManager

from app.core.config import settings
from app.core.database import create_tables, get_db
from main import app


def make_token(sub: str = "user-1", email: str = "admin@example.com", secret: str = None, **claims) -> str:
    """Mint a bearer token the way the external identity provider would."""
    payload = {
        "sub": sub,
        "email": email,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=15),
        **claims,
    }
    return jwt.encode(payload, secret or settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


@pytest.fixture
async def engine():
    """A fresh in-memory database per test."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a new database session for a test."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client bound to the test database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with LifespanManager(app):
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as client:
            yield client
    app.dependency_overrides.clear()


@pytest.fixture
def token_factory():
    return make_token


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def client_data() -> dict:
    return {
        "name": "Ana Torres",
        "email": "ana@example.com",
        "phone": "555-0100",
        "company": "Torres SA",
    }


@pytest.fixture
def employee_data() -> dict:
    return {
        "name": "Bruno Diaz",
        "email": "bruno@example.com",
        "phone": "555-0101",
        "position": "Backend Developer",
        "department": "Development",
        "hireDate": "2023-02-01",
        "salary": 60000,
    }


@pytest.fixture
def request_data() -> dict:
    return {
        "name": "John Smith",
        "email": "john@example.com",
        "phone": "555-0102",
        "service": "Consulting",
        "description": "Need help with a migration",
        "foundUs": "Google",
    }
