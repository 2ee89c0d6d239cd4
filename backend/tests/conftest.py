"""
Pytest fixtures for testing.
"""
import pytest_asyncio
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Import database module BEFORE app to allow override
import jobly.database
from jobly.database import Base
# Import ALL models so Base.metadata knows about all tables
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.user import User, UserRole
from jobly.models.application import Application  # noqa: F401

# Now import app (after we can override database)
from jobly.main import app as fastapi_app


# Test database URL (use in-memory SQLite for fast tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a fresh database for each test.
    Ensures cleanup happens even if test fails.
    """
    # StaticPool keeps a single connection so every session sees the same in-memory database
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Point get_db() at the test engine
    original_engine = jobly.database.engine
    original_sessionmaker = jobly.database.AsyncSessionLocal

    jobly.database.engine = test_engine
    jobly.database.AsyncSessionLocal = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async_session = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    session = async_session()

    try:
        yield session
    finally:
        await session.close()
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await test_engine.dispose()

        jobly.database.engine = original_engine
        jobly.database.AsyncSessionLocal = original_sessionmaker


def _client(cookie: str = None) -> AsyncClient:
    client = AsyncClient(
        transport=ASGITransport(app=fastapi_app),
        base_url="http://test",
        follow_redirects=True  # Follow 307 redirects for trailing slashes
    )
    if cookie:
        client.cookies.set("auth_token", cookie)
    return client


@pytest_asyncio.fixture
async def async_client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Unauthenticated HTTP client."""
    client = _client()
    async with client:
        yield client


@pytest_asyncio.fixture
async def test_user(db: AsyncSession) -> User:
    """Regular (non-admin) user."""
    user = User(
        username="u1",
        first_name="U1F",
        last_name="U1L",
        email="user1@example.com",
        role=UserRole.USER,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession) -> User:
    """Admin user."""
    user = User(
        username="admin",
        first_name="Ad",
        last_name="Min",
        email="admin@example.com",
        role=UserRole.ADMIN,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def client(db: AsyncSession, test_user: User) -> AsyncGenerator[AsyncClient, None]:
    """Client logged in as a regular user via the session cookie."""
    client = _client(test_user.username)
    async with client:
        yield client


@pytest_asyncio.fixture
async def admin_client(db: AsyncSession, admin_user: User) -> AsyncGenerator[AsyncClient, None]:
    """Client logged in as an admin."""
    client = _client(admin_user.username)
    async with client:
        yield client


@pytest_asyncio.fixture
async def companies(db: AsyncSession) -> list[Company]:
    """Two companies to hang jobs off."""
    rows = [
        Company(
            handle="c1",
            name="C1",
            num_employees=1,
            description="Desc1",
            logo_url="http://c1.img",
        ),
        Company(
            handle="c2",
            name="C2",
            num_employees=2,
            description="Desc2",
            logo_url="http://c2.img",
        ),
    ]
    db.add_all(rows)
    await db.commit()
    return rows


@pytest_asyncio.fixture
async def jobs(db: AsyncSession, companies: list[Company]) -> list[Job]:
    """
    Four jobs:
    - J1: salary 1, equity 0.1, c1
    - J2: salary 2, equity 0.2, c1
    - J3: salary 3, no equity, c1
    - Sales Eng: salary 70000, equity 0, c2
    """
    rows = [
        Job(title="J1", salary=1, equity=0.1, company_handle="c1"),
        Job(title="J2", salary=2, equity=0.2, company_handle="c1"),
        Job(title="J3", salary=3, equity=None, company_handle="c1"),
        Job(title="Sales Eng", salary=70000, equity=0.0, company_handle="c2"),
    ]
    db.add_all(rows)
    await db.commit()
    for row in rows:
        await db.refresh(row)
    return rows
