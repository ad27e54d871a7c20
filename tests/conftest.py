"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import os
import sys
from datetime import datetime

import pytest
import pytest_asyncio
from fakeredis import FakeAsyncRedis
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

# Set required environment variables before importing app modules
os.environ.setdefault('RUNTIME_ENVIRONMENT', 'TEST')
os.environ.setdefault('DB_NAME', ':memory:')
os.environ.setdefault('DEFAULT_LANGUAGE', 'en')
os.environ.setdefault('SUPPORTED_LANGUAGES', 'en,de')
os.environ.setdefault('LOG_MASK_SECRETS', 'true')

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models.base import Base  # noqa: E402
from models.basket import Basket  # noqa: E402
from models.basketItem import BasketItem  # noqa: E402
from models.principal import PrincipalDTO  # noqa: E402
from models.product import Product  # noqa: E402
from models.request_context import RequestContext  # noqa: E402
from models.user import User  # noqa: E402
from services.session import SessionProvider  # noqa: E402


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine (in-memory SQLite)."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine):
    """Create test database session."""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded_session(test_session):
    """
    Two users with one basket each.

    - user 7 owns basket 42: Apple Juice (x2), Melon Bike (soft deleted)
    - user 8 owns basket 99: Orange Juice (x3)
    """
    apple = Product(id=1, name="Apple Juice (1000ml)", description="The all-time classic.", price=1.99)
    orange = Product(id=2, name="Orange Juice (1000ml)", description="Hand-picked.", price=2.99)
    bike = Product(id=3, name="Melon Bike (Comeback-Product 2018 Edition)", price=2999.0,
                   deleted_at=datetime(2025, 1, 1))
    test_session.add_all([
        apple, orange, bike,
        User(id=7, email="seven@example.com"),
        User(id=8, email="eight@example.com"),
    ])
    await test_session.flush()

    test_session.add_all([
        Basket(id=42, user_id=7),
        Basket(id=99, user_id=8, coupon="WMNSDY2019"),
    ])
    await test_session.flush()

    test_session.add_all([
        BasketItem(id=1, basket_id=42, product_id=1, quantity=2),
        BasketItem(id=2, basket_id=42, product_id=3, quantity=1),
        BasketItem(id=3, basket_id=99, product_id=2, quantity=3),
    ])
    await test_session.flush()
    # Lookups under test must hit the database, not the identity map
    test_session.expunge_all()
    return test_session


# ============================================================================
# Session Registry Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def redis_client():
    """Create fake Redis client for testing (no real Redis server needed)."""
    client = FakeAsyncRedis(decode_responses=True)
    yield client
    await client.aclose()


@pytest.fixture
def session_provider(redis_client):
    return SessionProvider(redis_client, ttl_seconds=3600)


@pytest.fixture
def principal():
    """Principal owning basket 42."""
    return PrincipalDTO(id=7, email="seven@example.com", bid=42)


@pytest.fixture
def make_context():
    def _make(token: str | None = None, language: str = "en", client_ip: str | None = "203.0.113.7"):
        return RequestContext(token=token, language=language, client_ip=client_ip)
    return _make
