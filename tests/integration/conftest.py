"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- In-memory and failing profile repositories
- SQLite database engine and session for the SQL profile store
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.core.dependencies import get_approval_config, get_profile_repository
from src.domain.exceptions import ProfileStoreUnavailableException
from src.domain.interfaces import CustomerProfileRepository
from src.infrastructure.database import (
    Base,
    DEFAULT_CUSTOMER_PROFILES,
    seed_customer_profiles,
)
from src.infrastructure.repositories import InMemoryCustomerProfileRepository
from src.service.approval import ApprovalSettings, CustomerProfile, RangePolicy


# =============================================================================
# Test Data
# =============================================================================

FLAGGED_CUSTOMER = "12345678901"
FACTOR_50_CUSTOMER = "12345678912"
FACTOR_100_CUSTOMER = "12345678923"
FACTOR_500_CUSTOMER = "12345678934"
FACTOR_15_CUSTOMER = "12345678945"
FACTOR_5_CUSTOMER = "12345678956"
UNKNOWN_CUSTOMER = "99999999999"

TEST_PROFILES = {
    **DEFAULT_CUSTOMER_PROFILES,
    FACTOR_15_CUSTOMER: CustomerProfile(flagged=False, financial_factor=15),
    FACTOR_5_CUSTOMER: CustomerProfile(flagged=False, financial_factor=5),
}


# =============================================================================
# Profile Repositories
# =============================================================================

class FailingProfileRepository(CustomerProfileRepository):
    """Profile repository whose store is always down."""

    def __init__(self):
        self.call_count = 0

    async def get_by_customer_id(self, customer_id: str):
        self.call_count += 1
        raise ProfileStoreUnavailableException("connection refused")


@pytest.fixture
def profile_repository() -> InMemoryCustomerProfileRepository:
    """Create an in-memory repository with the test profiles."""
    return InMemoryCustomerProfileRepository(TEST_PROFILES)


@pytest.fixture
def failing_profile_repository() -> FailingProfileRepository:
    """Create a repository that always fails."""
    return FailingProfileRepository()


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session with the default profiles seeded."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        await seed_customer_profiles(session)
        await session.commit()
        yield session


# =============================================================================
# App Client Fixtures
# =============================================================================

async def _make_client(
    repository: CustomerProfileRepository,
    approval_config: ApprovalSettings,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with the profile store and bounds overridden."""
    async def override_get_profile_repository():
        yield repository

    def override_get_approval_config():
        return approval_config

    app.dependency_overrides[get_profile_repository] = override_get_profile_repository
    app.dependency_overrides[get_approval_config] = override_get_approval_config

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(
    profile_repository: InMemoryCustomerProfileRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client:
    - Uses the in-memory profile repository with the test profiles
    - Clamps out-of-range requests (the default policy)
    """
    async for ac in _make_client(profile_repository, ApprovalSettings()):
        yield ac


@pytest_asyncio.fixture
async def rejecting_client(
    profile_repository: InMemoryCustomerProfileRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client that rejects out-of-range requests."""
    settings = ApprovalSettings(range_policy=RangePolicy.REJECT)
    async for ac in _make_client(profile_repository, settings):
        yield ac


@pytest_asyncio.fixture
async def client_with_failing_store(
    failing_profile_repository: FailingProfileRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client where the profile store always fails."""
    async for ac in _make_client(failing_profile_repository, ApprovalSettings()):
        yield ac


# =============================================================================
# Helper Fixtures
# =============================================================================

def purchase_request(customer_id: str, amount: float, period: int) -> dict:
    """Build a POST /v1/evaluate-purchase request body."""
    return {
        "customer_id": customer_id,
        "details": {"amount": amount, "period": period},
    }


@pytest.fixture
def exact_match_request() -> dict:
    """Request body whose amount is exactly the maximum (100 * 24)."""
    return purchase_request(FACTOR_100_CUSTOMER, 2400, 24)


@pytest.fixture
def flagged_request() -> dict:
    """Request body for the flagged customer."""
    return purchase_request(FLAGGED_CUSTOMER, 1000, 12)
