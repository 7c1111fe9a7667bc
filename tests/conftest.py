"""
Shared pytest fixtures for all tests.

Database fixtures run on an in-memory SQLite engine (aiosqlite, StaticPool)
unless TEST_DATABASE_URL points somewhere else.
"""

import os
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# Ensure test environment before the application settings are loaded
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from balnearios_ai.core.app_factory import create_app  # noqa: E402
from balnearios_ai.database import create_tables, drop_tables  # noqa: E402
from balnearios_ai.domains.balnearios.api.dependencies import get_busqueda_service  # noqa: E402
from balnearios_ai.domains.balnearios.application.services import BusquedaService  # noqa: E402
from tests.utils import Dataset, InMemoryBalnearioRepository, cargar_dataset, crear_dataset_demo  # noqa: E402

# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def db_url() -> str:
    """Return test database URL."""
    return os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture
async def async_engine(db_url: str):
    """Async engine with the balnearios tables created."""
    if db_url.startswith("sqlite"):
        engine = create_async_engine(
            db_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(db_url, pool_pre_ping=True)

    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session_factory(async_engine) -> async_sessionmaker:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(async_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Fresh session on empty tables."""
    async with async_session_factory() as session:
        yield session


@pytest.fixture
def dataset_demo() -> Dataset:
    return crear_dataset_demo()


@pytest_asyncio.fixture
async def seeded_session(async_session_factory, dataset_demo) -> AsyncGenerator[AsyncSession, None]:
    """Session over tables loaded with the demo data set."""
    async with async_session_factory() as session:
        await cargar_dataset(session, dataset_demo)

    async with async_session_factory() as session:
        yield session


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    return session


# ============================================================================
# SERVICE FIXTURES
# ============================================================================


@pytest.fixture
def fake_repository(dataset_demo) -> InMemoryBalnearioRepository:
    return InMemoryBalnearioRepository(dataset_demo)


@pytest.fixture
def busqueda_service(fake_repository) -> BusquedaService:
    return BusquedaService(fake_repository)


@pytest.fixture
def mock_llm():
    """Create a mock chat model."""
    llm = MagicMock()
    llm.bind_tools = MagicMock(return_value=llm)
    return llm


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture
def fastapi_app(busqueda_service) -> FastAPI:
    """App whose search service runs on the in-memory repository."""
    app = create_app()
    app.dependency_overrides[get_busqueda_service] = lambda: busqueda_service
    return app


@pytest.fixture
def api_client(fastapi_app) -> TestClient:
    """Client without lifespan: no database connectivity check."""
    return TestClient(fastapi_app)
