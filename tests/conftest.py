"""Shared test fixtures and utilities for all tests."""
import asyncio
import os

import pytest
import pytest_asyncio
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient

from src.accounts.config import Settings
from src.accounts.containers import Container, API_MODULES
from src.accounts.core.services.customer_service import CustomerService
from src.accounts.infrastructure.customer_repository import SqlCustomerRepository
from src.accounts.infrastructure.mappers.customer_mapper import CustomerMapper
from src.client import AccountsClient
from src.shared.database.database import Database, DatabaseSettings
from tests.fakes import InMemoryCustomerRepository, noop_lifespan

# Set to 1 to run the repository tests against PostgreSQL in Docker instead of SQLite
USE_POSTGRES = os.environ.get("ACCOUNTS_TEST_POSTGRES") == "1"


@pytest.fixture(scope="session")
def async_db_url(tmp_path_factory):
    """
    Async database URL for repository tests.
    Session-scoped; tables are recreated per test by clean_database.
    """
    if USE_POSTGRES:
        from testcontainers.postgres import PostgresContainer

        with PostgresContainer("postgres:16-alpine") as postgres:
            connection_url = postgres.get_connection_url()
            yield connection_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")
    else:
        db_file = tmp_path_factory.mktemp("db") / "accounts.db"
        yield f"sqlite+aiosqlite:///{db_file}"


async def wait_till_db_ready(db: Database, max_attempts: int = 20):
    """
    Wait for database to be ready.

    Raises:
        Exception: If database is not ready after max_attempts
    """
    for attempt in range(max_attempts):
        try:
            async with db._engine.begin():
                return
        except Exception:
            await asyncio.sleep(0.2)
    raise Exception(f"Database not ready after {max_attempts} attempts")


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=async_db_url))
    await wait_till_db_ready(db)
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """Drop and recreate all tables before each test."""
    await db.drop_tables()
    await db.create_tables()
    yield db


@pytest.fixture
def sql_customer_repository(clean_database):
    """Customer repository backed by a clean test database."""
    return SqlCustomerRepository(clean_database, CustomerMapper())


# =========================================================================
# In-memory fixtures (service and API tests, no database needed)
# =========================================================================

@pytest.fixture
def customer_repository():
    return InMemoryCustomerRepository()


@pytest.fixture
def customer_service(customer_repository):
    return CustomerService(repository=customer_repository)


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, environment="test")


@pytest.fixture(scope="function")
def test_container(test_settings, customer_repository):
    """
    Create a test container whose repository is the in-memory fake.
    Function-scoped to ensure each test gets a fresh container.
    """
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.customer_repository.override(providers.Object(customer_repository))

    container.wire(modules=API_MODULES)
    yield container
    container.customer_repository.reset_override()
    container.config.reset_override()
    container.unwire()


@pytest.fixture(scope="function")
def test_app(test_container):
    """Create test application with container."""
    from src.accounts.main import create_app

    return create_app(test_container, lifespan=noop_lifespan)


@pytest_asyncio.fixture
async def accounts_client(test_app):
    """Create an accounts client talking to the test app in-process."""
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = AccountsClient(base_url="http://test", client=http_client)

    async with client:
        yield client
    await http_client.aclose()


@pytest_asyncio.fixture
async def http_client(test_app):
    """Raw httpx client for asserting on status codes and error bodies."""
    transport = ASGITransport(app=test_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
