"""
Test Configuration and Fixtures

- Unit tests (`@pytest.mark.unit`): in-memory fakes, no infrastructure.
  Their fixtures live in test/service/ticketing/unit/conftest.py.
- Integration tests (`@pytest.mark.integration`): real PostgreSQL configured
  through the POSTGRES_* env vars. The schema is created from the ORM
  metadata once per session and every table is truncated before each test.
  They are skipped when the database cannot be reached.
"""

# =============================================================================
# Environment setup MUST happen before any application import, because
# Settings is instantiated at import time.
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    from dotenv import load_dotenv

    root = Path(__file__).parent.parent
    env_file = root / '.env' if (root / '.env').exists() else root / '.env.example'
    load_dotenv(env_file)

    os.environ['POSTGRES_DB'] = os.environ.get('POSTGRES_TEST_DB', 'ticket_desk_test_db')
    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402
from sqlalchemy.exc import SQLAlchemyError  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.database.orm_db_setting import Base  # noqa: E402
import src.service.ticketing.driven_adapter.model  # noqa: E402,F401
from test.shared.utils import create_user, login_user  # noqa: E402
from test.util_constant import (  # noqa: E402
    DEFAULT_PASSWORD,
    TEST_ADMIN_EMAIL,
    TEST_ADMIN_NAME,
    TEST_CREATOR_EMAIL,
    TEST_CREATOR_NAME,
    TEST_CUSTOMER_EMAIL,
    TEST_CUSTOMER_NAME,
)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if item.get_closest_marker('integration'):
            item.fixturenames.append('clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
_TABLES = ('ticket', 'user')


async def _setup_test_database() -> None:
    db_name = settings.POSTGRES_DB
    server_url = settings.DATABASE_URL_ASYNC.rsplit('/', 1)[0] + '/postgres'

    engine = create_async_engine(server_url, isolation_level='AUTOCOMMIT')
    try:
        async with engine.connect() as conn:
            result = await conn.execute(
                text('SELECT 1 FROM pg_database WHERE datname = :name'), {'name': db_name}
            )
            if not result.scalar_one_or_none():
                await conn.execute(text(f'CREATE DATABASE "{db_name}"'))
    finally:
        await engine.dispose()

    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()


async def _clean_all_tables() -> None:
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            quoted = ', '.join(f'"{table}"' for table in _TABLES)
            await conn.execute(text(f'TRUNCATE {quoted} RESTART IDENTITY CASCADE'))
    finally:
        await engine.dispose()


@pytest.fixture(scope='session')
def integration_database() -> None:
    try:
        asyncio.run(_setup_test_database())
    except (SQLAlchemyError, OSError) as e:
        pytest.skip(f'PostgreSQL unreachable: {type(e).__name__}')


@pytest.fixture(scope='function')
async def clean_database(integration_database: None) -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield


# =============================================================================
# HTTP client against the real app (integration only)
# =============================================================================
@pytest.fixture(scope='session')
def client(integration_database: None) -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def admin_user(client: TestClient) -> dict[str, Any]:
    return create_user(client, TEST_ADMIN_EMAIL, DEFAULT_PASSWORD, TEST_ADMIN_NAME, 'admin')


@pytest.fixture
def creator_user(client: TestClient) -> dict[str, Any]:
    return create_user(client, TEST_CREATOR_EMAIL, DEFAULT_PASSWORD, TEST_CREATOR_NAME, 'customer')


@pytest.fixture
def customer_user(client: TestClient) -> dict[str, Any]:
    return create_user(
        client, TEST_CUSTOMER_EMAIL, DEFAULT_PASSWORD, TEST_CUSTOMER_NAME, 'customer'
    )


@pytest.fixture
def admin_headers(client: TestClient, admin_user: dict[str, Any]) -> dict[str, str]:
    return login_user(client, TEST_ADMIN_EMAIL, DEFAULT_PASSWORD)


@pytest.fixture
def creator_headers(client: TestClient, creator_user: dict[str, Any]) -> dict[str, str]:
    return login_user(client, TEST_CREATOR_EMAIL, DEFAULT_PASSWORD)


@pytest.fixture
def customer_headers(client: TestClient, customer_user: dict[str, Any]) -> dict[str, str]:
    return login_user(client, TEST_CUSTOMER_EMAIL, DEFAULT_PASSWORD)
