"""
Unit test configuration for the ticketing service.

Everything here runs against in-memory fakes; `api_client` wires the real
FastAPI app to those fakes through dependency-injector provider overrides.
"""

from collections.abc import Generator
from typing import Any, Callable, Dict

from dependency_injector import providers
from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.platform.config.core_setting import Settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.enum.user_type import UserType
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from test.service.ticketing.unit.fake.in_memory_store import (
    FakePasswordHasher,
    FakeTicketQueryRepo,
    FakeUnitOfWork,
    FakeUserCommandRepo,
    FakeUserQueryRepo,
    InMemoryStore,
)
from test.util_constant import (
    TEST_ADMIN_EMAIL,
    TEST_ADMIN_NAME,
    TEST_CREATOR_EMAIL,
    TEST_CREATOR_NAME,
    TEST_CUSTOMER_EMAIL,
    TEST_CUSTOMER_NAME,
)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def uow(store: InMemoryStore, password_hasher: FakePasswordHasher) -> FakeUnitOfWork:
    return FakeUnitOfWork(store, password_hasher)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(REQUEST_TIMEOUT_SECONDS=2.0, MAX_ASSIGNEES_PER_TICKET=5)


@pytest.fixture
def admin(store: InMemoryStore) -> UserEntity:
    return store.add_user(name=TEST_ADMIN_NAME, email=TEST_ADMIN_EMAIL, type=UserType.ADMIN)


@pytest.fixture
def creator(store: InMemoryStore) -> UserEntity:
    return store.add_user(name=TEST_CREATOR_NAME, email=TEST_CREATOR_EMAIL)


@pytest.fixture
def customer(store: InMemoryStore) -> UserEntity:
    return store.add_user(name=TEST_CUSTOMER_NAME, email=TEST_CUSTOMER_EMAIL)


@pytest.fixture
def jwt_auth(test_settings: Settings) -> JwtAuth:
    return JwtAuth(test_settings)


@pytest.fixture
def auth_headers(jwt_auth: JwtAuth) -> Callable[[UserEntity], Dict[str, str]]:
    def _headers(user: UserEntity) -> Dict[str, str]:
        return {'Authorization': f'Bearer {jwt_auth.create_jwt_token(user)}'}

    return _headers


@pytest.fixture
def api_client(
    store: InMemoryStore,
    password_hasher: FakePasswordHasher,
    test_settings: Settings,
    jwt_auth: JwtAuth,
) -> Generator[TestClient, Any, None]:
    container.wire(modules=WIRE_MODULES)
    container.config_service.override(providers.Object(test_settings))
    container.jwt_auth.override(providers.Object(jwt_auth))
    container.password_hasher.override(providers.Object(password_hasher))
    container.ticket_query_repo.override(providers.Object(FakeTicketQueryRepo(store)))
    container.user_query_repo.override(
        providers.Object(FakeUserQueryRepo(store, password_hasher))
    )
    container.user_command_repo.override(providers.Object(FakeUserCommandRepo(store)))
    container.unit_of_work.override(
        providers.Factory(FakeUnitOfWork, store=store, password_hasher=password_hasher)
    )

    # no lifespan: nothing touches PostgreSQL
    app = create_app()
    try:
        with TestClient(app, raise_server_exceptions=False) as client:
            yield client
    finally:
        container.reset_override()
        container.unwire()
