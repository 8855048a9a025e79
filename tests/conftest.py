# tests/conftest.py
import os

# Keep the module-level application in dating_api.main off the developer's
# database and log settings.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from dating_api.config import Settings
from dating_api.container import Container
from dating_api.db.models import Base
from dating_api.db.session import create_db_engine, create_session_factory
from dating_api.main import create_app
from dating_api.repositories.users import UsersRepository
from dating_api.security.tokens import TokenService
from dating_api.services.account_service import AccountService

TEST_TOKEN_KEY = "test-signing-key-" + "k" * 64


@pytest.fixture(scope="function")
def settings():
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        APP_ENV="testing",
        DATABASE_URL="sqlite://",
        TOKEN_KEY=TEST_TOKEN_KEY,
        LOG_FORMAT="console",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture(scope="function")
def engine():
    """A fresh in-memory credential store per test."""
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def token_service():
    return TokenService(secret_key=TEST_TOKEN_KEY, expires_minutes=60)


@pytest.fixture(scope="function")
def users_repo(db_session):
    return UsersRepository(db_session)


@pytest.fixture(scope="function")
def account_service(users_repo, token_service):
    return AccountService(repo=users_repo, tokens=token_service)


@pytest.fixture(scope="function")
def container(token_service):
    """
    Dependency Injection Container with the token service pinned to the
    test key.
    """
    container = Container()
    container.token_service.override(token_service)
    yield container
    container.token_service.reset_override()
    container.unwire()


@pytest.fixture(scope="function")
def app(settings, container, session_factory):
    """
    The real application, with request sessions bound to the test engine
    so tests can inspect the same store.
    """
    app = create_app(settings=settings, container=container)
    app.state.session_factory = session_factory
    return app


@pytest.fixture(scope="function")
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def alice():
    return {"email": "a@b.com", "displayName": "Alice", "password": "Secret1"}
