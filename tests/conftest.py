"""
Shared fixtures: in-memory SQLite database, services, and an API client.
"""

import asyncio
import os

# Cheap hashing for tests; must be set before config.settings is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from api.main import create_app
from config.settings import TokenConfig
from services import AuthenticationService, ResumeService
from utils.credential_store import CredentialStore
from utils.database import create_db_and_tables, get_db
from utils.token_service import TokenService

TEST_SECRET = "test-secret-key"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def token_config():
    return TokenConfig(secret_key=TEST_SECRET)


@pytest.fixture
def token_service(token_config):
    return TokenService(token_config)


@pytest.fixture
def credential_store():
    return CredentialStore(rounds=4)


@pytest.fixture
def auth_service(db, token_service, credential_store):
    return AuthenticationService(db, token_service, credential_store)


@pytest.fixture
def resume_service(db):
    return ResumeService(db)


@pytest.fixture
def signed_up(auth_service):
    """Create account a@b.com / secret1 and return its view."""
    return asyncio.run(auth_service.sign_up("a@b.com", "secret1", "secret1", "A"))


@pytest.fixture
def client(engine, token_config):
    app = create_app(token_config)

    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
