# tests/conftest.py

import os

# Settings are read at import time, so the environment is prepared first
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["ENV"] = "local"
os.environ["DATABASE_URL_LOCAL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from starlette.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from unittest.mock import MagicMock

from missionboard.main import app
from missionboard.api import deps
from missionboard.db.session import get_db
from missionboard.db.base_class import Base
from missionboard.middleware.error_handler import AuthorizationError
import missionboard.models  # noqa: F401


# --- E2E Test Database Setup ---
# One in-memory SQLite database per test, shared across threads
@pytest.fixture(scope="function")
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session_e2e(db_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    yield session
    session.close()


# --- Mock Dependencies Setup ---
class MockTokenPayload:
    def __init__(self, sub="user_123", org_id="org_abc", role="ADMIN"):
        self.sub = sub
        self.org_id = org_id
        self.role = role


class MockOrganization:
    def __init__(self, id):
        self.id = id


def override_get_current_user():
    return MockTokenPayload()


def override_get_current_organization(orgId: str):
    if orgId != "org_abc":
        raise AuthorizationError("Not authorized")
    return MockOrganization(id=orgId)


# --- Test Client Fixtures ---
@pytest.fixture(scope="function")
def test_client():
    """
    Provides a TestClient where the database and authentication are mocked.
    This is for route contract tests; CRUD and services are monkeypatched.
    """
    app.dependency_overrides[get_db] = lambda: MagicMock()
    app.dependency_overrides[deps.get_current_user] = override_get_current_user
    app.dependency_overrides[deps.get_current_organization] = (
        override_get_current_organization
    )

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def test_client_e2e(db_session_e2e):
    """
    Provides a TestClient that uses the per-test SQLite database and mocks auth.
    This is for E2E tests.
    """

    def override_get_db_e2e():
        yield db_session_e2e

    app.dependency_overrides[get_db] = override_get_db_e2e
    app.dependency_overrides[deps.get_current_user] = override_get_current_user

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def test_client_auth(db_session_e2e):
    """
    Provides a TestClient with the real JWT dependency, for authentication tests.
    """

    def override_get_db_e2e():
        yield db_session_e2e

    app.dependency_overrides[get_db] = override_get_db_e2e

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
