"""
Test configuration and fixtures for the detailing booking API.

- Function-scoped database (in-memory SQLite by default) with fresh tables
- TestClient with database dependency override
- Authenticated client fixtures using bearer tokens
- Rate limiter reset between tests
"""

import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import User, UserRole, Session as UserSession
from tests.factories import create_user, create_session


# =============================================================================
# Database Fixtures
# =============================================================================


def get_test_database_url() -> str:
    """
    Get the test database URL.

    TEST_DATABASE_URL wins; otherwise a private in-memory SQLite database is
    used so each test starts from empty tables.
    """
    return os.environ.get("TEST_DATABASE_URL", "sqlite://")


@pytest.fixture
def test_engine():
    """Create an engine with all tables, dropped again after the test."""
    database_url = get_test_database_url()

    if database_url.startswith("sqlite"):
        # One shared connection so the app thread sees the test's data
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        @event.listens_for(engine, "connect")
        def enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    else:
        engine = create_engine(database_url)

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(test_engine) -> Generator[Session, None, None]:
    """Provide a database session shared by the test and the app under test."""
    TestingSessionLocal = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)
    session = TestingSessionLocal()

    yield session

    session.close()


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Every test starts with empty rate-limit windows."""
    app.state.rate_limiter.reset()
    yield
    app.state.rate_limiter.reset()


# =============================================================================
# TestClient Fixtures
# =============================================================================


def _override_db(db: Session):
    def override_get_db():
        try:
            yield db
        finally:
            pass  # Don't close - managed by db fixture

    app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def client(db: Session) -> Generator[TestClient, None, None]:
    """
    TestClient with database dependency override.

    The database session is injected into the app's get_db dependency.
    """
    _override_db(db)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# Authentication Fixtures
# =============================================================================


@pytest.fixture
def test_user(db: Session) -> User:
    """Create a test user."""
    return create_user(db, username="testuser", password="testpassword123")


@pytest.fixture
def admin_user(db: Session) -> User:
    """Create an admin test user."""
    return create_user(
        db, username="admin", password="adminpassword123", role=UserRole.ADMIN
    )


@pytest.fixture
def test_session(db: Session, test_user: User) -> UserSession:
    """Create a test session for the test user."""
    return create_session(db, test_user)


@pytest.fixture
def admin_session(db: Session, admin_user: User) -> UserSession:
    """Create a test session for the admin user."""
    return create_session(db, admin_user)


@pytest.fixture
def auth_headers(test_session: UserSession) -> dict:
    """Headers dict with the test user's bearer token."""
    return {"Authorization": f"Bearer {test_session.token}"}


@pytest.fixture
def auth_client(
    db: Session, test_session: UserSession
) -> Generator[TestClient, None, None]:
    """
    Authenticated TestClient for regular user.

    Creates a separate TestClient instance to avoid header conflicts.
    """
    _override_db(db)

    with TestClient(app) as test_client:
        test_client.headers["Authorization"] = f"Bearer {test_session.token}"
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(
    db: Session, admin_session: UserSession
) -> Generator[TestClient, None, None]:
    """Authenticated TestClient for admin user."""
    _override_db(db)

    with TestClient(app) as test_client:
        test_client.headers["Authorization"] = f"Bearer {admin_session.token}"
        yield test_client

    app.dependency_overrides.clear()
