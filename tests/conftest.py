"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import Settings
from domain.models import Database
from main import create_app


# =============================================================================
# SETTINGS, DATABASE AND CLIENT FIXTURES
# =============================================================================


@pytest.fixture()
def app_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        database_url=f"sqlite+pysqlite:///{tmp_path / 'foodorder_test.db'}",
        environment="testing",
        jwt_secret="test-secret-key-with-enough-length-for-hs256",
        bcrypt_rounds=4,
        db_init_attempts=1,
        db_init_delay_sec=0,
    )


@pytest.fixture()
def database(app_settings: Settings) -> Generator[Database, None, None]:
    """Storage handle with the schema created."""
    db = Database(app_settings.database_url)
    db.init_database()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture()
def db_session(database: Database) -> Generator[Session, None, None]:
    """
    Create a database session for integration tests.

    Each test gets a fresh SQLite file, so nothing leaks between tests.

    Yields:
        Session: SQLAlchemy database session
    """
    session = database.session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture()
def client(app_settings: Settings) -> Generator[TestClient, None, None]:
    """TestClient running the full application lifespan."""
    app = create_app(app_settings)
    with TestClient(app) as c:
        yield c
