# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import os
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Safety check to prevent tests from running against the local store
if os.getenv("TESTING") != "1":
    os.environ["TESTING"] = "1"
os.environ["SEED_SAMPLE_DATA"] = "false"

# Create test database engine and session
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    echo=False
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

from donationhub.db.database import Base, get_db
from donationhub.db import models  # noqa: F401
from donationhub.db.storage import InMemoryKeyValueStore, SqlKeyValueStore
from donationhub.app import app
from tests.test_helpers import make_user


@pytest.fixture(name="db_session", scope="function")
def db_session_fixture():
    """
    Creates a new database session for each test, with all tables created.
    """
    Base.metadata.create_all(bind=test_engine)

    db = TestSessionLocal()

    try:
        yield db
    finally:
        db.close()
        # Drop all tables after the test to ensure a clean slate
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(name="store")
def store_fixture(db_session: Session):
    """
    The SQL-backed key-value store on top of the test session.
    """
    return SqlKeyValueStore(db_session)


@pytest.fixture(name="memory_store")
def memory_store_fixture():
    return InMemoryKeyValueStore()


@pytest.fixture(name="client")
def client_fixture(db_session: Session, mocker):
    """
    Provides a FastAPI TestClient that overrides the get_db dependency
    to use the test database session. Startup table creation and seeding
    are mocked so they never touch the application engine.
    """
    def override_get_db():
        yield db_session

    mocker.patch('donationhub.app.initialize_database')

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# Helper fixture to register and sign in a test volunteer
@pytest.fixture(name="logged_in_volunteer")
def logged_in_volunteer_fixture(client: TestClient, store):
    email = "auth_test_volunteer@example.com"
    password = "testpassword"

    volunteer = make_user(store, email=email, password=password, zip_code="12345")

    login_response = client.post(
        "/api/v1/login",
        json={"email": email, "password": password}
    )
    assert login_response.status_code == 200

    return volunteer
