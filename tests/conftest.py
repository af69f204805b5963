"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database. The app's ``get_db``
dependency is overridden to hand out sessions bound to the same
connection, so data seeded through the ``db`` fixture is visible to
requests made through ``client``.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from toolcrib.auth import get_password_hash
from toolcrib.database import Base, get_db
from toolcrib.main import app
from toolcrib.models import Tool, ToolStatus, User, UserRole

ADMIN_PASSWORD = "AdminTestPass1!"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def other_db(db):
    """A second, independent session, for interleaving two requests."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

@pytest.fixture()
def make_user(db):
    def _make(worker_id, name=None, role=UserRole.ENGINEER, password=None, email=None):
        user = User(
            name=name or f"Worker {worker_id}",
            email=email or f"{worker_id.lower()}@example.com",
            worker_id=worker_id,
            role=role,
            hashed_password=get_password_hash(password) if password else None,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make


@pytest.fixture()
def make_tool(db):
    def _make(qr_id, name=None, status=ToolStatus.AVAILABLE, calibration=False, due=None):
        tool = Tool(
            name=name or f"Tool {qr_id}",
            qr_id=qr_id,
            status=status,
            is_calibration_tool=calibration,
            next_calibration_date=due,
        )
        db.add(tool)
        db.commit()
        db.refresh(tool)
        return tool
    return _make


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

@pytest.fixture()
def admin(make_user):
    return make_user(
        "A001",
        name="Admin User",
        role=UserRole.ADMIN,
        password=ADMIN_PASSWORD,
        email="admin@example.com",
    )


@pytest.fixture()
def admin_headers(client, admin):
    r = client.post("/api/auth/login", json={"email": admin.email, "password": ADMIN_PASSWORD})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}
