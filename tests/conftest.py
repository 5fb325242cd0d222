"""
Pytest fixtures for the rental service test suite.

The database is an in-memory SQLite engine: DATABASE_URL is set before the
application is imported, so the process-wide engine is built against it.
Tables are recreated for every test.
"""

import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="rental-blobs-"))
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from shared.core.auth import create_access_token
from shared.core.database import Base, SessionLocal, rental_engine
from shared.models.users import UserProfile
from shared.utils.blob_storage import LocalBlobStorage, get_blob_storage
from shared.utils.enums import UserRole
from rental_service.app.main import app

HOLDER_ID = "holder-1"
OTHER_HOLDER_ID = "holder-2"


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=rental_engine)
    yield
    Base.metadata.drop_all(bind=rental_engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def blob_storage(tmp_path):
    storage = LocalBlobStorage(str(tmp_path))
    app.dependency_overrides[get_blob_storage] = lambda: storage
    yield storage
    app.dependency_overrides.pop(get_blob_storage, None)


@pytest.fixture
def client(blob_storage):
    return TestClient(app)


def _register(db, user_id: str, role: str, holder_id=None):
    db.add(UserProfile(id=user_id, email=f"{user_id}@example.com",
                       role=role, holder_id=holder_id))
    db.commit()


def bearer(user_id: str) -> dict:
    token = create_access_token(
        {"user_id": user_id, "email": f"{user_id}@example.com"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def holder_headers(db):
    _register(db, HOLDER_ID, UserRole.HOLDER.value)
    return bearer(HOLDER_ID)


@pytest.fixture
def other_holder_headers(db):
    _register(db, OTHER_HOLDER_ID, UserRole.HOLDER.value)
    return bearer(OTHER_HOLDER_ID)


@pytest.fixture
def tenant_user_headers(db):
    _register(db, "tenant-user", UserRole.TENANT.value)
    return bearer("tenant-user")
