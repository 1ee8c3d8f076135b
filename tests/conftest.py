import os

os.environ.setdefault("FAMBUL_DATABASE_URL", "sqlite://")
os.environ.setdefault("FAMBUL_STRICT_CONSISTENCY", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fambul_tik.core.config import settings
from fambul_tik.core.db import enable_sqlite_foreign_keys, get_db
from fambul_tik.main import app
from fambul_tik.models.base import Base
from fambul_tik.models import entities  # noqa: F401
from fambul_tik.services.relationship_types import seed_relationship_types


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        seed_relationship_types(db, settings.relationship_type_names)
    finally:
        db.close()
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def type_ids(client):
    response = client.get("/api/relationship_types")
    assert response.status_code == 200
    return {item["name"]: item["id"] for item in response.json()}
