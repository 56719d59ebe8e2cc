"""
Shared fixtures: an isolated in-memory database per test and a TestClient
wired to it through the get_db override.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from electrolight.auth import hash_password
from electrolight.db import Base, get_db
from electrolight.main import app
from electrolight.repository import CatalogRepository

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def repo(db):
    return CatalogRepository(db)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client, repo):
    """Client holding a logged-in admin session."""
    repo.create_admin({
        "username": ADMIN_USERNAME,
        "password": hash_password(ADMIN_PASSWORD),
        "email": "admin@example.com",
    })
    resp = client.post("/api/admin/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client


@pytest.fixture
def add_product(repo):
    def _add(**overrides):
        data = {
            "name": "Test Product",
            "description": "A product used in tests",
            "category_slug": "light",
            "image_url": "https://img.example.com/p.png",
        }
        data.update(overrides)
        return repo.create_product(data)
    return _add


@pytest.fixture
def add_accessory(repo):
    def _add(**overrides):
        data = {
            "name": "Test Accessory",
            "description": "An accessory used in tests",
            "image_url": "https://img.example.com/a.png",
        }
        data.update(overrides)
        return repo.create_accessory(data)
    return _add
