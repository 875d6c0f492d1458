import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="folio-tests-")

os.environ["JWT_SECRET"] = "test-secret-key"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'folio.db')}"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient

from folio.database import Base, get_engine, get_session_factory
from folio.main import app


@pytest.fixture(autouse=True)
def reset_database():
    from folio.database import models  # noqa: F401

    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


def signup(client, username="jdoe", email="j@d.com", password="secret1"):
    return client.post(
        "/auth/signup",
        json={"username": username, "email": email, "password": password},
    )


def login(client, email="j@d.com", password="secret1"):
    return client.post("/auth/login", json={"email": email, "password": password})


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(client):
    """Sign up and log in a user, returning the bearer headers."""

    def _register(username="jdoe", email="j@d.com", password="secret1"):
        assert signup(client, username, email, password).status_code == 200
        resp = login(client, email, password)
        assert resp.status_code == 200
        return auth_headers(resp.json()["data"]["token"])

    return _register
