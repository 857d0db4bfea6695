import os
import tempfile
from pathlib import Path

import pytest

# api.config reads the environment at import time
_DB_DIR = Path(tempfile.mkdtemp(prefix="testbank-"))
os.environ["DATABASE_URL"] = f"sqlite:///{(_DB_DIR / 'test.db').as_posix()}"
os.environ.setdefault("SECRET_KEY", "test-secret")


@pytest.fixture
def api_client():
    from fastapi.testclient import TestClient

    from api.app import app
    from api.database import Base, engine, init_db

    init_db()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def author(api_client) -> dict[str, str]:
    response = api_client.post(
        "/api/auth/signup",
        json={"name": "Ada", "email": "Ada@Example.com", "password": "secret1"},
    )
    assert response.status_code == 201
    login = api_client.post(
        "/api/auth/login", json={"email": "ada@example.com", "password": "secret1"}
    )
    return login.json()["data"]
