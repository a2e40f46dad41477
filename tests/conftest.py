import os
import tempfile
from pathlib import Path

import pytest

# Base SQLite jetable : doit être posé avant l'import de l'app (engine construit à l'import)
_tmp_dir = Path(tempfile.mkdtemp(prefix="mintodo-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_tmp_dir / 'test.db'}"
os.environ["ENV"] = "test"
os.environ["JWT_SECRET_KEY"] = "test-secret"

from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session  # noqa: E402

from mintodo.main import app  # noqa: E402
from mintodo.db.session import engine, init_db  # noqa: E402


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    init_db(reset=True)


@pytest.fixture
def session():
    with Session(engine) as s:
        yield s


@pytest.fixture
def register_and_login(client):
    def _do(username="alice", password="s3cret-pass"):
        r = client.post("/identity/register", json={"username": username, "password": password})
        assert r.status_code == 201, r.text
        r = client.post("/identity/login", json={"username": username, "password": password})
        assert r.status_code == 200, r.text
        return r.json()
    return _do


@pytest.fixture
def auth_headers(register_and_login):
    tokens = register_and_login()
    return {"Authorization": f"Bearer {tokens['access_token']}"}
