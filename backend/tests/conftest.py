import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from todo_api.core.config import Settings
from todo_api.main import create_app

TEST_SECRET = "test-secret-do-not-use"


def make_settings(**overrides) -> Settings:
    values = {"database_url": "sqlite://", "jwt_secret": TEST_SECRET, "log_level": "WARNING"}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def session(app):
    with Session(app.state.engine) as session:
        yield session


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def make_client(app):
    """Separate clients keep separate cookie jars (one per user)."""
    def _make():
        return TestClient(app)
    return _make


def signup_and_login(client: TestClient, username: str, password: str = "pw1") -> TestClient:
    assert client.post("/auth/signup", json={"username": username, "password": password}).status_code == 200
    assert client.post("/auth/login", json={"username": username, "password": password}).status_code == 200
    return client


def create_todo(client: TestClient, name: str, description=None) -> str:
    body = {"name": name}
    if description is not None:
        body["description"] = description
    assert client.post("/todo", json=body).status_code == 200
    todos = client.get("/todo").json()["data"]
    return next(t["id"] for t in todos if t["name"] == name)
