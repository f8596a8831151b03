import pytest
from fastapi.testclient import TestClient
from sqlmodel import select

from task_api.config import Settings
from task_api.main import create_app


@pytest.fixture
def app(tmp_path):
    return create_app(Settings(database_url=f"sqlite:///{tmp_path / 'test.db'}"))


@pytest.fixture
def client(app):
    # Entering the client runs startup, which creates the tables.
    with TestClient(app) as client:
        yield client


@pytest.fixture
def fetch_all(app, client):
    """Read every stored row of a model through a fresh session."""
    factory = app.state.context.session_factory

    def _fetch(model):
        with factory() as session:
            return list(session.exec(select(model)).all())

    return _fetch


@pytest.fixture
def make_user(client):
    def _make(**overrides):
        payload = {
            "fullName": "Ada Lovelace",
            "email": "ada@example.com",
            "password": "analytical-engine",
        }
        payload.update(overrides)
        response = client.post("/api/users", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _make


@pytest.fixture
def make_task(client):
    def _make(**overrides):
        payload = {
            "title": "Write report",
            "description": "Quarterly numbers",
            "userId": "owner-1",
        }
        payload.update(overrides)
        response = client.post("/api/tasks", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _make
