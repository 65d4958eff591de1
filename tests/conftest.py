import pytest

from eventhub import create_app
from eventhub.extensions import db
from tests.helpers import TEST_CONFIG, bearer, event_payload, registration_payload


@pytest.fixture
def app():
    """A fresh application backed by its own in-memory database"""
    app = create_app(dict(TEST_CONFIG))
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def admin_headers(client):
    response = client.post(
        "/api/auth/login", json={"email": "admin@local", "password": "admin123"}
    )
    assert response.status_code == 200
    return bearer(response.get_json()["data"]["token"])


@pytest.fixture
def participant_headers(client):
    response = client.post(
        "/api/auth/signup",
        json={"name": "Ada Lovelace", "email": "ada@example.com", "password": "secret1"},
    )
    assert response.status_code == 201
    return bearer(response.get_json()["data"]["token"])


@pytest.fixture
def make_event(client, admin_headers):
    """Creates an event through the API and returns its JSON representation"""

    def _make_event(**overrides):
        response = client.post("/api/events", json=event_payload(**overrides), headers=admin_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()["data"]

    return _make_event


@pytest.fixture
def register(client):
    def _register(event_id, **overrides):
        return client.post(
            f"/api/events/{event_id}/register", json=registration_payload(**overrides)
        )

    return _register
