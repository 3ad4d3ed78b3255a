import pytest

from healthapp import create_app
from healthapp.config import TestConfig
from healthapp.services.notification_service import LoggingSmsSender


@pytest.fixture
def sms_sender():
    return LoggingSmsSender()


@pytest.fixture
def app(sms_sender):
    return create_app(TestConfig, notification_sender=sms_sender)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def token(client):
    resp = client.post("/api/v1/auth/login", json={"email": "Jane@Example.com", "password": "secret1"})
    assert resp.status_code == 200
    return resp.get_json()["access_token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
