"""Fixtures for exercising the HTTP API against a temporary data directory."""
import pytest
from fastapi.testclient import TestClient

from tire_pickup import dependencies


@pytest.fixture
def app(config_service, appointment_service, account_service, notification_scheduler, session_service):
    from main import app

    app.dependency_overrides[dependencies.get_config_service] = lambda: config_service
    app.dependency_overrides[dependencies.get_appointment_service] = lambda: appointment_service
    app.dependency_overrides[dependencies.get_account_service] = lambda: account_service
    app.dependency_overrides[dependencies.get_notification_scheduler] = lambda: notification_scheduler
    app.dependency_overrides[dependencies.get_session_service] = lambda: session_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create FastAPI test client (lifespan not started, so no real data dir is touched)."""
    return TestClient(app)


@pytest.fixture
def auth_headers(client, admin_password):
    response = client.post("/api/admin/login", json={"password": admin_password})
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def booking():
    def _create(**overrides):
        payload = {
            "companyName": "Acme Auto",
            "name": "Dana Reyes",
            "email": "dana@acme.test",
            "phone": "555-0101",
            "address": "12 Main St",
            "city": "Springfield",
            "state": "IL",
            "zip": "62701",
            "date": "2026-11-03",
            "timeWindow": "8-11 AM",
            "tiresCount": 4,
        }
        payload.update(overrides)
        return payload

    return _create
