"""Shared test fixtures."""
import json
import os
from datetime import datetime, timedelta, timezone

import pytest

from tire_pickup.Domains.Account.Services.account_service import AccountService
from tire_pickup.Domains.Appointment.Services.appointment_service import AppointmentService
from tire_pickup.Domains.Config.Models.business_config import BusinessConfig
from tire_pickup.Domains.Config.Services.config_service import ConfigService
from tire_pickup.Domains.Notification.Services.notification_scheduler import NotificationScheduler
from tire_pickup.Domains.Session.Services.session_service import SessionService
from tire_pickup.Infrastructure.Repositories.json_account_repository import JsonAccountRepository
from tire_pickup.Infrastructure.Repositories.json_appointment_repository import (
    JsonAppointmentRepository,
)
from tire_pickup.Infrastructure.Repositories.json_config_repository import JsonConfigRepository
from tire_pickup.Infrastructure.Session.in_memory_session_store import InMemorySessionStore

ADMIN_PASSWORD = "test-secret"


class FakeClock:
    """Manually advanced clock for session expiry tests."""

    def __init__(self):
        self.now = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def data_dir(tmp_path):
    return str(tmp_path / "data")


@pytest.fixture
def business_config():
    """Small capacity and one blackout date so the rules are easy to hit."""
    return BusinessConfig(capacity_per_day=2, blackout_dates=["2026-12-25"])


@pytest.fixture
def config_repository(data_dir, business_config):
    repo = JsonConfigRepository(os.path.join(data_dir, "config.json"))
    os.makedirs(data_dir, exist_ok=True)
    with open(repo.file.path, "w") as f:
        json.dump(business_config.to_json(), f)
    return repo


@pytest.fixture
def config_service(config_repository):
    return ConfigService(config_repository)


@pytest.fixture
def appointment_repository(data_dir):
    return JsonAppointmentRepository(os.path.join(data_dir, "appointments.json"))


@pytest.fixture
def account_repository(data_dir):
    return JsonAccountRepository(os.path.join(data_dir, "accounts.json"))


@pytest.fixture
def appointment_service(appointment_repository, config_service):
    return AppointmentService(appointment_repository, config_service)


@pytest.fixture
def account_service(account_repository, appointment_service):
    return AccountService(account_repository, appointment_service)


@pytest.fixture
def notification_scheduler(account_repository):
    return NotificationScheduler(account_repository)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session_store(clock):
    return InMemorySessionStore(ttl=timedelta(hours=24), clock=clock)


@pytest.fixture
def session_service(session_store):
    return SessionService(session_store, ADMIN_PASSWORD)


@pytest.fixture
def appointment_data():
    """Build a valid public booking payload, overridable per test."""

    def _create(**overrides):
        data = {
            "company_name": "Acme Auto",
            "name": "Dana Reyes",
            "email": "dana@acme.test",
            "phone": "555-0101",
            "address": "12 Main St",
            "city": "Springfield",
            "state": "IL",
            "zip": "62701",
            "date": "2026-11-03",
            "time_window": "8-11 AM",
            "tires_count": "6",
            "notes": "",
        }
        data.update(overrides)
        return data

    return _create


@pytest.fixture
def admin_password():
    return ADMIN_PASSWORD
