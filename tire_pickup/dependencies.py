import os
from datetime import timedelta

from tire_pickup.Core.Config.server import ServerConfig
from tire_pickup.Domains.Account.Services.account_service import AccountService
from tire_pickup.Domains.Appointment.Services.appointment_service import AppointmentService
from tire_pickup.Domains.Config.Services.config_service import ConfigService
from tire_pickup.Domains.Notification.Services.notification_scheduler import NotificationScheduler
from tire_pickup.Domains.Session.Services.session_service import SessionService
from tire_pickup.Infrastructure.Repositories.json_account_repository import JsonAccountRepository
from tire_pickup.Infrastructure.Repositories.json_appointment_repository import (
    JsonAppointmentRepository,
)
from tire_pickup.Infrastructure.Repositories.json_config_repository import JsonConfigRepository
from tire_pickup.Infrastructure.Session.in_memory_session_store import InMemorySessionStore

server_config = ServerConfig()

APPOINTMENTS_FILE = os.path.join(server_config.data_dir, "appointments.json")
ACCOUNTS_FILE = os.path.join(server_config.data_dir, "accounts.json")
CONFIG_FILE = os.path.join(server_config.data_dir, "config.json")

# Singletons: every request must share one repository (and so one lock) per file
_appointment_repository = JsonAppointmentRepository(APPOINTMENTS_FILE)
_account_repository = JsonAccountRepository(ACCOUNTS_FILE)
_config_service = ConfigService(JsonConfigRepository(CONFIG_FILE))
_appointment_service = AppointmentService(_appointment_repository, _config_service)
_account_service = AccountService(_account_repository, _appointment_service)
_notification_scheduler = NotificationScheduler(_account_repository)
_session_service = SessionService(
    InMemorySessionStore(ttl=timedelta(hours=server_config.session_ttl_hours)),
    server_config.admin_password,
)


async def bootstrap_storage():
    """Creates the data files on startup so a fresh install is browsable."""
    os.makedirs(server_config.data_dir, exist_ok=True)
    await _appointment_repository.ensure_file_exists()
    await _account_repository.ensure_file_exists()
    return await _config_service.get_config()


def get_server_config() -> ServerConfig:
    return server_config


def get_config_service() -> ConfigService:
    return _config_service


def get_appointment_service() -> AppointmentService:
    return _appointment_service


def get_account_service() -> AccountService:
    return _account_service


def get_notification_scheduler() -> NotificationScheduler:
    return _notification_scheduler


def get_session_service() -> SessionService:
    return _session_service
