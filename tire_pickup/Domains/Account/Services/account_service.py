from typing import Any, Dict, List, Optional

from loguru import logger

from tire_pickup.Core.Exceptions.errors import Conflict, NotFound, ValidationError
from tire_pickup.Core.Utils.fields import clean_str, email_key
from tire_pickup.Domains.Account.Models.account import Account
from tire_pickup.Domains.Account.Repositories.account_repository import AccountRepository
from tire_pickup.Domains.Appointment.Services.appointment_service import AppointmentService

PATCHABLE_FIELDS = ("company", "name", "email", "phone", "address", "city", "state", "zip", "notes")

PUBLIC_REQUIRED_FIELDS = ("company", "contact_name", "phone", "address", "city", "state", "zip")


def find_by_email(accounts: List[Account], email: str) -> Optional[Account]:
    key = email_key(email)
    if not key:
        return None
    for account in accounts:
        if email_key(account.email) == key:
            return account
    return None


def index_of(accounts: List[Account], account_id: str) -> int:
    for idx, account in enumerate(accounts):
        if account.id == account_id:
            return idx
    raise NotFound("Account not found")


class AccountService:
    def __init__(self, repository: AccountRepository, appointment_service: AppointmentService):
        self.repository = repository
        self.appointment_service = appointment_service

    async def _add_unique(self, account: Account) -> Account:
        async with self.repository.batch() as accounts:
            if find_by_email(accounts, account.email):
                logger.warning(f"Account with email {account.email} already exists")
                raise Conflict("An account with this email already exists")
            accounts.append(account)
        logger.info(f"Created account {account.id}")
        return account

    async def create_from_appointment(self, appointment_id: str, notes: str = "") -> Account:
        if not clean_str(appointment_id):
            raise ValidationError("appointmentId is required")
        appointment = await self.appointment_service.get_appointment(appointment_id)

        account = Account(
            company=appointment.company_name or "",
            name=appointment.name or "",
            email=appointment.email or "",
            phone=appointment.phone or "",
            address=appointment.address or "",
            city=appointment.city or "",
            state=appointment.state or "",
            zip=appointment.zip or "",
            total_pickups=1,
            last_pickup=appointment.date,
            notes=clean_str(notes),
        )
        return await self._add_unique(account)

    async def create_public(self, data: Dict[str, Any]) -> Account:
        fields = {key: clean_str(data.get(key)) for key in PUBLIC_REQUIRED_FIELDS}
        if not all(fields.values()):
            raise ValidationError(
                "Please fill out: Company, Contact Name, Phone, Address, City, State, and Zip."
            )

        account = Account(
            company=fields["company"],
            name=fields["contact_name"],
            email=clean_str(data.get("email")),
            phone=fields["phone"],
            address=fields["address"],
            city=fields["city"],
            state=fields["state"],
            zip=fields["zip"],
            notes=clean_str(data.get("notes")),
        )
        return await self._add_unique(account)

    async def list_accounts(self) -> List[Account]:
        return await self.repository.list_all()

    async def get_account(self, account_id: str) -> Account:
        account = await self.repository.get(account_id)
        if not account:
            raise NotFound("Account not found")
        return account

    async def update_account(self, account_id: str, updates: Dict[str, Any]) -> Account:
        changes = {
            key: clean_str(value) for key, value in updates.items() if key in PATCHABLE_FIELDS
        }
        async with self.repository.batch() as accounts:
            idx = index_of(accounts, account_id)
            updated_data = accounts[idx].model_dump()
            updated_data.update(changes)
            accounts[idx] = Account(**updated_data)
            updated = accounts[idx]

        logger.info(f"Updated account {account_id}: {sorted(changes)}")
        return updated

    async def delete_account(self, account_id: str) -> None:
        async with self.repository.batch() as accounts:
            idx = index_of(accounts, account_id)
            removed = accounts.pop(idx)
        logger.info(f"Deleted account {account_id} with {len(removed.notifications)} notifications")
