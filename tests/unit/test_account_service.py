"""Test account creation, email uniqueness and admin edits."""
import pytest

from tire_pickup.Core.Exceptions.errors import Conflict, NotFound, ValidationError


@pytest.fixture
def public_account_data():
    def _create(**overrides):
        data = {
            "company": "Acme Auto",
            "contact_name": "Dana Reyes",
            "email": "dana@acme.test",
            "phone": "555-0101",
            "address": "12 Main St",
            "city": "Springfield",
            "state": "IL",
            "zip": "62701",
        }
        data.update(overrides)
        return data

    return _create


@pytest.mark.asyncio
async def test_create_from_appointment_copies_contact(account_service, appointment_service, appointment_data):
    appointment = await appointment_service.create_appointment(appointment_data())

    account = await account_service.create_from_appointment(appointment.id, "good customer")

    assert account.id.startswith("acc_")
    assert account.company == "Acme Auto"
    assert account.name == "Dana Reyes"
    assert account.email == "dana@acme.test"
    assert account.total_pickups == 1
    assert account.last_pickup == "2026-11-03"
    assert account.notifications == []
    assert account.notes == "good customer"


@pytest.mark.asyncio
async def test_create_from_unknown_appointment_raises_not_found(account_service):
    with pytest.raises(NotFound):
        await account_service.create_from_appointment("apt_missing")


@pytest.mark.asyncio
async def test_create_from_appointment_requires_id(account_service):
    with pytest.raises(ValidationError):
        await account_service.create_from_appointment(None)


@pytest.mark.asyncio
async def test_duplicate_email_conflicts_case_insensitively(
    account_service, appointment_service, appointment_data, public_account_data
):
    await account_service.create_public(public_account_data(email="Dana@Acme.TEST"))
    appointment = await appointment_service.create_appointment(appointment_data())

    with pytest.raises(Conflict):
        await account_service.create_from_appointment(appointment.id)
    with pytest.raises(Conflict):
        await account_service.create_public(public_account_data(email=" dana@acme.test "))

    assert len(await account_service.list_accounts()) == 1


@pytest.mark.asyncio
async def test_empty_email_never_conflicts(account_service, public_account_data):
    await account_service.create_public(public_account_data(email=""))
    await account_service.create_public(public_account_data(email=None))

    assert len(await account_service.list_accounts()) == 2


@pytest.mark.asyncio
async def test_create_public_initialises_counters(account_service, public_account_data):
    account = await account_service.create_public(public_account_data())

    assert account.name == "Dana Reyes"
    assert account.total_pickups == 0
    assert account.last_pickup is None


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["company", "contact_name", "phone", "address", "city", "state", "zip"])
async def test_create_public_requires_contact_fields(account_service, public_account_data, missing):
    with pytest.raises(ValidationError):
        await account_service.create_public(public_account_data(**{missing: "  "}))


@pytest.mark.asyncio
async def test_patch_applies_allow_listed_fields_only(account_service, public_account_data):
    account = await account_service.create_public(public_account_data())

    updated = await account_service.update_account(
        account.id, {"phone": "555-0199", "notes": "prefers mornings", "total_pickups": 99}
    )

    assert updated.phone == "555-0199"
    assert updated.notes == "prefers mornings"
    assert updated.total_pickups == 0


@pytest.mark.asyncio
async def test_patch_does_not_recheck_email_uniqueness(account_service, public_account_data):
    await account_service.create_public(public_account_data(email="a@x.test"))
    second = await account_service.create_public(public_account_data(email="b@x.test"))

    updated = await account_service.update_account(second.id, {"email": "A@x.test"})

    assert updated.email == "A@x.test"


@pytest.mark.asyncio
async def test_get_and_patch_unknown_account_raise_not_found(account_service):
    with pytest.raises(NotFound):
        await account_service.get_account("acc_missing")
    with pytest.raises(NotFound):
        await account_service.update_account("acc_missing", {"notes": "x"})


@pytest.mark.asyncio
async def test_delete_removes_account_with_notifications(
    account_service, notification_scheduler, public_account_data
):
    account = await account_service.create_public(public_account_data())
    await notification_scheduler.add_notification(account.id, "Pickup due", "2026-11-10", recurring=True)

    await account_service.delete_account(account.id)

    assert await account_service.list_accounts() == []
    with pytest.raises(NotFound):
        await account_service.delete_account(account.id)
