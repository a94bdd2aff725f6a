from fastapi import APIRouter, Depends

from tire_pickup.dependencies import get_account_service, get_notification_scheduler
from tire_pickup.Domains.Account.Services.account_service import AccountService
from tire_pickup.Domains.Notification.Services.notification_scheduler import NotificationScheduler
from tire_pickup.Http.DTOs.account_schemas import (
    AccountFromAppointmentRequest,
    AccountListResponse,
    AccountPatchRequest,
    AccountResponse,
    NotificationCreateRequest,
    NotificationPatchRequest,
    NotificationResponse,
)
from tire_pickup.Http.DTOs.common_schemas import APIErrorResponse, OkResponse
from tire_pickup.Http.Security.admin_auth import require_admin

router = APIRouter(
    prefix="/api/accounts",
    tags=["Accounts"],
    dependencies=[Depends(require_admin)],
    responses={401: {"model": APIErrorResponse}, 404: {"model": APIErrorResponse}},
)


@router.get("", response_model=AccountListResponse, summary="List accounts")
async def list_accounts(service: AccountService = Depends(get_account_service)):
    return AccountListResponse(accounts=await service.list_accounts())


@router.post(
    "",
    response_model=AccountResponse,
    status_code=201,
    summary="Create an account from an appointment",
    responses={409: {"model": APIErrorResponse}},
)
async def create_account(
    body: AccountFromAppointmentRequest,
    service: AccountService = Depends(get_account_service),
):
    account = await service.create_from_appointment(body.appointment_id, body.notes)
    return AccountResponse(account=account)


@router.get("/{account_id}", response_model=AccountResponse, summary="Get account details")
async def get_account(account_id: str, service: AccountService = Depends(get_account_service)):
    return AccountResponse(account=await service.get_account(account_id))


@router.patch("/{account_id}", response_model=AccountResponse, summary="Update an account")
async def update_account(
    account_id: str,
    body: AccountPatchRequest,
    service: AccountService = Depends(get_account_service),
):
    account = await service.update_account(account_id, body.model_dump(exclude_unset=True))
    return AccountResponse(account=account)


@router.delete("/{account_id}", response_model=OkResponse, summary="Delete an account")
async def delete_account(account_id: str, service: AccountService = Depends(get_account_service)):
    await service.delete_account(account_id)
    return OkResponse()


# --- Notifications ---


@router.post(
    "/{account_id}/notifications",
    response_model=NotificationResponse,
    status_code=201,
    summary="Add a notification",
    description="A recurring notification is expanded into the root plus 12 follow-ups.",
)
async def add_notification(
    account_id: str,
    body: NotificationCreateRequest,
    scheduler: NotificationScheduler = Depends(get_notification_scheduler),
):
    notification = await scheduler.add_notification(
        account_id,
        body.message,
        body.date,
        recurring=body.recurring,
        recurrence_weeks=body.recurrence_weeks,
    )
    return NotificationResponse(notification=notification)


@router.patch(
    "/{account_id}/notifications/{notification_id}",
    response_model=NotificationResponse,
    summary="Edit one notification",
)
async def update_notification(
    account_id: str,
    notification_id: str,
    body: NotificationPatchRequest,
    scheduler: NotificationScheduler = Depends(get_notification_scheduler),
):
    notification = await scheduler.update_notification(
        account_id, notification_id, body.model_dump(exclude_unset=True)
    )
    return NotificationResponse(notification=notification)


@router.delete(
    "/{account_id}/notifications/{notification_id}",
    response_model=OkResponse,
    summary="Remove one notification",
)
async def delete_notification(
    account_id: str,
    notification_id: str,
    scheduler: NotificationScheduler = Depends(get_notification_scheduler),
):
    await scheduler.delete_notification(account_id, notification_id)
    return OkResponse()
