from fastapi import APIRouter, Depends

from tire_pickup.dependencies import get_account_service, get_config_service
from tire_pickup.Domains.Account.Services.account_service import AccountService
from tire_pickup.Domains.Config.Services.config_service import ConfigService
from tire_pickup.Http.DTOs.account_schemas import AccountResponse, PublicAccountCreateRequest
from tire_pickup.Http.DTOs.common_schemas import APIErrorResponse, OkResponse

router = APIRouter(tags=["Public"])


@router.get(
    "/api/config",
    summary="Business configuration",
    description="Name, phone, daily capacity, time windows, blackout dates and timezone for the booking form.",
)
async def get_config(service: ConfigService = Depends(get_config_service)):
    return await service.public_view()


@router.post(
    "/api/public/accounts",
    response_model=AccountResponse,
    status_code=201,
    summary="Self-service account registration",
    responses={400: {"model": APIErrorResponse}, 409: {"model": APIErrorResponse}},
)
async def create_public_account(
    body: PublicAccountCreateRequest,
    service: AccountService = Depends(get_account_service),
):
    account = await service.create_public(body.model_dump())
    return AccountResponse(account=account)


@router.get("/healthz", response_model=OkResponse, summary="Liveness check")
async def healthz():
    return OkResponse()
