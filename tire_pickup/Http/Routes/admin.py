from fastapi import APIRouter, Depends

from tire_pickup.dependencies import get_session_service
from tire_pickup.Domains.Session.Services.session_service import SessionService
from tire_pickup.Http.DTOs.auth_schemas import LoginRequest, LoginResponse
from tire_pickup.Http.DTOs.common_schemas import APIErrorResponse, OkResponse
from tire_pickup.Http.Security.admin_auth import require_admin

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Exchange the admin password for a bearer token",
    responses={400: {"model": APIErrorResponse}, 401: {"model": APIErrorResponse}},
)
async def login(body: LoginRequest, sessions: SessionService = Depends(get_session_service)):
    return LoginResponse(token=sessions.login(body.password))


@router.get(
    "/session",
    response_model=OkResponse,
    summary="Check that the bearer token is still valid",
    dependencies=[Depends(require_admin)],
    responses={401: {"model": APIErrorResponse}},
)
async def check_session():
    return OkResponse()
