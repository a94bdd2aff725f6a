from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tire_pickup.Core.Exceptions.errors import Unauthorized
from tire_pickup.dependencies import get_session_service
from tire_pickup.Domains.Session.Services.session_service import SessionService

# Missing or non-Bearer headers yield None so the error keeps the `{"error": ...}` shape
admin_security = HTTPBearer(
    scheme_name="Admin Bearer Token",
    description="Token returned by POST /api/admin/login",
    auto_error=False,
)


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(admin_security),
    sessions: SessionService = Depends(get_session_service),
) -> str:
    """FastAPI dependency guarding admin routes with `Authorization: Bearer <token>`."""
    token = credentials.credentials if credentials else None
    if not sessions.authenticate(token):
        raise Unauthorized()
    return token
