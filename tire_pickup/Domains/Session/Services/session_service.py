import secrets
from typing import Optional

from loguru import logger

from tire_pickup.Core.Exceptions.errors import InvalidCredentials, ValidationError
from tire_pickup.Domains.Session.Interfaces.session_store import SessionStore

ADMIN_ROLE = "admin"


class SessionService:
    def __init__(self, store: SessionStore, admin_password: str):
        self.store = store
        self._admin_password = admin_password

    def login(self, password: Optional[str]) -> str:
        if not isinstance(password, str):
            raise ValidationError("Password required")
        if not secrets.compare_digest(password.encode(), self._admin_password.encode()):
            logger.warning("Rejected admin login attempt")
            raise InvalidCredentials()

        token = self.store.issue(ADMIN_ROLE)
        logger.info("Admin session issued")
        return token

    def authenticate(self, token: Optional[str]) -> bool:
        if not token:
            return False
        return self.store.validate(token, ADMIN_ROLE)
