from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict

from loguru import logger

from tire_pickup.Core.Models.base import generate_id, utcnow
from tire_pickup.Domains.Session.Interfaces.session_store import SessionStore


@dataclass
class Session:
    role: str
    created_at: datetime


class InMemorySessionStore(SessionStore):
    """Process-local sessions; a restart invalidates every token."""

    def __init__(self, ttl: timedelta = timedelta(hours=24), clock: Callable[[], datetime] = utcnow):
        self.ttl = ttl
        self.clock = clock
        self._sessions: Dict[str, Session] = {}

    def issue(self, role: str) -> str:
        token = generate_id("adm_")
        self._sessions[token] = Session(role=role, created_at=self.clock())
        return token

    def validate(self, token: str, role: str) -> bool:
        session = self._sessions.get(token)
        if not session or session.role != role:
            return False
        if self.clock() - session.created_at > self.ttl:
            logger.info("Admin session expired, evicting token")
            self.expire(token)
            return False
        return True

    def expire(self, token: str) -> None:
        self._sessions.pop(token, None)

    def __len__(self) -> int:
        return len(self._sessions)
