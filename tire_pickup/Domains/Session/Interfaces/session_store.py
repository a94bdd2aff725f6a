from abc import ABC, abstractmethod


class SessionStore(ABC):
    @abstractmethod
    def issue(self, role: str) -> str:
        """Creates a session for `role` and returns its opaque token"""
        pass

    @abstractmethod
    def validate(self, token: str, role: str) -> bool:
        """True if `token` maps to a live session for `role`; evicts it if expired"""
        pass

    @abstractmethod
    def expire(self, token: str) -> None:
        pass
