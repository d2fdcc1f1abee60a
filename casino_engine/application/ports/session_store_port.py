"""Session store port (interface)"""
from abc import ABC, abstractmethod
from typing import Optional


class SessionStorePort(ABC):
    """Port for server-side login sessions"""

    @abstractmethod
    def create(self, user_id: int) -> str:
        """Start a session for a user, returns the session id"""
        pass

    @abstractmethod
    def get_user_id(self, session_id: str) -> Optional[int]:
        """User bound to a live session, None when unknown or expired"""
        pass

    @abstractmethod
    def destroy(self, session_id: str) -> None:
        pass

    @abstractmethod
    def purge_expired(self) -> int:
        """Drop expired sessions, returns how many were removed"""
        pass
