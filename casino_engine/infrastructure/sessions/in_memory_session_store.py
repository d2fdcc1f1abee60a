"""In-memory session store implementation"""
import logging
import secrets
import time
from threading import Lock
from typing import Callable, Dict, Optional, Tuple

from casino_engine.application.ports.session_store_port import SessionStorePort

logger = logging.getLogger(__name__)

SESSION_MAX_AGE = 7 * 24 * 3600


class InMemorySessionStore(SessionStorePort):
    """Maps session ids to user ids until they expire"""

    def __init__(self, max_age: float = SESSION_MAX_AGE, clock: Callable[[], float] = None):
        self.max_age = max_age
        self.clock = clock or time.time
        self.lock = Lock()
        self.sessions: Dict[str, Tuple[int, float]] = {}

    def create(self, user_id: int) -> str:
        session_id = secrets.token_urlsafe(32)
        with self.lock:
            self.sessions[session_id] = (user_id, self.clock() + self.max_age)
        return session_id

    def get_user_id(self, session_id: str) -> Optional[int]:
        with self.lock:
            entry = self.sessions.get(session_id)
            if entry is None:
                return None
            user_id, expires_at = entry
            if expires_at <= self.clock():
                del self.sessions[session_id]
                return None
            return user_id

    def destroy(self, session_id: str) -> None:
        with self.lock:
            self.sessions.pop(session_id, None)

    def purge_expired(self) -> int:
        now = self.clock()
        with self.lock:
            expired = [sid for sid, (_, expires_at) in self.sessions.items() if expires_at <= now]
            for session_id in expired:
                del self.sessions[session_id]
        if expired:
            logger.info(f"Purged {len(expired)} expired sessions")
        return len(expired)
