"""Authenticate user use case"""
import logging

from casino_engine.application.dto.credentials_request import CredentialsRequest
from casino_engine.application.ports.entity_store_port import EntityStorePort
from casino_engine.domain.entities.user import User
from casino_engine.domain.errors import UnauthorizedError
from casino_engine.metrics import BusinessMetrics

logger = logging.getLogger(__name__)


class AuthenticateUserUseCase:
    """Checks a username/password pair.

    Passwords are stored and compared as plain text.
    """

    def __init__(self, entity_store: EntityStorePort):
        self.entity_store = entity_store

    def execute(self, request: CredentialsRequest) -> User:
        user = self.entity_store.get_user_by_username(request.username)
        if user is None:
            BusinessMetrics.LOGINS.labels(result="unknown_user").inc()
            raise UnauthorizedError("Incorrect username.")
        if user.password != request.password:
            BusinessMetrics.LOGINS.labels(result="wrong_password").inc()
            logger.warning(f"Failed login for user {user.id}")
            raise UnauthorizedError("Incorrect password.")

        BusinessMetrics.LOGINS.labels(result="success").inc()
        return user
