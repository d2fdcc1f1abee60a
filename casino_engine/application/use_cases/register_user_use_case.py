"""Register user use case"""
from threading import Lock

from casino_engine.application.dto.credentials_request import CredentialsRequest
from casino_engine.application.ports.entity_store_port import EntityStorePort
from casino_engine.domain.entities.user import User
from casino_engine.domain.errors import ValidationError
from casino_engine.metrics import BusinessMetrics


class RegisterUserUseCase:
    """Creates an account after checking the username is free"""

    def __init__(self, entity_store: EntityStorePort):
        self.entity_store = entity_store
        self.lock = Lock()

    def execute(self, request: CredentialsRequest) -> User:
        # the store does not enforce unique usernames
        with self.lock:
            if self.entity_store.get_user_by_username(request.username) is not None:
                raise ValidationError("username already taken")
            user = self.entity_store.create_user(request.username, request.password)

        BusinessMetrics.REGISTRATIONS.inc()
        return user
