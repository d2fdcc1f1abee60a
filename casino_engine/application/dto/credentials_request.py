"""Credentials request DTO"""
from dataclasses import dataclass

from casino_engine.domain.errors import ValidationError


@dataclass
class CredentialsRequest:
    """Username and password for registration and login"""

    username: str
    password: str

    @classmethod
    def from_dict(cls, data: dict) -> 'CredentialsRequest':
        username = data.get('username')
        password = data.get('password')
        if not username or not password or not isinstance(username, str) or not isinstance(password, str):
            raise ValidationError("username and password are required")
        return cls(username=username, password=password)
