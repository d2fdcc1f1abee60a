from .play_request import PlayRequest
from .play_response import PlayResponse
from .credentials_request import CredentialsRequest

__all__ = [
    'PlayRequest',
    'PlayResponse',
    'CredentialsRequest'
]
