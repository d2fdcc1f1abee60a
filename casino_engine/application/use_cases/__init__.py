from .play_game_use_case import PlayGameUseCase
from .register_user_use_case import RegisterUserUseCase
from .authenticate_user_use_case import AuthenticateUserUseCase
from .browse_catalog_use_case import BrowseCatalogUseCase
from .player_records_use_case import PlayerRecordsUseCase

__all__ = [
    'PlayGameUseCase',
    'RegisterUserUseCase',
    'AuthenticateUserUseCase',
    'BrowseCatalogUseCase',
    'PlayerRecordsUseCase'
]
