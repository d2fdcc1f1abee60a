"""Dependency Injection Container"""
from typing import Callable, Optional

from casino_engine.config.settings import Settings
from casino_engine.domain.services.game_resolver import GameResolver
from casino_engine.infrastructure.persistence.catalog_seed import seed_catalog
from casino_engine.infrastructure.persistence.in_memory_entity_store import InMemoryEntityStore
from casino_engine.infrastructure.sessions.in_memory_session_store import InMemorySessionStore
from casino_engine.application.use_cases.play_game_use_case import PlayGameUseCase
from casino_engine.application.use_cases.register_user_use_case import RegisterUserUseCase
from casino_engine.application.use_cases.authenticate_user_use_case import AuthenticateUserUseCase
from casino_engine.application.use_cases.browse_catalog_use_case import BrowseCatalogUseCase
from casino_engine.application.use_cases.player_records_use_case import PlayerRecordsUseCase


class Container:
    """Simple DI container for the casino engine.

    Each instance owns its own store, so tests can build a fresh one per
    case. The process entry point uses ``get_instance``.
    """

    _instance = None

    def __init__(self, settings: Optional[Settings] = None, rng: Callable[[], float] = None):
        self.settings = settings or Settings.from_env()
        self._initialize(rng)

    def _initialize(self, rng: Optional[Callable[[], float]]):
        """Initialize all dependencies"""
        # Stores
        self.entity_store = InMemoryEntityStore(default_coins=self.settings.default_coins)
        self.session_store = InMemorySessionStore(max_age=self.settings.session_max_age)
        if self.settings.seed_catalog:
            seed_catalog(self.entity_store)

        self.game_resolver = GameResolver(rng=rng)

        # Use cases
        self.play_use_case = PlayGameUseCase(
            entity_store=self.entity_store,
            game_resolver=self.game_resolver
        )
        self.register_use_case = RegisterUserUseCase(self.entity_store)
        self.authenticate_use_case = AuthenticateUserUseCase(self.entity_store)
        self.catalog_use_case = BrowseCatalogUseCase(self.entity_store)
        self.records_use_case = PlayerRecordsUseCase(self.entity_store)

    @classmethod
    def get_instance(cls) -> 'Container':
        """Get the process-wide instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def session_dependencies(self) -> dict:
        """Handler kwargs shared by every API route"""
        return {
            "entity_store": self.entity_store,
            "session_store": self.session_store
        }
