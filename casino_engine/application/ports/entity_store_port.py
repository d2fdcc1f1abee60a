"""Entity store port (interface)"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import ContextManager, List, Optional

from casino_engine.domain.entities.achievement import Achievement
from casino_engine.domain.entities.category import Category
from casino_engine.domain.entities.game import Game
from casino_engine.domain.entities.game_history import GameHistory
from casino_engine.domain.entities.user import User


class EntityStorePort(ABC):
    """Port for users, catalog, achievements and play history"""

    # Users

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        """First user with this username"""
        pass

    @abstractmethod
    def create_user(self, username: str, password: str, coins: int = None,
                    level: int = None, xp: int = None) -> User:
        pass

    @abstractmethod
    def update_user_coins(self, user_id: int, delta: int) -> Optional[User]:
        """Add ``delta`` to the balance without clamping"""
        pass

    @abstractmethod
    def update_user_xp(self, user_id: int, delta: int) -> Optional[User]:
        """Add ``delta`` XP and apply the level rollover"""
        pass

    @abstractmethod
    def user_transaction(self, user_id: int) -> ContextManager[Optional[User]]:
        """Hold the user's lock; restore coins/level/xp if the block raises"""
        pass

    # Catalog

    @abstractmethod
    def get_categories(self) -> List[Category]:
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        pass

    @abstractmethod
    def create_category(self, name: str, icon_name: str, games_count: int = None) -> Category:
        pass

    @abstractmethod
    def get_games(self) -> List[Game]:
        pass

    @abstractmethod
    def get_game(self, game_id: int) -> Optional[Game]:
        pass

    @abstractmethod
    def get_games_by_category(self, category_id: int) -> List[Game]:
        pass

    @abstractmethod
    def get_featured_games(self) -> List[Game]:
        pass

    @abstractmethod
    def create_game(self, name: str, description: str, image_url: str, category_id: int,
                    type: str, difficulty: str, rating: int = None, featured: bool = None) -> Game:
        pass

    # Achievements

    @abstractmethod
    def get_achievements_by_user(self, user_id: int) -> List[Achievement]:
        pass

    @abstractmethod
    def create_achievement(self, user_id: int, name: str, description: str,
                           unlocked: bool = None, unlocked_at: Optional[datetime] = None) -> Achievement:
        pass

    @abstractmethod
    def unlock_achievement(self, achievement_id: int) -> Optional[Achievement]:
        pass

    # History

    @abstractmethod
    def get_game_history_by_user(self, user_id: int) -> List[GameHistory]:
        pass

    @abstractmethod
    def create_game_history(self, user_id: int, game_type: str, bet: int, won: bool,
                            win_amount: int = None, played_at: Optional[datetime] = None) -> GameHistory:
        """Append a history row, returns it with its ID"""
        pass
