"""In-memory entity store implementation"""
import itertools
import logging
from contextlib import contextmanager
from datetime import datetime
from threading import Lock, RLock
from typing import Dict, Iterator, List, Optional

from casino_engine.application.ports.entity_store_port import EntityStorePort
from casino_engine.domain.entities.achievement import Achievement
from casino_engine.domain.entities.category import Category
from casino_engine.domain.entities.game import Difficulty, Game, GameType
from casino_engine.domain.entities.game_history import GameHistory, utcnow
from casino_engine.domain.entities.user import DEFAULT_COINS, DEFAULT_LEVEL, DEFAULT_XP, User
from casino_engine.domain.errors import ValidationError
from casino_engine.domain.services.progression import apply_xp

logger = logging.getLogger(__name__)


class InMemoryEntityStore(EntityStorePort):
    """Process-local implementation of the entity store.

    Every entity kind has its own map and id counter starting at 1. The
    ``lock`` guards map and counter access; each user additionally has a
    re-entrant lock so a whole play can run as one critical section while
    the individual coin/XP updates inside it take the same lock again.
    """

    def __init__(self, default_coins: int = DEFAULT_COINS):
        self.default_coins = default_coins
        self.lock = Lock()

        self.users: Dict[int, User] = {}
        self.categories: Dict[int, Category] = {}
        self.games: Dict[int, Game] = {}
        self.achievements: Dict[int, Achievement] = {}
        self.game_history: Dict[int, GameHistory] = {}

        self._user_ids = itertools.count(1)
        self._category_ids = itertools.count(1)
        self._game_ids = itertools.count(1)
        self._achievement_ids = itertools.count(1)
        self._history_ids = itertools.count(1)

        self._user_locks: Dict[int, RLock] = {}

    def _user_lock(self, user_id: int) -> RLock:
        with self.lock:
            user_lock = self._user_locks.get(user_id)
            if user_lock is None:
                user_lock = self._user_locks[user_id] = RLock()
            return user_lock

    # Users

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self.lock:
            users = list(self.users.values())
        return next((user for user in users if user.username == username), None)

    def create_user(self, username: str, password: str, coins: int = None,
                    level: int = None, xp: int = None) -> User:
        with self.lock:
            user = User(
                id=next(self._user_ids),
                username=username,
                password=password,
                coins=coins if coins is not None else self.default_coins,
                level=level if level is not None else DEFAULT_LEVEL,
                xp=xp if xp is not None else DEFAULT_XP
            )
            self.users[user.id] = user
        logger.info(f"Created user {user.id} ({user.username})")
        return user

    def update_user_coins(self, user_id: int, delta: int) -> Optional[User]:
        with self._user_lock(user_id):
            user = self.users.get(user_id)
            if user is None:
                return None
            user.coins += delta
            return user

    def update_user_xp(self, user_id: int, delta: int) -> Optional[User]:
        with self._user_lock(user_id):
            user = self.users.get(user_id)
            if user is None:
                return None
            level_before = user.level
            user.level, user.xp = apply_xp(user.level, user.xp, delta)
            if user.level > level_before:
                logger.info(f"User {user_id} reached level {user.level}")
            return user

    @contextmanager
    def user_transaction(self, user_id: int) -> Iterator[Optional[User]]:
        with self._user_lock(user_id):
            user = self.users.get(user_id)
            if user is None:
                yield None
                return

            saved = (user.coins, user.level, user.xp)
            try:
                yield user
            except Exception:
                if (user.coins, user.level, user.xp) != saved:
                    user.coins, user.level, user.xp = saved
                    logger.warning(f"Rolled back coins/level/xp for user {user_id}")
                raise

    # Catalog

    def get_categories(self) -> List[Category]:
        with self.lock:
            return list(self.categories.values())

    def get_category(self, category_id: int) -> Optional[Category]:
        return self.categories.get(category_id)

    def create_category(self, name: str, icon_name: str, games_count: int = None) -> Category:
        with self.lock:
            category = Category(
                id=next(self._category_ids),
                name=name,
                icon_name=icon_name,
                games_count=games_count if games_count is not None else 0
            )
            self.categories[category.id] = category
        return category

    def get_games(self) -> List[Game]:
        with self.lock:
            return list(self.games.values())

    def get_game(self, game_id: int) -> Optional[Game]:
        return self.games.get(game_id)

    def get_games_by_category(self, category_id: int) -> List[Game]:
        return [game for game in self.get_games() if game.category_id == category_id]

    def get_featured_games(self) -> List[Game]:
        return [game for game in self.get_games() if game.featured]

    def create_game(self, name: str, description: str, image_url: str, category_id: int,
                    type: str, difficulty: str, rating: int = None, featured: bool = None) -> Game:
        try:
            game_type = GameType(type)
            game_difficulty = Difficulty(difficulty)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        with self.lock:
            game = Game(
                id=next(self._game_ids),
                name=name,
                description=description,
                image_url=image_url,
                category_id=category_id,
                type=game_type,
                difficulty=game_difficulty,
                rating=rating if rating is not None else 45,
                featured=featured if featured is not None else False
            )
            self.games[game.id] = game
        return game

    # Achievements

    def get_achievements_by_user(self, user_id: int) -> List[Achievement]:
        with self.lock:
            achievements = list(self.achievements.values())
        return [a for a in achievements if a.user_id == user_id]

    def create_achievement(self, user_id: int, name: str, description: str,
                           unlocked: bool = None, unlocked_at: Optional[datetime] = None) -> Achievement:
        with self.lock:
            achievement = Achievement(
                id=next(self._achievement_ids),
                user_id=user_id,
                name=name,
                description=description,
                unlocked=unlocked if unlocked is not None else False,
                unlocked_at=unlocked_at
            )
            self.achievements[achievement.id] = achievement
        return achievement

    def unlock_achievement(self, achievement_id: int) -> Optional[Achievement]:
        with self.lock:
            achievement = self.achievements.get(achievement_id)
            if achievement is None:
                return None
            achievement.unlock(utcnow())
            return achievement

    # History

    def get_game_history_by_user(self, user_id: int) -> List[GameHistory]:
        with self.lock:
            history = list(self.game_history.values())
        return [entry for entry in history if entry.user_id == user_id]

    def create_game_history(self, user_id: int, game_type: str, bet: int, won: bool,
                            win_amount: int = None, played_at: Optional[datetime] = None) -> GameHistory:
        with self.lock:
            entry = GameHistory(
                id=next(self._history_ids),
                user_id=user_id,
                game_type=game_type,
                bet=bet,
                won=won,
                win_amount=win_amount if win_amount is not None else 0,
                played_at=played_at or utcnow()
            )
            self.game_history[entry.id] = entry
        return entry
