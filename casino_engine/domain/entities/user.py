"""User entity"""
from dataclasses import dataclass


DEFAULT_COINS = 1000
DEFAULT_LEVEL = 1
DEFAULT_XP = 0


@dataclass
class User:
    """Player account with its coin balance and progression"""

    id: int
    username: str
    password: str
    coins: int = DEFAULT_COINS
    level: int = DEFAULT_LEVEL
    xp: int = DEFAULT_XP

    def snapshot(self) -> dict:
        """Public view of the user, never includes the password"""
        return {
            "id": self.id,
            "username": self.username,
            "coins": self.coins,
            "level": self.level,
            "xp": self.xp
        }
