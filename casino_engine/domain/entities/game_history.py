"""Game history entity"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GameHistory:
    """Domain entity representing one resolved play"""

    user_id: int
    game_type: str
    bet: int
    won: bool
    win_amount: int = 0
    played_at: datetime = field(default_factory=utcnow)
    id: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary (REST API)"""
        return {
            "id": self.id,
            "userId": self.user_id,
            "gameType": self.game_type,
            "bet": self.bet,
            "won": self.won,
            "winAmount": self.win_amount,
            "playedAt": self.played_at.isoformat()
        }
