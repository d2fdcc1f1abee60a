"""Achievement entity"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Achievement:
    """Per-user achievement, unlocked at most once"""

    id: int
    user_id: int
    name: str
    description: str
    unlocked: bool = False
    unlocked_at: Optional[datetime] = None

    def unlock(self, when: datetime) -> None:
        self.unlocked = True
        self.unlocked_at = when

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "description": self.description,
            "unlocked": self.unlocked,
            "unlockedAt": self.unlocked_at.isoformat() if self.unlocked_at else None
        }
