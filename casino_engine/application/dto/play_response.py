"""Play response DTO"""
from dataclasses import dataclass


@dataclass
class PlayResponse:
    """Response DTO for a resolved play"""

    won: bool
    win_amount: int
    xp_earned: int
    user: dict
    success: bool = True

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary (REST API)"""
        return {
            "success": self.success,
            "won": self.won,
            "winAmount": self.win_amount,
            "xpEarned": self.xp_earned,
            "user": self.user
        }
