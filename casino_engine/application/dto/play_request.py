"""Play request DTO"""
import math
from dataclasses import dataclass
from typing import Any

from casino_engine.domain.errors import ValidationError


@dataclass
class PlayRequest:
    """Request DTO for a single bet"""

    user_id: int
    game_type: str
    bet: int

    @classmethod
    def from_dict(cls, user_id: int, game_type: str, data: dict) -> 'PlayRequest':
        """Create from the JSON body of POST /api/play/:gameType"""
        return cls(
            user_id=user_id,
            game_type=game_type,
            bet=parse_bet(data.get('bet'))
        )


def parse_bet(value: Any) -> int:
    """A bet is a positive whole number of coins; 10.0 is accepted as 10"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("invalid bet")
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ValidationError("invalid bet")
        value = int(value)
    if value <= 0:
        raise ValidationError("invalid bet")
    return value
