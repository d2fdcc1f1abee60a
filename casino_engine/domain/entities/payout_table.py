"""Payout table configuration for the supported game types"""
import math
from dataclasses import dataclass
from typing import Dict, Optional

from casino_engine.domain.entities.game import GameType


@dataclass(frozen=True)
class PayoutRule:
    """Win probability and payout multiplier for one game type"""

    win_probability: float
    multiplier: float

    def payout(self, bet: int) -> int:
        """Coins paid on a win, floored to a whole coin"""
        return math.floor(bet * self.multiplier)


@dataclass
class PayoutTable:
    """Fixed-probability payout rules keyed by game type"""

    RULES: Dict[GameType, PayoutRule] = None

    def __post_init__(self):
        if self.RULES is None:
            self.RULES = {
                GameType.SLOTS: PayoutRule(win_probability=0.40, multiplier=2),
                GameType.ROULETTE: PayoutRule(win_probability=0.45, multiplier=2),
                GameType.BLACKJACK: PayoutRule(win_probability=0.48, multiplier=1.5),
                GameType.POKER: PayoutRule(win_probability=0.35, multiplier=3),
            }

    def get_rule(self, game_type: str) -> Optional[PayoutRule]:
        """Rule for a game type identifier, None when unsupported"""
        try:
            return self.RULES.get(GameType(game_type))
        except ValueError:
            return None

    def supports(self, game_type: str) -> bool:
        return self.get_rule(game_type) is not None
