"""Game outcome resolution"""
import random
from dataclasses import dataclass
from typing import Callable, Optional

from casino_engine.domain.entities.payout_table import PayoutTable
from casino_engine.domain.errors import ValidationError


@dataclass(frozen=True)
class GameOutcome:
    won: bool
    win_amount: int


class GameResolver:
    """Draws a win/lose outcome from the payout table.

    ``rng`` returns a uniform sample in [0, 1). The default is the process
    RNG, which is neither seeded nor cryptographically secure; outcomes stay
    trustworthy only because the draw happens server side.
    """

    def __init__(self, payout_table: Optional[PayoutTable] = None, rng: Callable[[], float] = None):
        self.payout_table = payout_table or PayoutTable()
        self.rng = rng or random.random

    def supports(self, game_type: str) -> bool:
        return self.payout_table.supports(game_type)

    def resolve(self, game_type: str, bet: int) -> GameOutcome:
        """Draw one outcome for ``bet`` coins on ``game_type``"""
        rule = self.payout_table.get_rule(game_type)
        if rule is None:
            raise ValidationError("invalid game type")

        won = self.rng() < rule.win_probability
        win_amount = rule.payout(bet) if won else 0
        return GameOutcome(won=won, win_amount=win_amount)
