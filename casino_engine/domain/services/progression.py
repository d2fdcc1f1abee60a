"""XP accrual and level progression.

Levels advance when accumulated XP reaches ``level * 100``. The rollover is
evaluated once per update: an update worth two or more thresholds still
advances a single level and keeps the surplus XP.
"""
from typing import Tuple

XP_PER_LEVEL = 100
BET_XP_DIVISOR = 10
WIN_XP_DIVISOR = 20


def xp_threshold(level: int) -> int:
    """XP needed to leave ``level``"""
    return level * XP_PER_LEVEL


def apply_xp(level: int, xp: int, xp_delta: int) -> Tuple[int, int]:
    """Return the (level, xp) pair after earning ``xp_delta``"""
    xp += xp_delta
    threshold = xp_threshold(level)
    if xp >= threshold:
        return level + 1, xp - threshold
    return level, xp


def compute_xp_earned(bet: int, won: bool, win_amount: int) -> int:
    """Base XP for the wager plus a bonus for the winnings"""
    earned = bet // BET_XP_DIVISOR
    if won:
        earned += win_amount // WIN_XP_DIVISOR
    return earned
