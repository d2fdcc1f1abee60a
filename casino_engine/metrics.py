"""Prometheus business metrics for the casino engine"""
from prometheus_client import Counter, Histogram


class BusinessMetrics:
    """Counters and histograms exposed on /metrics"""

    PLAYS = Counter(
        'casino_plays_total',
        'Resolved plays',
        ['game_type', 'outcome']
    )
    COINS_WAGERED = Counter(
        'casino_coins_wagered_total',
        'Coins debited by resolved plays',
        ['game_type']
    )
    COINS_PAID = Counter(
        'casino_coins_paid_total',
        'Coins credited to winners',
        ['game_type']
    )
    REJECTED_PLAYS = Counter(
        'casino_rejected_plays_total',
        'Plays refused before any coins moved',
        ['reason']
    )
    REGISTRATIONS = Counter(
        'casino_registrations_total',
        'Accounts created'
    )
    LOGINS = Counter(
        'casino_logins_total',
        'Login attempts',
        ['result']
    )
    PLAY_LATENCY = Histogram(
        'casino_play_duration_seconds',
        'Time spent resolving a play'
    )

    @classmethod
    def track_play(cls, game_type: str, bet: float, won: bool, win_amount: int) -> None:
        cls.PLAYS.labels(game_type=game_type, outcome='win' if won else 'loss').inc()
        cls.COINS_WAGERED.labels(game_type=game_type).inc(bet)
        if won:
            cls.COINS_PAID.labels(game_type=game_type).inc(win_amount)

    @classmethod
    def track_rejection(cls, reason: str) -> None:
        cls.REJECTED_PLAYS.labels(reason=reason).inc()
